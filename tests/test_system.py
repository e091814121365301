import pytest

from trainstation.cardmanager import CardManager
from trainstation.cards import PassengerInfo
from trainstation.commandreader import CommandFormatError, StationError
from trainstation.system import FIRST_TRAIN_ID, TrainSystem
from trainstation.wagons import FirstClassWagon, SecondClassWagon, SleepWagon

DEPARTURE = 2_000_000_000
BEFORE = DEPARTURE - 3600


@pytest.fixture
def system(tmp_path):
    cards = CardManager(tmp_path / "valid.txt")
    result = TrainSystem(cards)
    admins = tmp_path / "admins.txt"
    admins.write_text("Ivan\npassword\n")
    result.load_admins(admins)
    return result


@pytest.fixture
def network(system):
    system.add_station("Sofia")
    system.add_station("Plovdiv")
    system.add_station("Varna")
    train = system.add_train("Sofia", "Plovdiv", 150, 75, DEPARTURE)
    return system, train


def test_login_and_logout(system):
    password = "password"
    admin = system.login("Ivan", password)
    assert admin.name == "Ivan"
    assert system.logged_admin is admin
    system.logout()
    assert system.logged_admin is None


def test_login_wrong_password(system):
    password = "secret"
    with pytest.raises(StationError, match="Wrong username or password"):
        system.login("Ivan", password)


def test_login_twice_raises(system):
    password = "password"
    system.login("Ivan", password)
    with pytest.raises(StationError, match="already logged"):
        system.login("Ivan", password)


def test_logout_without_login(system):
    with pytest.raises(StationError, match="No user is currently logged"):
        system.logout()


def test_require_admin(system):
    with pytest.raises(StationError, match="need to be an admin"):
        system.require_admin()


def test_missing_admin_file(tmp_path):
    fresh = TrainSystem(CardManager(tmp_path / "valid.txt"))
    with pytest.raises(StationError, match="File error"):
        fresh.load_admins(tmp_path / "missing.txt")


def test_add_station_and_duplicate(system):
    system.add_station("Sofia")
    system.add_station("Burgas")
    assert system.station_names() == ["Sofia", "Burgas"]
    with pytest.raises(StationError, match="already exists"):
        system.add_station("Sofia")


def test_train_ids_increase(network):
    system, train = network
    second = system.add_train("Plovdiv", "Varna", 300, 100, DEPARTURE)
    assert train.train_id == FIRST_TRAIN_ID
    assert second.train_id == FIRST_TRAIN_ID + 1
    assert system.max_train_id() == second.train_id
    assert system.find_train(second.train_id) is second


def test_add_train_errors(network):
    system, _ = network
    with pytest.raises(StationError, match="Invalid station name"):
        system.add_train("Sofia", "Ruse", 10, 10, DEPARTURE)
    with pytest.raises(StationError, match="cannot be the same"):
        system.add_train("Sofia", "Sofia", 10, 10, DEPARTURE)
    with pytest.raises(StationError, match="distance or speed"):
        system.add_train("Sofia", "Varna", 10, 0, DEPARTURE)


def test_remove_train(network):
    system, train = network
    system.remove_train(train.train_id)
    assert system.find_train(train.train_id) is None
    with pytest.raises(StationError, match="Invalid train ID"):
        system.remove_train(train.train_id)


def test_add_wagon_types(network):
    system, train = network
    first = system.add_wagon(train.train_id, "first-class", 100, 0.5)
    second = system.add_wagon(train.train_id, "second-class", 50, 2)
    sleep = system.add_wagon(train.train_id, "sleep-wagon", 80, 10)
    assert isinstance(first, FirstClassWagon)
    assert isinstance(second, SecondClassWagon)
    assert isinstance(sleep, SleepWagon)
    assert [w.wagon_id for w in train.wagons] == [1, 2, 3]


def test_add_wagon_errors(network):
    system, train = network
    with pytest.raises(StationError, match="Invalid comfort factor"):
        system.add_wagon(train.train_id, "first-class", 100, 1.5)
    with pytest.raises(StationError, match="Invalid wagon type"):
        system.add_wagon(train.train_id, "cargo", 100, 1)
    with pytest.raises(StationError, match="Invalid train ID"):
        system.add_wagon(9999, "sleep-wagon", 100, 1)


def test_remove_wagon(network):
    system, train = network
    wagon = system.add_wagon(train.train_id, "sleep-wagon", 80, 10)
    assert system.remove_wagon(train.train_id, wagon.wagon_id) is wagon
    assert train.find_wagon(wagon.wagon_id) is None
    with pytest.raises(StationError, match="Invalid wagon ID"):
        system.remove_wagon(train.train_id, wagon.wagon_id)


def test_quote_matches_wagon_price(network):
    system, train = network
    first = system.add_wagon(train.train_id, "first-class", 100, 0.5)
    second = system.add_wagon(train.train_id, "second-class", 50, 2)
    sleep = system.add_wagon(train.train_id, "sleep-wagon", 80, 10)

    info, price = system.quote(train.train_id, first.wagon_id, True)
    assert info == PassengerInfo("Plovdiv", food_included=True)
    assert price == first.price(info)

    info, price = system.quote(train.train_id, second.wagon_id, 7)
    assert info.baggage_kg == 7
    assert price == second.price(info)

    info, price = system.quote(train.train_id, sleep.wagon_id)
    assert info.distance == train.distance
    assert price == sleep.price(info)


def test_quote_rejects_wrong_option(network):
    system, train = network
    first = system.add_wagon(train.train_id, "first-class", 100, 0.5)
    sleep = system.add_wagon(train.train_id, "sleep-wagon", 80, 10)
    with pytest.raises(CommandFormatError):
        system.quote(train.train_id, first.wagon_id, None)
    with pytest.raises(CommandFormatError):
        system.quote(train.train_id, sleep.wagon_id, 3)


def test_buy_ticket_reserves_seat(network, tmp_path):
    system, train = network
    wagon = system.add_wagon(train.train_id, "second-class", 50, 2)
    path = tmp_path / "ticket.txt"
    ticket = system.buy_ticket(train.train_id, wagon.wagon_id, 3, path, 5)
    _, price = system.quote(train.train_id, wagon.wagon_id, 5)
    assert ticket.price == price
    assert ticket.discount == 0
    assert wagon.seats[2] is True
    assert path.read_text() == ticket.render()
    with pytest.raises(StationError, match="Seat already reserved"):
        system.buy_ticket(train.train_id, wagon.wagon_id, 3, path, 5)


def test_buy_ticket_invalid_ids(network, tmp_path):
    system, train = network
    with pytest.raises(StationError, match="Invalid train ID"):
        system.buy_ticket(4242, 1, 1, tmp_path / "t.txt", None)
    with pytest.raises(StationError, match="Invalid wagon ID"):
        system.buy_ticket(train.train_id, 9, 1, tmp_path / "t.txt", None)


def test_buy_ticket_with_child_age_card(network, tmp_path):
    system, train = network
    wagon = system.add_wagon(train.train_id, "sleep-wagon", 80, 10)
    card_path = tmp_path / "card.txt"
    system.cards.create_age_card("Maria", 5, card_path)
    _, full_price = system.quote(train.train_id, wagon.wagon_id)
    ticket = system.buy_ticket(
        train.train_id, wagon.wagon_id, 1, tmp_path / "t.txt", None, card_path
    )
    assert ticket.discount == full_price
    assert ticket.price == 0


def test_move_wagon(network):
    system, train = network
    other = system.add_train("Sofia", "Varna", 400, 100, DEPARTURE)
    wagon = system.add_wagon(train.train_id, "sleep-wagon", 80, 10)
    moved = system.move_wagon(train.train_id, other.train_id, wagon.wagon_id, now=BEFORE)
    assert train.find_wagon(wagon.wagon_id) is None
    assert other.find_wagon(wagon.wagon_id) is moved
    assert moved.price_per_100km == wagon.price_per_100km


def test_move_wagon_errors(network, tmp_path):
    system, train = network
    other = system.add_train("Sofia", "Varna", 400, 100, DEPARTURE)
    wagon = system.add_wagon(train.train_id, "sleep-wagon", 80, 10)
    with pytest.raises(StationError, match="already departed"):
        system.move_wagon(train.train_id, other.train_id, wagon.wagon_id, now=DEPARTURE)
    with pytest.raises(StationError, match="Invalid wagon ID"):
        system.move_wagon(train.train_id, other.train_id, 77, now=BEFORE)
    with pytest.raises(StationError, match="Invalid train ID"):
        system.move_wagon(train.train_id, 1, wagon.wagon_id, now=BEFORE)
    system.buy_ticket(train.train_id, wagon.wagon_id, 1, tmp_path / "t.txt", None)
    with pytest.raises(StationError, match="should be empty"):
        system.move_wagon(train.train_id, other.train_id, wagon.wagon_id, now=BEFORE)


def test_schedule_lookups(network):
    system, train = network
    board = system.schedule("Sofia", now=BEFORE)
    assert "To depart" in board
    assert str(train.train_id) in board
    with pytest.raises(StationError, match="Invalid train station"):
        system.schedule("Ruse")
    with pytest.raises(StationError, match="Invalid train station"):
        system.schedule_time("Ruse", DEPARTURE)


def test_schedule_destination(network):
    system, train = network
    board = system.schedule_destination("Sofia", "Plovdiv", now=BEFORE)
    assert str(train.train_id) in board
    empty = system.schedule_destination("Sofia", "Varna", now=BEFORE)
    assert str(train.train_id) not in empty
    with pytest.raises(StationError, match="cannot be the same"):
        system.schedule_destination("Sofia", "Sofia")
    with pytest.raises(StationError, match="Invalid destination"):
        system.schedule_destination("Sofia", "Ruse")
    with pytest.raises(StationError, match="Invalid train station"):
        system.schedule_destination("Ruse", "Sofia")


def test_schedule_time_filters(network):
    system, train = network
    later = system.schedule_time("Sofia", DEPARTURE + 1, now=BEFORE)
    assert str(train.train_id) not in later
    same = system.schedule_time("Sofia", DEPARTURE, now=BEFORE)
    assert str(train.train_id) in same


def test_describe_train_and_wagon(network):
    system, train = network
    wagon = system.add_wagon(train.train_id, "first-class", 100, 0.5)
    text = system.describe_train(train.train_id)
    assert text.startswith(f"===Train ID: {train.train_id}===")
    assert f"{wagon.wagon_id} - First Class" in text
    assert system.describe_wagon(train.train_id, wagon.wagon_id) == wagon.describe()
    with pytest.raises(StationError, match="Invalid wagon ID"):
        system.describe_wagon(train.train_id, 5)
    with pytest.raises(StationError, match="Invalid train ID"):
        system.describe_train(1)


def test_max_train_id_empty(system):
    assert system.max_train_id() == 0
    assert system.find_station("Sofia") is None