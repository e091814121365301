import pytest

from trainstation.commandreader import StationError
from trainstation.station import Station
from trainstation.timeline import format_time
from trainstation.train import Train, TrainMoment
from trainstation.wagons import SleepWagon

DEPARTURE = 1_700_000_000


@pytest.fixture
def train():
    origin = Station("Sofia")
    destination = Station("Varna")
    return Train(
        1000,
        TrainMoment(origin, 0, DEPARTURE),
        TrainMoment(destination, 2, DEPARTURE + 3600),
        120.0,
        60.0,
    )


def test_moment_formatted_time_matches_format_time():
    moment = TrainMoment(Station("Sofia"), 0, DEPARTURE)
    assert moment.formatted_time() == format_time(DEPARTURE)
    assert moment.station_name == "Sofia"


def test_wagon_ids_start_at_one_and_increase(train):
    first = train.add_first_class_wagon(100, 0.5)
    second = train.add_second_class_wagon(30, 2)
    third = train.add_sleep_wagon(50, 10)
    assert first.wagon_id == 1
    assert second.wagon_id == first.wagon_id + 1
    assert third.wagon_id == second.wagon_id + 1
    assert train.wagons == [first, second, third]


def test_find_wagon(train):
    wagon = train.add_second_class_wagon(30, 2)
    assert train.find_wagon(wagon.wagon_id) is wagon
    assert train.find_wagon(wagon.wagon_id + 50) is None


def test_remove_wagon_does_not_reuse_ids(train):
    wagon = train.add_sleep_wagon(50, 10)
    removed = train.remove_wagon(wagon.wagon_id)
    assert removed is wagon
    assert train.find_wagon(wagon.wagon_id) is None
    replacement = train.add_sleep_wagon(50, 10)
    assert replacement.wagon_id == wagon.wagon_id + 1


def test_remove_missing_wagon_raises(train):
    with pytest.raises(StationError, match="Invalid wagon ID!"):
        train.remove_wagon(42)


def test_add_wagon_none_raises(train):
    with pytest.raises(StationError, match="Invalid argument!"):
        train.add_wagon(None)


def test_add_wagon_keeps_id(train):
    wagon = SleepWagon(7, 40, 5)
    train.add_wagon(wagon)
    assert train.find_wagon(7) is wagon


def test_describe(train):
    wagon = train.add_first_class_wagon(100, 0.5)
    lines = train.describe().splitlines()
    assert lines[0] == "===Train ID: 1000==="
    assert "Starting Station: Sofia" in lines
    assert "Destination: Varna" in lines
    assert "Distance: 120km" in lines
    assert "Speed: 60km/h" in lines
    assert f"Departure Time: {format_time(DEPARTURE)}" in lines
    assert "Departure Platform: 1" in lines
    assert lines[-1] == f"{wagon.wagon_id} - {wagon.type_name}"


def test_describe_wagon(train):
    wagon = train.add_second_class_wagon(30, 2)
    assert train.describe_wagon(wagon.wagon_id) == wagon.describe()
    assert train.describe_wagon(wagon.wagon_id + 1) == ""