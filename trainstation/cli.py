"""Interactive command interpreter for the train station system."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from trainstation.cardmanager import DEFAULT_VALID_LIST, CardManager
from trainstation.commandreader import CommandReader, StationError
from trainstation.system import DEFAULT_ADMINS_FILE, TrainSystem
from trainstation.wagons import FirstClassWagon, SecondClassWagon, SleepWagon, Wagon

_WAGON_LABELS = {
    "first-class": "First Class Wagon",
    "second-class": "Second Class Wagon",
    "sleep-wagon": "Sleep Wagon",
}


def _format_number(value: float) -> str:
    """Format a number the way a default-precision stream does."""
    return format(value, ".6g")


def _print_stations(system: TrainSystem, reader: CommandReader) -> str:
    return "".join(f"{name}\n" for name in system.station_names())


def _print_schedule(system: TrainSystem, reader: CommandReader) -> str:
    name = reader.read_name()
    reader.expect_end()
    return system.schedule(name)


def _print_schedule_destination(system: TrainSystem, reader: CommandReader) -> str:
    station_name = reader.read_name()
    reader.skip(1)
    destination_name = reader.read_name()
    reader.expect_end()
    return system.schedule_destination(station_name, destination_name)


def _print_schedule_time(system: TrainSystem, reader: CommandReader) -> str:
    station_name = reader.read_name()
    reader.skip(1)
    moment = reader.read_datetime()
    reader.expect_end()
    return system.schedule_time(station_name, moment)


def _print_train(system: TrainSystem, reader: CommandReader) -> str:
    train_id = reader.read_unsigned()
    reader.expect_end()
    return system.describe_train(train_id)


def _print_wagon(system: TrainSystem, reader: CommandReader) -> str:
    train_id = reader.read_unsigned()
    reader.skip(1)
    wagon_id = reader.read_unsigned()
    reader.expect_end()
    return system.describe_wagon(train_id, wagon_id)


def _read_ticket_option(reader: CommandReader, wagon: Wagon) -> bool | int | None:
    """Read the wagon-specific part of a ticket purchase."""
    if isinstance(wagon, FirstClassWagon):
        reader.skip(1)
        food_included = reader.read_bool()
        reader.expect_end()
        return food_included
    if isinstance(wagon, SecondClassWagon):
        reader.skip(1)
        baggage_kg = reader.read_unsigned()
        reader.expect_end()
        return baggage_kg
    if isinstance(wagon, SleepWagon):
        reader.expect_end()
        return None
    raise StationError("Invalid wagon type!")


def _buy(system: TrainSystem, reader: CommandReader, with_card: bool) -> str:
    train_id = reader.read_unsigned()
    reader.skip(1)
    wagon_id = reader.read_unsigned()
    reader.skip(1)
    seat_id = reader.read_unsigned()
    reader.skip(1)
    ticket_file = reader.read_word()
    card_file = None
    if with_card:
        reader.skip(1)
        card_file = reader.read_word()
    train = system.find_train(train_id)
    if train is None:
        raise StationError("Invalid train ID!")
    wagon = train.find_wagon(wagon_id)
    if wagon is None:
        raise StationError("Invalid wagon ID!")
    option = _read_ticket_option(reader, wagon)
    ticket = system.buy_ticket(train_id, wagon_id, seat_id, ticket_file, option, card_file)
    return (
        f"Ticket successfully bought for Train ID: {train_id}\n"
        f"Ticket price: {_format_number(ticket.price)} lv.\n"
        f"Ticket saved to file: {ticket_file}\n"
    )


def _buy_ticket(system: TrainSystem, reader: CommandReader) -> str:
    return _buy(system, reader, with_card=False)


def _buy_ticket_discount(system: TrainSystem, reader: CommandReader) -> str:
    return _buy(system, reader, with_card=True)


def _login(system: TrainSystem, reader: CommandReader) -> str:
    if system.logged_admin is not None:
        raise StationError("An admin is already logged. Please logout first.")
    username = reader.read_name()
    reader.skip(1)
    secret = reader.read_password()
    reader.expect_end()
    system.login(username, secret)
    return f"Welcome back, {username}!\n"


def _logout(system: TrainSystem, reader: CommandReader) -> str:
    system.logout()
    return ""


def _add_station(system: TrainSystem, reader: CommandReader) -> str:
    system.require_admin()
    name = reader.read_name()
    reader.expect_end()
    system.add_station(name)
    return f"Added station {name}!\n"


def _add_train(system: TrainSystem, reader: CommandReader) -> str:
    system.require_admin()
    station = reader.read_name()
    reader.skip(1)
    destination = reader.read_name()
    reader.skip(1)
    distance = reader.read_double()
    reader.skip(1)
    speed = reader.read_double()
    reader.skip(1)
    departure_time = reader.read_datetime()
    reader.expect_end()
    train = system.add_train(station, destination, distance, speed, departure_time)
    return f"Train successfully added with ID: {train.train_id}\n"


def _remove_train(system: TrainSystem, reader: CommandReader) -> str:
    system.require_admin()
    train_id = reader.read_unsigned()
    reader.expect_end()
    system.remove_train(train_id)
    return f"Train with ID: {train_id} successfully removed.\n"


def _add_wagon(system: TrainSystem, reader: CommandReader) -> str:
    system.require_admin()
    train_id = reader.read_unsigned()
    reader.skip(1)
    wagon_type = reader.read_word()
    reader.skip(1)
    base_price = reader.read_unsigned()
    reader.skip(1)
    if system.find_train(train_id) is None:
        raise StationError("Invalid train ID!")
    parameter: float
    if wagon_type == "first-class":
        parameter = reader.read_double()
        if parameter > 1:
            raise StationError("Invalid comfort factor!")
    elif wagon_type in _WAGON_LABELS:
        parameter = reader.read_unsigned()
    else:
        raise StationError("Invalid wagon type!")
    reader.expect_end()
    wagon = system.add_wagon(train_id, wagon_type, base_price, parameter)
    return f"Added {_WAGON_LABELS[wagon_type]} with ID: {wagon.wagon_id}\n"


def _remove_wagon(system: TrainSystem, reader: CommandReader) -> str:
    system.require_admin()
    train_id = reader.read_unsigned()
    reader.skip(1)
    wagon_id = reader.read_unsigned()
    reader.expect_end()
    system.remove_wagon(train_id, wagon_id)
    return "Wagon removed successfully.\n"


def _move_wagon(system: TrainSystem, reader: CommandReader) -> str:
    system.require_admin()
    source_train_id = reader.read_unsigned()
    reader.skip(1)
    wagon_id = reader.read_unsigned()
    reader.skip(1)
    destination_train_id = reader.read_unsigned()
    reader.expect_end()
    system.move_wagon(source_train_id, destination_train_id, wagon_id)
    return "Wagon removed successfully.\n"


def _create_discount_card(system: TrainSystem, reader: CommandReader) -> str:
    system.require_admin()
    card_type = reader.read_word()
    reader.skip(1)
    username = reader.read_name()
    reader.skip(1)
    card_file = reader.read_word()
    if card_type == "age-card":
        reader.skip(1)
        age = reader.read_unsigned()
        reader.expect_end()
        system.cards.create_age_card(username, age, card_file)
        return f"Age card created successfully in file: {card_file}\n"
    if card_type == "route-card":
        reader.skip(1)
        route = reader.read_name()
        if system.find_station(route) is None:
            raise StationError("Invalid route!")
        reader.expect_end()
        system.cards.create_route_card(username, route, card_file)
        return f"Route card created successfully in file: {card_file}\n"
    if card_type == "distance-card":
        reader.skip(1)
        distance = reader.read_unsigned()
        reader.expect_end()
        system.cards.create_distance_card(username, distance, card_file)
        return f"Distance card created successfully in file: {card_file}\n"
    raise StationError("Invalid card type!")


def _validate_discount_card(system: TrainSystem, reader: CommandReader) -> str:
    system.require_admin()
    card_id = reader.read_unsigned()
    reader.expect_end()
    if system.cards.is_valid_card(card_id):
        return "The card is valid.\n"
    return "The card is invalid.\n"


_Handler = Callable[[TrainSystem, CommandReader], str]

# Order matters: commands are matched by prefix, first match wins.
_COMMANDS: tuple[tuple[str, bool, _Handler], ...] = (
    ("print-stations", True, _print_stations),
    ("print-schedule ", False, _print_schedule),
    ("print-schedule-destination", False, _print_schedule_destination),
    ("print-schedule-time", False, _print_schedule_time),
    ("print-train", False, _print_train),
    ("print-wagon", False, _print_wagon),
    ("buy-ticket ", False, _buy_ticket),
    ("buy-ticket-discount", False, _buy_ticket_discount),
    ("login", False, _login),
    ("logout", True, _logout),
    ("add-station", False, _add_station),
    ("add-train", False, _add_train),
    ("remove-train", False, _remove_train),
    ("add-wagon", False, _add_wagon),
    ("remove-wagon", False, _remove_wagon),
    ("move-wagon", False, _move_wagon),
    ("create-discount-card", False, _create_discount_card),
    ("validate-discount-card", False, _validate_discount_card),
)


def execute_command(system: TrainSystem, line: str) -> str | None:
    """Run one command line and return its output.

    ``exit`` saves the list of issued cards and returns ``None``.
    Errors are raised as :class:`StationError`.
    """
    if line == "exit":
        system.cards.save_valid_card_list()
        return None
    for keyword, exact, handler in _COMMANDS:
        matched = line == keyword if exact else line.startswith(keyword)
        if matched:
            reader = CommandReader(line, len(keyword.rstrip(" ")) + 1)
            return handler(system, reader)
    raise StationError("Invalid command!")


def run(system: TrainSystem, lines: Iterable[str], out: TextIO) -> bool:
    """Execute commands until ``exit``; return whether ``exit`` was reached."""
    for raw in lines:
        line = raw.rstrip("\r\n")
        try:
            output = execute_command(system, line)
        except StationError as exc:
            out.write(f"{exc}\n")
            continue
        if output is None:
            return True
        out.write(output)
    return False


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Train station command interpreter.")
    parser.add_argument("--admins", default=DEFAULT_ADMINS_FILE, help="administrators file")
    parser.add_argument(
        "--card-list", default=DEFAULT_VALID_LIST, help="file listing issued card IDs"
    )
    args = parser.parse_args(argv)
    system = TrainSystem(CardManager(args.card_list))
    try:
        system.load_admins(args.admins)
    except StationError as exc:
        print(exc)
    run(system, sys.stdin, sys.stdout)
    return 0