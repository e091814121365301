"""The train station system: stations, trains, wagons, admins and ticket sales."""

from __future__ import annotations

import time
from pathlib import Path

from trainstation.admin import Admin, load_admins
from trainstation.cardmanager import CardManager
from trainstation.cards import PassengerInfo
from trainstation.commandreader import CommandFormatError, StationError
from trainstation.station import Station
from trainstation.ticket import Ticket
from trainstation.train import Train
from trainstation.wagons import FirstClassWagon, SecondClassWagon, SleepWagon, Wagon

FIRST_TRAIN_ID = 1000
DEFAULT_ADMINS_FILE = "Admins.txt"


class TrainSystem:
    """Holds every station and the administrator session."""

    def __init__(self, cards: CardManager | None = None) -> None:
        self.cards = cards if cards is not None else CardManager()
        self.stations: list[Station] = []
        self.admins: list[Admin] = []
        self.logged_admin: Admin | None = None
        self.current_train_id = FIRST_TRAIN_ID

    def load_admins(self, path: str | Path = DEFAULT_ADMINS_FILE) -> None:
        """Add the administrators listed in ``path``."""
        self.admins.extend(load_admins(path))

    def login(self, username: str, password: str) -> Admin:
        if self.logged_admin is not None:
            raise StationError("An admin is already logged. Please logout first.")
        for admin in self.admins:
            if admin.name == username and admin.is_password_correct(password):
                self.logged_admin = admin
                return admin
        raise StationError("Wrong username or password!")

    def logout(self) -> None:
        if self.logged_admin is None:
            raise StationError("No user is currently logged.")
        self.logged_admin = None

    def require_admin(self) -> None:
        if self.logged_admin is None:
            raise StationError("You need to be an admin to run this command!")

    def add_station(self, name: str) -> Station:
        if self.find_station(name) is not None:
            raise StationError("Station with this name already exists!")
        station = Station(name)
        self.stations.append(station)
        return station

    def add_train(
        self,
        station: str,
        destination: str,
        distance: float,
        speed: float,
        departure_time: float,
    ) -> Train:
        """Schedule a train between two stations and give it the next free ID."""
        departure_station = self.find_station(station)
        arrival_station = self.find_station(destination)
        if departure_station is None or arrival_station is None:
            raise StationError("Invalid station name!")
        if departure_station is arrival_station:
            raise StationError("Departure and arrival stations cannot be the same!")
        if distance == 0 or speed == 0:
            raise StationError("Invalid distance or speed parameters!")
        train_id = self.current_train_id
        self.current_train_id += 1
        return departure_station.add_train(
            train_id, arrival_station, distance, speed, departure_time
        )

    def remove_train(self, train_id: int) -> None:
        if not any(station.remove_train(train_id) for station in self.stations):
            raise StationError("Invalid train ID!")

    def add_wagon(
        self, train_id: int, wagon_type: str, base_price: int, parameter: float
    ) -> Wagon:
        """Add a ``first-class``, ``second-class`` or ``sleep-wagon`` wagon."""
        train = self._require_train(train_id)
        if wagon_type == "first-class":
            if parameter > 1:
                raise StationError("Invalid comfort factor!")
            return train.add_first_class_wagon(base_price, parameter)
        if wagon_type == "second-class":
            return train.add_second_class_wagon(base_price, int(parameter))
        if wagon_type == "sleep-wagon":
            return train.add_sleep_wagon(base_price, int(parameter))
        raise StationError("Invalid wagon type!")

    def remove_wagon(self, train_id: int, wagon_id: int) -> Wagon:
        return self._require_train(train_id).remove_wagon(wagon_id)

    def move_wagon(
        self,
        source_train_id: int,
        destination_train_id: int,
        wagon_id: int,
        now: float | None = None,
    ) -> Wagon:
        """Move an empty wagon between two trains that have not departed yet."""
        source = self.find_train(source_train_id)
        destination = self.find_train(destination_train_id)
        if source is None or destination is None:
            raise StationError("Invalid train ID!")
        wagon = source.find_wagon(wagon_id)
        if wagon is None:
            raise StationError("Invalid wagon ID!")
        if not wagon.is_empty():
            raise StationError("Moved wagon should be empty!")
        current = time.time() if now is None else now
        if source.departure.time <= current or destination.departure.time <= current:
            raise StationError("Trains already departed!")
        copy = wagon.clone()
        source.remove_wagon(wagon_id)
        destination.add_wagon(copy)
        return copy

    def _train_and_wagon(self, train_id: int, wagon_id: int) -> tuple[Train, Wagon]:
        train = self._require_train(train_id)
        wagon = train.find_wagon(wagon_id)
        if wagon is None:
            raise StationError("Invalid wagon ID!")
        return train, wagon

    def quote(
        self, train_id: int, wagon_id: int, option: bool | int | None = None
    ) -> tuple[PassengerInfo, float]:
        """Return the passenger details and the full price for a seat.

        ``option`` is whether food is included for a first class wagon, the
        baggage weight in kg for a second class wagon and ``None`` for a
        sleep wagon.
        """
        train, wagon = self._train_and_wagon(train_id, wagon_id)
        destination = train.arrival.station_name
        if isinstance(wagon, FirstClassWagon):
            if not isinstance(option, bool):
                raise CommandFormatError("Invalid string!")
            info = PassengerInfo(destination, food_included=option)
        elif isinstance(wagon, SecondClassWagon):
            if isinstance(option, bool) or not isinstance(option, int) or option < 0:
                raise CommandFormatError("Invalid string format.")
            info = PassengerInfo(destination, baggage_kg=option)
        elif isinstance(wagon, SleepWagon):
            if option is not None:
                raise CommandFormatError("Invalid command format!")
            info = PassengerInfo(destination, distance=train.distance)
        else:
            raise StationError("Invalid wagon type!")
        return info, wagon.price(info)

    def buy_ticket(
        self,
        train_id: int,
        wagon_id: int,
        seat_id: int,
        ticket_file: str | Path,
        option: bool | int | None = None,
        card_file: str | Path | None = None,
    ) -> Ticket:
        """Sell a seat, write the ticket to ``ticket_file`` and reserve the seat."""
        train, wagon = self._train_and_wagon(train_id, wagon_id)
        info, price = self.quote(train_id, wagon_id, option)
        discount = 0.0
        if card_file is not None:
            discount = self.cards.get_discount(card_file, price, info)
        ticket = Ticket.from_train(train, wagon, seat_id, discount, price - discount)
        ticket.write_to_file(ticket_file)
        wagon.reserve_seat(seat_id)
        return ticket

    def station_names(self) -> list[str]:
        return [station.name for station in self.stations]

    def _require_station(self, name: str) -> Station:
        station = self.find_station(name)
        if station is None:
            raise StationError("Invalid train station!")
        return station

    def _require_train(self, train_id: int) -> Train:
        train = self.find_train(train_id)
        if train is None:
            raise StationError("Invalid train ID!")
        return train

    def schedule(self, name: str, now: float | None = None) -> str:
        return self._require_station(name).schedule(now)

    def schedule_destination(
        self, station_name: str, destination_name: str, now: float | None = None
    ) -> str:
        station = self.find_station(station_name)
        destination = self.find_station(destination_name)
        if station is None:
            raise StationError("Invalid train station!")
        if destination is None:
            raise StationError("Invalid destination!")
        if station is destination:
            raise StationError("Start station and destination cannot be the same!")
        return station.schedule_destination(destination, now)

    def schedule_time(
        self, station_name: str, moment: float, now: float | None = None
    ) -> str:
        return self._require_station(station_name).schedule_time(moment, now)

    def describe_train(self, train_id: int) -> str:
        return self._require_train(train_id).describe()

    def describe_wagon(self, train_id: int, wagon_id: int) -> str:
        _, wagon = self._train_and_wagon(train_id, wagon_id)
        return wagon.describe()

    def find_station(self, name: str) -> Station | None:
        return next((s for s in self.stations if s.name == name), None)

    def find_train(self, train_id: int) -> Train | None:
        for station in self.stations:
            train = station.find_train(train_id)
            if train is not None:
                return train
        return None

    def max_train_id(self) -> int:
        return max((s.max_train_id() for s in self.stations), default=0)