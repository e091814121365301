"""Trains, their wagons and the moments they leave or reach a station."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from trainstation.commandreader import StationError
from trainstation.timeline import format_time
from trainstation.wagons import FirstClassWagon, SecondClassWagon, SleepWagon, Wagon

if TYPE_CHECKING:
    from trainstation.station import Station

FIRST_WAGON_ID = 1


def _format_number(value: float) -> str:
    """Format a number the way a default-precision stream does."""
    return format(value, ".6g")


@dataclass
class TrainMoment:
    """A train at a station: which track it uses and when."""

    station: Station | None = None
    track: int = 0
    time: float = 0

    @property
    def station_name(self) -> str:
        return self.station.name if self.station is not None else ""

    def formatted_time(self) -> str:
        return format_time(self.time)


class Train:
    """A train running between two stations, with its wagons."""

    def __init__(
        self,
        train_id: int,
        departure: TrainMoment,
        arrival: TrainMoment,
        distance: float,
        speed: float,
    ) -> None:
        self.train_id = train_id
        self.departure = departure
        self.arrival = arrival
        self.distance = distance
        self.speed = speed
        self.wagons: list[Wagon] = []
        self.current_wagon_id = FIRST_WAGON_ID

    def _next_wagon_id(self) -> int:
        wagon_id = self.current_wagon_id
        self.current_wagon_id += 1
        return wagon_id

    def add_first_class_wagon(self, base_price: int, comfort_factor: float) -> FirstClassWagon:
        wagon = FirstClassWagon(self._next_wagon_id(), base_price, comfort_factor)
        self.wagons.append(wagon)
        return wagon

    def add_second_class_wagon(self, base_price: int, price_per_kg: int) -> SecondClassWagon:
        wagon = SecondClassWagon(self._next_wagon_id(), base_price, price_per_kg)
        self.wagons.append(wagon)
        return wagon

    def add_sleep_wagon(self, base_price: int, price_per_100km: int) -> SleepWagon:
        wagon = SleepWagon(self._next_wagon_id(), base_price, price_per_100km)
        self.wagons.append(wagon)
        return wagon

    def add_wagon(self, wagon: Wagon | None) -> None:
        """Attach an existing wagon, keeping its ID."""
        if wagon is None:
            raise StationError("Invalid argument!")
        self.wagons.append(wagon)

    def remove_wagon(self, wagon_id: int) -> Wagon:
        """Detach and return the wagon with ``wagon_id``."""
        wagon = self.find_wagon(wagon_id)
        if wagon is None:
            raise StationError("Invalid wagon ID!")
        self.wagons.remove(wagon)
        return wagon

    def find_wagon(self, wagon_id: int) -> Wagon | None:
        return next((w for w in self.wagons if w.wagon_id == wagon_id), None)

    def describe(self) -> str:
        """Return the train's details and a list of its wagons."""
        lines = [
            f"===Train ID: {self.train_id}===",
            f"Starting Station: {self.departure.station_name}",
            f"Destination: {self.arrival.station_name}",
            f"Distance: {_format_number(self.distance)}km",
            f"Speed: {_format_number(self.speed)}km/h",
            f"Departure Time: {self.departure.formatted_time()}",
            f"Arrival Time: {self.arrival.formatted_time()}",
            f"Departure Platform: {self.departure.track + 1}",
            "",
            "Wagons: ",
        ]
        lines.extend(f"{w.wagon_id} - {w.type_name}" for w in self.wagons)
        return "\n".join(lines) + "\n"

    def describe_wagon(self, wagon_id: int) -> str:
        """Return the description of the wagon with ``wagon_id``, or an empty string."""
        return "".join(w.describe() for w in self.wagons if w.wagon_id == wagon_id)