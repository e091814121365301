"""Train tickets and their printed form."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from trainstation.commandreader import StationError
from trainstation.timeline import format_time
from trainstation.train import Train
from trainstation.wagons import Wagon

HEADER = "|===========Train Ticket===========|"
FOOTER = "|==================================|"


def _money(value: float) -> str:
    """Format an amount with two significant digits, as the printed ticket shows it."""
    return format(value, ".2g")


def _digit_count(value: float) -> int:
    return len(str(abs(int(value))))


@dataclass
class Ticket:
    """A bought seat on a train."""

    departure_station: str
    arrival_station: str
    train_id: int
    wagon_id: int
    seat_id: int
    departure_time: float
    arrival_time: float
    departure_platform: int
    discount: float
    price: float

    @classmethod
    def from_train(
        cls, train: Train, wagon: Wagon, seat_id: int, discount: float, price: float
    ) -> Ticket:
        departure, arrival = train.departure, train.arrival
        return cls(
            departure_station=departure.station_name,
            arrival_station=arrival.station_name,
            train_id=train.train_id,
            wagon_id=wagon.wagon_id,
            seat_id=seat_id,
            departure_time=departure.time,
            arrival_time=arrival.time,
            departure_platform=departure.track,
            discount=discount,
            price=price,
        )

    @staticmethod
    def _field(label: str, value: object, width: int) -> str:
        prefix = f"| {label}: "
        return f"{prefix}{str(value).ljust(width - len(prefix) - 1)}|"

    @staticmethod
    def _amount(label: str, value: float, width: int) -> str:
        prefix = f"| {label}: "
        unit = " lv.".ljust(width - _digit_count(value) - len(prefix) - 1)
        return f"{prefix}{_money(value)}{unit}|"

    def render(self) -> str:
        """Return the ticket as a boxed block of text."""
        width = len(HEADER)
        route = self.arrival_station.ljust(width - len(self.departure_station) - 14)
        lines = [
            HEADER,
            f"| Ticket: {self.departure_station} - {route}|",
            self._field("Train ID", self.train_id, width),
            self._field("Wagon ID", self.wagon_id, width),
            self._field("Seat ID", self.seat_id, width),
            self._field("Departure time", format_time(self.departure_time), width),
            self._field("Arrival time", format_time(self.arrival_time), width),
            self._field("Departure platform", self.departure_platform + 1, width),
            self._amount("Discount", self.discount, width),
            self._amount("Price", self.price, width),
            FOOTER,
        ]
        return "\n".join(lines)

    def write_to_file(self, path: str | Path) -> None:
        try:
            Path(path).write_text(self.render())
        except OSError as exc:
            raise StationError("File error!") from exc