"""Passenger wagons, their seats and their ticket prices."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from trainstation.cards import PassengerInfo
from trainstation.commandreader import StationError

FOOD_SURCHARGE = 10


def _format_number(value: float) -> str:
    """Format a number the way a default-precision stream does."""
    return format(value, ".6g")


class Wagon(ABC):
    """A wagon with numbered seats; seat numbers start at 1."""

    type_name: ClassVar[str] = ""
    seat_count: ClassVar[int] = 0
    rows: ClassVar[int] = 5

    def __init__(self, wagon_id: int, base_price: int) -> None:
        self.wagon_id = wagon_id
        self.base_price = base_price
        self.seats: list[bool] = [False] * self.seat_count

    def is_valid_seat(self, seat_id: int) -> bool:
        return 1 <= seat_id <= len(self.seats)

    def reserve_seat(self, seat_id: int) -> None:
        """Mark a seat as taken."""
        if not self.is_valid_seat(seat_id):
            raise StationError("Invalid seat ID!")
        if self.seats[seat_id - 1]:
            raise StationError("Seat already reserved!")
        self.seats[seat_id - 1] = True

    def is_empty(self) -> bool:
        return not any(self.seats)

    @abstractmethod
    def price(self, info: PassengerInfo) -> float:
        """Return the ticket price for a passenger."""

    def render_seats(self) -> str:
        """Draw the seat map; taken seats are shown as ``XX``."""
        cols = len(self.seats) // self.rows
        space = cols * 3 - 1
        if cols == 1:
            space += 2
        lines = [" " + "_" * space]
        for row in range(self.rows):
            start = row * cols
            cells = [
                "XX" if taken else f"{number:02d}"
                for number, taken in enumerate(self.seats[start:start + cols], start=start + 1)
            ]
            body = " ".join(cells)
            if cols == 1:
                body = f" {body} "
            lines.append(f"|{body}|")
            filler = "_" if row == self.rows - 1 else " "
            lines.append("|" + filler * space + "|")
        return "\n".join(lines) + "\n"

    def _describe(self, detail: str) -> str:
        lines = [
            f"=== Wagon ID: {self.wagon_id} ===",
            f"WagonType: {self.type_name}",
            f"Base Price: {self.base_price} lv.",
            detail,
            f"Seats: {self.seat_count}",
            "Available seats:",
        ]
        return "\n".join(lines) + "\n" + self.render_seats() + "\n"

    @abstractmethod
    def describe(self) -> str:
        """Return a printable description including the seat map."""

    @abstractmethod
    def clone(self) -> Wagon:
        """Return a wagon with the same settings and no reserved seats."""


class FirstClassWagon(Wagon):
    """Comfortable wagon whose price scales with a comfort factor."""

    type_name = "First Class"
    seat_count = 10

    def __init__(self, wagon_id: int, base_price: int, comfort_factor: float) -> None:
        super().__init__(wagon_id, base_price)
        self.comfort_factor = comfort_factor

    def price(self, info: PassengerInfo) -> float:
        surcharge = FOOD_SURCHARGE if info.food_included else 0
        return self.base_price * self.comfort_factor + surcharge

    def describe(self) -> str:
        return self._describe(f"Comfort Factor: {_format_number(self.comfort_factor)}")

    def clone(self) -> FirstClassWagon:
        return FirstClassWagon(self.wagon_id, self.base_price, self.comfort_factor)


class SecondClassWagon(Wagon):
    """Standard wagon that charges for luggage by weight."""

    type_name = "Second Class"
    seat_count = 20

    def __init__(self, wagon_id: int, base_price: int, price_per_kg: int) -> None:
        super().__init__(wagon_id, base_price)
        self.price_per_kg = price_per_kg

    def price(self, info: PassengerInfo) -> float:
        return self.base_price + info.baggage_kg * self.price_per_kg

    def describe(self) -> str:
        return self._describe(f"Price for 1 kg luggage: {self.price_per_kg} lv.")

    def clone(self) -> SecondClassWagon:
        return SecondClassWagon(self.wagon_id, self.base_price, self.price_per_kg)


class SleepWagon(Wagon):
    """Sleeping wagon that charges by travelled distance."""

    type_name = "Sleep Wagon"
    seat_count = 5

    def __init__(self, wagon_id: int, base_price: int, price_per_100km: int) -> None:
        super().__init__(wagon_id, base_price)
        self.price_per_100km = price_per_100km

    def price(self, info: PassengerInfo) -> float:
        return self.base_price + info.distance / 100 * self.price_per_100km

    def describe(self) -> str:
        return self._describe(f"Price per 100 km: {self.price_per_100km} lv.")

    def clone(self) -> SleepWagon:
        return SleepWagon(self.wagon_id, self.base_price, self.price_per_100km)