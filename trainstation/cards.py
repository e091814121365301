"""Passenger details and discount cards."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from trainstation.commandreader import StationError

MIN_CARD_ID = 100000
MAX_CARD_ID = 999999


@dataclass(frozen=True)
class PassengerInfo:
    """What a passenger asks for when buying a ticket."""

    destination: str = ""
    food_included: bool = False
    baggage_kg: int = 0
    distance: float = 0.0


class DiscountCard(ABC):
    """A personal card that lowers the price of a ticket."""

    def __init__(self, person_name: str, card_id: int) -> None:
        if not MIN_CARD_ID <= card_id <= MAX_CARD_ID:
            raise StationError("Card ID should be 6-digit!")
        self.name = person_name
        self.card_id = card_id

    @abstractmethod
    def discount(self, price: float, info: PassengerInfo) -> float:
        """Return the amount taken off ``price``."""


class AgeCard(DiscountCard):
    """Discount depending on the holder's age."""

    def __init__(self, person_name: str, age: int, card_id: int) -> None:
        super().__init__(person_name, card_id)
        self.age = age

    def discount(self, price: float, info: PassengerInfo) -> float:
        if self.age <= 10:
            return price
        if self.age <= 18:
            return 0.5 * price
        return 0.2 * price


class RouteCard(DiscountCard):
    """Free travel to one destination."""

    def __init__(self, person_name: str, route: str, card_id: int) -> None:
        super().__init__(person_name, card_id)
        self.route = route

    def discount(self, price: float, info: PassengerInfo) -> float:
        return price if info.destination == self.route else 0


class DistanceCard(DiscountCard):
    """Larger discount for journeys up to a set distance."""

    def __init__(self, person_name: str, distance: int, card_id: int) -> None:
        super().__init__(person_name, card_id)
        self.distance = distance

    def discount(self, price: float, info: PassengerInfo) -> float:
        if info.distance <= self.distance:
            return 0.5 * price
        return 0.3 * price