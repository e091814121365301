"""Issuing discount card files and checking them when tickets are sold."""

from __future__ import annotations

from pathlib import Path

from trainstation.cards import (
    MIN_CARD_ID,
    AgeCard,
    DiscountCard,
    DistanceCard,
    PassengerInfo,
    RouteCard,
)
from trainstation.commandreader import CommandReader, StationError

AGE_HEADER = "|===Age card===|"
ROUTE_HEADER = "|===Route card===|"
DISTANCE_HEADER = "|==Distance card==|"

_FOOTERS = {
    AGE_HEADER: "|==============|",
    ROUTE_HEADER: "|================|",
    DISTANCE_HEADER: "|=================|",
}

DEFAULT_VALID_LIST = "validCardList.txt"
_FIELD_START = 2


def _padded_row(value: object, width: int) -> str:
    return f"| {str(value).ljust(width - 3)}|"


def _number_row(number: int, unit: str, width: int) -> str:
    digits = str(number)
    return f"| {digits}{unit.ljust(width - len(digits) - 3)}|"


def render_card(card: DiscountCard) -> str:
    """Return the text of a card file."""
    if isinstance(card, AgeCard):
        header = AGE_HEADER
        detail = _number_row(card.age, " years old", len(header))
    elif isinstance(card, RouteCard):
        header = ROUTE_HEADER
        detail = _padded_row(card.route, len(header))
    elif isinstance(card, DistanceCard):
        header = DISTANCE_HEADER
        detail = _number_row(card.distance, " km", len(header))
    else:
        raise StationError("Invalid card type!")
    width = len(header)
    lines = [
        header,
        _padded_row(card.name, width),
        detail,
        _padded_row(card.card_id, width),
        _FOOTERS[header],
    ]
    return "\n".join(lines)


def _field(lines: list[str], index: int) -> CommandReader:
    line = lines[index] if index < len(lines) else ""
    return CommandReader(line, _FIELD_START)


def load_card(path: str | Path) -> DiscountCard:
    """Read a card file written by :func:`render_card`."""
    try:
        lines = Path(path).read_text().splitlines()
    except OSError as exc:
        raise StationError("File error!") from exc
    header = lines[0] if lines else ""
    name = _field(lines, 1).read_name()
    if header == AGE_HEADER:
        age = _field(lines, 2).read_unsigned()
        return AgeCard(name, age, _field(lines, 3).read_unsigned())
    if header == ROUTE_HEADER:
        route = _field(lines, 2).read_name()
        return RouteCard(name, route, _field(lines, 3).read_unsigned())
    if header == DISTANCE_HEADER:
        distance = _field(lines, 2).read_unsigned()
        return DistanceCard(name, distance, _field(lines, 3).read_unsigned())
    raise StationError("Invalid discount card file!")


class CardManager:
    """Creates card files and keeps the list of issued card IDs."""

    def __init__(
        self,
        valid_list_path: str | Path = DEFAULT_VALID_LIST,
        first_card_id: int = MIN_CARD_ID,
    ) -> None:
        self.valid_list_path = Path(valid_list_path)
        self.current_card_id = first_card_id
        self.valid_card_ids: list[int] = []
        self.load_valid_card_list()

    def _next_id(self) -> int:
        card_id = self.current_card_id
        self.current_card_id += 1
        return card_id

    def _issue(self, card: DiscountCard, path: str | Path) -> DiscountCard:
        try:
            Path(path).write_text(render_card(card))
        except OSError as exc:
            raise StationError("File error!") from exc
        self.valid_card_ids.append(card.card_id)
        return card

    def create_age_card(self, person_name: str, age: int, path: str | Path) -> AgeCard:
        card = AgeCard(person_name, age, self._next_id())
        self._issue(card, path)
        return card

    def create_route_card(self, person_name: str, route: str, path: str | Path) -> RouteCard:
        card = RouteCard(person_name, route, self._next_id())
        self._issue(card, path)
        return card

    def create_distance_card(
        self, person_name: str, distance: int, path: str | Path
    ) -> DistanceCard:
        card = DistanceCard(person_name, distance, self._next_id())
        self._issue(card, path)
        return card

    def get_discount(self, card_path: str | Path, price: float, info: PassengerInfo) -> float:
        """Return the discount the card in ``card_path`` gives on ``price``."""
        card = load_card(card_path)
        if isinstance(card, AgeCard) and not self.is_valid_card(card.card_id):
            raise StationError("Invalid discount card!")
        return card.discount(price, info)

    def is_valid_card(self, card_id: int) -> bool:
        return card_id in self.valid_card_ids

    def save_valid_card_list(self) -> None:
        """Write the count of issued IDs followed by one ID per line."""
        lines = [str(len(self.valid_card_ids)), *map(str, self.valid_card_ids)]
        try:
            self.valid_list_path.write_text("\n".join(lines) + "\n")
        except OSError as exc:
            raise StationError("File error!") from exc

    def load_valid_card_list(self) -> None:
        """Replace the issued IDs with those in the list file, if it exists."""
        try:
            tokens = self.valid_list_path.read_text().split()
        except OSError:
            return
        ids: list[int] = []
        try:
            count = int(tokens[0]) if tokens else 0
            for token in tokens[1:count + 1]:
                ids.append(int(token))
        except ValueError:
            pass
        self.valid_card_ids = ids