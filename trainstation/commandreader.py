"""Cursor-based reading of typed values out of a command line."""

from __future__ import annotations

import time

DATETIME_TEMPLATE = "01/01/2000 01:00"


class StationError(Exception):
    """Base class for errors reported by the train station system."""


class CommandFormatError(StationError):
    """A command or value does not have the expected format."""


def is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def is_capital_letter(c: str) -> bool:
    return "A" <= c <= "Z"


def is_small_letter(c: str) -> bool:
    return "a" <= c <= "z"


def is_letter(c: str) -> bool:
    return is_capital_letter(c) or is_small_letter(c)


def is_valid_pass_symbol(c: str) -> bool:
    return is_digit(c) or is_letter(c) or c in "_."


class CommandReader:
    """Reads space separated values from ``text``, starting at ``position``.

    Every read advances ``position`` past the value it consumed, but not past
    the separating space that follows it.
    """

    def __init__(self, text: str, position: int = 0) -> None:
        self.text = text
        self.position = position

    def _in_range(self) -> bool:
        return 0 <= self.position < len(self.text)

    def _current(self) -> str:
        return self.text[self.position]

    def _token_end(self) -> int:
        end = self.text.find(" ", self.position)
        return len(self.text) if end == -1 else end

    def _take(self, end: int) -> str:
        token = self.text[self.position:end]
        self.position = end
        return token

    def read_unsigned(self) -> int:
        """Read a non-negative integer."""
        if not self._in_range() or not is_digit(self._current()):
            raise CommandFormatError("Invalid string format.")
        result = 0
        for c in self.text[self.position:]:
            if c == " ":
                break
            if not is_digit(c):
                raise CommandFormatError("Invalid string format.")
            result = result * 10 + int(c)
            self.position += 1
        return result

    def read_double(self) -> float:
        """Read a non-negative decimal number with an optional fraction."""
        if not self._in_range() or not is_digit(self._current()):
            raise CommandFormatError("Invalid string format.")
        result = 0.0
        denominator: int | None = None
        for c in self.text[self.position:]:
            if c == " ":
                break
            if is_digit(c):
                result = result * 10 + int(c)
                if denominator is not None:
                    denominator *= 10
            elif c == ".":
                if denominator is not None:
                    raise CommandFormatError("Invalid string format.")
                denominator = 1
            else:
                raise CommandFormatError("Invalid string format.")
            self.position += 1
        return result / denominator if denominator is not None else result

    def read_name(self) -> str:
        """Read a name: a capital letter followed by letters or underscores."""
        if not self._in_range() or not is_capital_letter(self._current()):
            raise CommandFormatError("Invalid name format!")
        end = self._token_end()
        rest = self.text[self.position + 1:end]
        if not all(is_letter(c) or c == "_" for c in rest):
            raise CommandFormatError("Invalid name format!")
        return self._take(end)

    def read_password(self) -> str:
        """Read a password made of letters, digits, underscores and dots."""
        if not self._in_range() or not is_valid_pass_symbol(self._current()):
            raise CommandFormatError("Invalid password format!")
        end = self._token_end()
        if not all(is_valid_pass_symbol(c) for c in self.text[self.position:end]):
            raise CommandFormatError("Invalid password format!")
        return self._take(end)

    def read_bool(self) -> bool:
        """Read the word ``true`` or ``false``."""
        if not self._in_range():
            raise CommandFormatError("Invalid index!")
        word = self.read_word()
        if word == "true":
            return True
        if word == "false":
            return False
        raise CommandFormatError("Invalid string!")

    def read_word(self) -> str:
        """Read everything up to the next space."""
        if not self._in_range():
            raise CommandFormatError("Invalid index!")
        return self._take(self._token_end())

    def read_to_end(self) -> str:
        """Read the rest of the text."""
        if not self._in_range():
            raise CommandFormatError("Invalid string format!")
        return self._take(len(self.text))

    def read_datetime(self) -> int:
        """Read ``DD/MM/YYYY HH:MM`` as local time and return a Unix timestamp."""
        if not self._in_range():
            raise CommandFormatError("Invalid string format!")
        chunk = self.text[self.position:self.position + len(DATETIME_TEMPLATE)]
        if len(chunk) < len(DATETIME_TEMPLATE):
            raise CommandFormatError("Invalid string format!")
        for actual, expected in zip(chunk, DATETIME_TEMPLATE):
            if is_digit(actual):
                if not is_digit(expected):
                    raise CommandFormatError("Invalid string format!")
            elif actual != expected:
                raise CommandFormatError("Invalid string format!")
        day = int(chunk[0:2])
        month = int(chunk[3:5])
        year = int(chunk[6:10])
        hours = int(chunk[11:13])
        minutes = int(chunk[14:16])
        self.position += len(DATETIME_TEMPLATE)
        try:
            return int(time.mktime((year, month, day, hours, minutes, 0, 0, 0, -1)))
        except (OverflowError, ValueError) as exc:
            raise CommandFormatError("Invalid string format!") from exc

    def skip(self, count: int) -> None:
        """Move the position forward by ``count`` characters."""
        self.position += count

    def is_completed(self) -> bool:
        return self.position == len(self.text)

    def expect_end(self) -> None:
        """Raise unless the whole text has been consumed."""
        if not self.is_completed():
            raise CommandFormatError("Invalid command format!")