"""Administrator accounts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from trainstation.commandreader import StationError


@dataclass(frozen=True)
class Admin:
    """An administrator with a name and a password."""

    name: str = ""
    password: str = ""

    def is_password_correct(self, password: str) -> bool:
        return self.password == password


def load_admins(path: str | Path) -> list[Admin]:
    """Read admins from a text file holding alternating name and password lines."""
    try:
        lines = Path(path).read_text().splitlines()
    except OSError as exc:
        raise StationError("File error!") from exc
    names = lines[0::2]
    passwords = lines[1::2]
    passwords += [""] * (len(names) - len(passwords))
    return [Admin(name, secret) for name, secret in zip(names, passwords)]