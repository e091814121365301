"""Time intervals, track occupancy and time formatting."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

TIME_FORMAT = "%d/%m/%Y %H:%M"


def format_time(moment: float) -> str:
    """Format a Unix timestamp as local ``DD/MM/YYYY HH:MM``."""
    return time.strftime(TIME_FORMAT, time.localtime(moment))


@dataclass(frozen=True)
class TimeInterval:
    """A closed interval of Unix timestamps."""

    start: float = 0
    end: float = 0

    def contains(self, moment: float) -> bool:
        return self.start <= moment <= self.end

    def intersects(self, other: TimeInterval) -> bool:
        return (
            self.contains(other.start)
            or self.contains(other.end)
            or other.contains(self.start)
            or other.contains(self.end)
        )


@dataclass
class Track:
    """A platform track together with the intervals it is busy."""

    busy_intervals: list[TimeInterval] = field(default_factory=list)

    def __init__(self) -> None:
        self.busy_intervals = []

    def add_interval(self, interval: TimeInterval) -> None:
        self.busy_intervals.append(interval)

    def is_free(self, moment: float) -> bool:
        return not any(busy.contains(moment) for busy in self.busy_intervals)

    def is_free_interval(self, interval: TimeInterval) -> bool:
        return not any(busy.intersects(interval) for busy in self.busy_intervals)