"""Stations, their tracks and their arrival and departure boards."""

from __future__ import annotations

import time
from collections.abc import Iterable, Sequence

from trainstation.commandreader import StationError
from trainstation.timeline import TimeInterval, Track
from trainstation.train import Train, TrainMoment

ARRIVAL_COLUMNS: tuple[tuple[str, int], ...] = (
    ("Arrival Time", 20),
    ("Arrival Platform", 20),
    ("Train ID", 12),
    ("Starting station", 16),
    ("Status", 14),
)

DEPARTURE_COLUMNS: tuple[tuple[str, int], ...] = (
    ("Departure Time", 20),
    ("Arrival Time", 20),
    ("Destination", 16),
    ("Departure Platform", 20),
    ("Train ID", 12),
    ("Status", 14),
)


def _table_width(columns: Sequence[tuple[str, int]]) -> int:
    return sum(width for _, width in columns) + 3 * len(columns) + 1


def _render_table(columns: Sequence[tuple[str, int]], rows: Iterable[Sequence[object]]) -> str:
    line = "-" * _table_width(columns)
    header = "".join(f"{title.ljust(width)} | " for title, width in columns)
    parts = [f"{line}\n| {header}\n{line}\n"]
    for values in rows:
        cells = " | ".join(str(value).ljust(width) for value, (_, width) in zip(values, columns))
        parts.append(f"| {cells} |\n")
    if len(parts) > 1:
        parts.append(f"{line}\n")
    return "".join(parts)


def _now(now: float | None) -> float:
    return time.time() if now is None else now


class Station:
    """A station that dispatches trains and receives trains from others."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.tracks: list[Track] = []
        self.departure_trains: list[Train] = []
        self.arriving_trains: list[Train] = []

    def _departure_row(self, train: Train, now: float) -> tuple[object, ...]:
        departure, arrival = train.departure, train.arrival
        status = "Departed" if now >= departure.time else "To depart"
        return (
            departure.formatted_time(),
            arrival.formatted_time(),
            arrival.station_name,
            departure.track + 1,
            train.train_id,
            status,
        )

    def _arrival_row(self, train: Train, now: float) -> tuple[object, ...]:
        departure, arrival = train.departure, train.arrival
        status = "Arrived" if now >= arrival.time else "To arrive"
        return (
            arrival.formatted_time(),
            arrival.track + 1,
            train.train_id,
            departure.station_name,
            status,
        )

    def _departures_table(self, trains: Iterable[Train], now: float) -> str:
        return _render_table(DEPARTURE_COLUMNS, (self._departure_row(t, now) for t in trains))

    def schedule(self, now: float | None = None) -> str:
        """Return the arrival and departure boards."""
        moment = _now(now)
        arrivals = _render_table(
            ARRIVAL_COLUMNS, (self._arrival_row(t, moment) for t in self.arriving_trains)
        )
        departures = self._departures_table(self.departure_trains, moment)
        return f"Arrivals: \n{arrivals}\nDeparture: \n{departures}"

    def schedule_destination(self, destination: Station | None, now: float | None = None) -> str:
        """Return the departure board limited to trains bound for ``destination``."""
        if destination is None:
            raise StationError("Invalid destination!")
        trains = (t for t in self.departure_trains if t.arrival.station is destination)
        return self._departures_table(trains, _now(now))

    def schedule_time(self, moment: float, now: float | None = None) -> str:
        """Return the departure board limited to trains leaving at or after ``moment``."""
        trains = (t for t in self.departure_trains if t.departure.time >= moment)
        return self._departures_table(trains, _now(now))

    def add_train(
        self,
        train_id: int,
        destination: Station,
        distance: float,
        speed: float,
        departure_time: float,
    ) -> Train:
        """Schedule a new train to ``destination`` and reserve tracks at both ends."""
        arrival_time = int(departure_time + distance / speed * 3600)
        interval = TimeInterval(departure_time, arrival_time)
        departure = TrainMoment(self, self.free_track(interval), departure_time)
        arrival = TrainMoment(destination, destination.free_track(interval), arrival_time)
        train = Train(train_id, departure, arrival, distance, speed)
        self.departure_trains.append(train)
        destination.arriving_trains.append(train)
        return train

    def remove_train(self, train_id: int) -> bool:
        """Remove a departing train; return whether it was found."""
        train = self.find_train(train_id)
        if train is None:
            return False
        self.departure_trains.remove(train)
        destination = train.arrival.station
        if destination is not None and train in destination.arriving_trains:
            destination.arriving_trains.remove(train)
        return True

    def max_train_id(self) -> int:
        return max((t.train_id for t in self.departure_trains), default=0)

    def free_track(self, interval: TimeInterval) -> int:
        """Book the first track free during ``interval``, adding one if needed."""
        for index, track in enumerate(self.tracks):
            if track.is_free_interval(interval):
                track.add_interval(interval)
                return index
        track = Track()
        track.add_interval(interval)
        self.tracks.append(track)
        return len(self.tracks) - 1

    def find_train(self, train_id: int) -> Train | None:
        return next((t for t in self.departure_trains if t.train_id == train_id), None)