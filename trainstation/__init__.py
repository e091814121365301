"""Train station manager: stations, schedules, wagons, tickets and discount cards."""

__version__ = "0.1.0"

__all__ = [
    "admin",
    "cardmanager",
    "cards",
    "cli",
    "commandreader",
    "station",
    "system",
    "ticket",
    "timeline",
    "train",
    "wagons",
]