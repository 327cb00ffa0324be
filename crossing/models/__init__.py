"""Crossing models package."""

from .person import Person
from .roster import PeopleRoster
from .crossing import CrossingEvent, CrossingResult, CROSS, RETURN

__all__ = [
    "Person",
    "PeopleRoster",
    "CrossingEvent",
    "CrossingResult",
    "CROSS",
    "RETURN",
]
