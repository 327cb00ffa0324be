"""Bridge crossing planner.

Computes the fastest way for a group of people to cross a narrow bridge at
night with one torch, using a greedy method and the shielding method.
"""

from .bridge import Bridge
from .models import Person, PeopleRoster, CrossingEvent, CrossingResult
from .solvers import GreedySolver, ShieldingSolver, cross_naively, cross_optimally
from .validator import InvalidInputError

__version__ = "1.0.0"

__all__ = [
    "Bridge",
    "Person",
    "PeopleRoster",
    "CrossingEvent",
    "CrossingResult",
    "GreedySolver",
    "ShieldingSolver",
    "cross_naively",
    "cross_optimally",
    "InvalidInputError",
]
