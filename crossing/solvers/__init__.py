"""Crossing solvers package.

Two strategies are available: the greedy ("naive") method and the shielding
("optimal") method.
"""

from typing import Dict, List, Type

from ..config import SOLVER_NAMES, ALL_SOLVERS
from .base import BaseSolver, CrossingLog, EventSink
from .greedy_solver import GreedySolver, cross_naively
from .shielding_solver import ShieldingSolver, cross_optimally

SOLVERS: Dict[str, Type[BaseSolver]] = {
    GreedySolver.name: GreedySolver,
    ShieldingSolver.name: ShieldingSolver,
}


def get_solver(name: str) -> BaseSolver:
    """
    Create a solver by name.
    
    Raises:
        KeyError: If no solver has that name
    """
    if name not in SOLVERS:
        raise KeyError(f"Unknown solver {name!r}, expected one of {', '.join(SOLVER_NAMES)}")
    return SOLVERS[name]()


def resolve_solver_names(name: str) -> List[str]:
    """Expand ``both`` into every solver name, in comparison order."""
    if name == ALL_SOLVERS:
        return list(SOLVER_NAMES)
    if name not in SOLVERS:
        raise KeyError(f"Unknown solver {name!r}, expected one of {', '.join(SOLVER_NAMES + [ALL_SOLVERS])}")
    return [name]


__all__ = [
    "BaseSolver",
    "CrossingLog",
    "EventSink",
    "GreedySolver",
    "ShieldingSolver",
    "SOLVERS",
    "get_solver",
    "resolve_solver_names",
    "cross_naively",
    "cross_optimally",
]
