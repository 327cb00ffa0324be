"""Bridge: owns the waiting roster and runs the crossing strategies on it."""

import logging
from typing import List, Optional

from .config import Config, ALL_SOLVERS
from .data_loader import load_people
from .models.crossing import CrossingResult
from .models.roster import PeopleRoster
from .solvers import EventSink, GreedySolver, ShieldingSolver, get_solver, resolve_solver_names
from .validator import Validator

logger = logging.getLogger(__name__)


class Bridge:
    """A narrow bridge with a roster of people waiting to cross.
    
    Every run hands the solver the waiting roster, and the solver works on its
    own copy, so the naive and shielding methods can be compared back-to-back
    on the same people.
    """
    
    def __init__(self, waiting_people: Optional[PeopleRoster] = None, config: Config = None):
        self.config = config or Config()
        self.validator = Validator()
        self.waiting_people = waiting_people if waiting_people is not None else PeopleRoster()
    
    def read_people_file(self, filename: str) -> PeopleRoster:
        """
        Load the people file into the waiting roster.
        
        Args:
            filename: Path to a YAML (or CSV) people file
            
        Returns:
            The loaded roster
            
        Raises:
            FileNotFoundError, RosterLoadError: If the file cannot be read
            InvalidInputError: If a speed is not positive
        """
        roster = load_people(filename, self.config)
        self.validator.ensure_valid(roster)
        self.waiting_people = roster
        return roster
    
    def cross_naively(self, sink: Optional[EventSink] = None) -> CrossingResult:
        """Greedy method: everyone is escorted by the fastest person."""
        return GreedySolver(self.validator).solve(self.waiting_people, sink=sink)
    
    def cross_optimally(self, sink: Optional[EventSink] = None) -> CrossingResult:
        """Shielding method: the two slowest cross together when cheaper."""
        return ShieldingSolver(self.validator).solve(self.waiting_people, sink=sink)
    
    def run(self, solver: str = ALL_SOLVERS, sink: Optional[EventSink] = None) -> List[CrossingResult]:
        """
        Run one solver by name, or all of them for ``both``.
        
        Raises:
            KeyError: If the solver name is unknown
        """
        results = []
        for name in resolve_solver_names(solver):
            results.append(get_solver(name).solve(self.waiting_people, sink=sink))
        return results
    
    def compare(self, sink: Optional[EventSink] = None) -> List[CrossingResult]:
        """Run the naive then the optimal method on the same people."""
        results = [self.cross_naively(sink), self.cross_optimally(sink)]
        naive, optimal = results
        if optimal.total < naive.total:
            logger.info(f"Shielding saves {naive.total - optimal.total} minutes over the naive method")
        return results
