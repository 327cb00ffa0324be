"""Base solver and event recording shared by the crossing strategies."""

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from ..models.person import Person
from ..models.roster import PeopleRoster
from ..models.crossing import CrossingEvent, CrossingResult
from ..validator import Validator

logger = logging.getLogger(__name__)

EventSink = Callable[[CrossingEvent], None]


class CrossingLog:
    """Collects crossing events in order and forwards each one to a sink."""
    
    def __init__(self, sink: Optional[EventSink] = None):
        self.events: List[CrossingEvent] = []
        self.sink = sink
    
    def _record(self, event: CrossingEvent) -> None:
        self.events.append(event)
        logger.debug(event.describe())
        if self.sink is not None:
            self.sink(event)
    
    def cross(self, *people: Person) -> None:
        self._record(CrossingEvent.crossing(*people))
    
    def returns(self, person: Person) -> None:
        self._record(CrossingEvent.returning(person))


class BaseSolver(ABC):
    """Common driver for crossing strategies.
    
    Subclasses implement ``_cross`` over a private copy of the roster, so a
    caller's roster is left untouched and can be handed to the next solver.
    """
    
    name: str = ""
    description: str = ""
    
    def __init__(self, validator: Optional[Validator] = None):
        self.validator = validator or Validator()
    
    def solve(self, roster: PeopleRoster, sink: Optional[EventSink] = None) -> CrossingResult:
        """
        Compute the total crossing time for everyone in the roster.
        
        Args:
            roster: People waiting to cross (not modified)
            sink: Optional callable receiving each event as it is produced
            
        Returns:
            CrossingResult with the total and the ordered events
            
        Raises:
            InvalidInputError: If any speed is not a positive integer
        """
        self.validator.ensure_valid(roster)
        
        working = roster.copy()
        log = CrossingLog(sink)
        
        logger.info(f"Running {self.name} solver for {len(working)} people")
        total = self._cross(working, log)
        logger.info(f"{self.name} solver finished: total {total} in {len(log.events)} trips")
        
        return CrossingResult(
            solver=self.name,
            total=total,
            people_count=len(roster),
            events=log.events,
        )
    
    @abstractmethod
    def _cross(self, waiting: PeopleRoster, log: CrossingLog) -> int:
        """Send everyone in ``waiting`` across, recording trips in ``log``."""
