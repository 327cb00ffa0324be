"""Greedy solver: the fastest person escorts everyone else."""

import logging
from collections import deque
from typing import Tuple

from ..config import NAIVE_SOLVER
from ..models.person import Person
from ..models.roster import PeopleRoster
from .base import BaseSolver, CrossingLog

logger = logging.getLogger(__name__)


class GreedySolver(BaseSolver):
    """Naive method: pair each person with the overall fastest person.
    
    The fastest person walks every other person across and brings the torch
    back each time. Order of the pairs does not change the total, so no
    sorting is needed and the method runs in O(N). It often gives the best
    time but not always: for speeds 1, 2, 5, 10 it needs 19 minutes where 17
    is possible.
    
    If several people share the fastest speed, the first of them in roster
    order escorts the others. Only the names in the log depend on this choice.
    """
    
    name = NAIVE_SOLVER
    description = "Pair everyone with the fastest person (fast, not always optimal)"
    
    @staticmethod
    def escort(waiting: PeopleRoster) -> Tuple[int, Person]:
        """Index and person of whoever walks everyone else across."""
        return waiting.fastest()
    
    def _cross(self, waiting: PeopleRoster, log: CrossingLog) -> int:
        total_speed = 0
        
        if len(waiting) == 0:
            return 0
        
        if len(waiting) == 1:
            log.cross(waiting[0])
            return waiting[0].speed
        
        fastest_index, fastest = self.escort(waiting)
        logger.info(f"Fastest overall person: {fastest}")
        
        # Everyone but the fastest, in roster order
        queue = deque(person for i, person in enumerate(waiting) if i != fastest_index)
        
        while queue:
            # The queued person is always the slower of the pair
            person = queue.popleft()
            total_speed += person.speed
            log.cross(person, fastest)
            
            if queue:
                total_speed += fastest.speed
                log.returns(fastest)
        
        return total_speed


def cross_naively(roster: PeopleRoster, sink=None):
    """Run the greedy solver on ``roster`` and return its CrossingResult."""
    return GreedySolver().solve(roster, sink=sink)
