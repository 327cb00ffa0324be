"""Shielding solver: the two slowest people cross together when it pays off."""

import logging

from ..config import OPTIMAL_SOLVER
from ..models.roster import PeopleRoster
from .base import BaseSolver, CrossingLog

logger = logging.getLogger(__name__)


class ShieldingSolver(BaseSolver):
    """Shielding method, O(N log N) for the sort plus one pass.
    
    People are sorted fastest to slowest. While at least four are left, the
    two slowest are sent over by whichever of two moves is cheaper:
    
    - shielding: the two fastest cross, the fastest returns, the two slowest
      cross together, the second fastest returns. The second slowest's time is
      hidden behind the slowest's.
    - pairwise: the fastest escorts the slowest, returns, escorts the second
      slowest and returns again.
    
    The two slowest are then off the roster and the loop starts over. The last
    zero to three people are handled directly. The result never exceeds the
    greedy total.
    """
    
    name = OPTIMAL_SOLVER
    description = "Sort by speed and shield the two slowest when cheaper (optimal)"
    
    def _cross(self, waiting: PeopleRoster, log: CrossingLog) -> int:
        total_speed = 0
        
        waiting.sort_by_speed()
        
        while len(waiting) >= 4:
            n = len(waiting)
            fastest, second = waiting[0], waiting[1]
            slowest, second_slowest = waiting[n - 1], waiting[n - 2]
            
            total_shielding = (
                second.speed      # send the two fastest
                + fastest.speed   # the fastest returns
                + slowest.speed   # send the two slowest
                + second.speed    # second fastest returns
            )
            total_pairwise = (
                slowest.speed            # slowest with fastest
                + fastest.speed          # the fastest returns
                + second_slowest.speed   # next slowest with fastest
                + fastest.speed          # the fastest returns
            )
            logger.debug(
                f"{n} waiting: shielding costs {total_shielding}, pairwise costs {total_pairwise}"
            )
            
            if total_pairwise < total_shielding:
                log.cross(slowest, fastest)
                log.returns(fastest)
                log.cross(second_slowest, fastest)
                log.returns(fastest)
                total_speed += total_pairwise
            else:
                log.cross(second, fastest)
                log.returns(fastest)
                log.cross(slowest, second_slowest)
                log.returns(second)
                total_speed += total_shielding
            
            # The two slowest are across for good
            waiting.pop()
            waiting.pop()
        
        remaining = len(waiting)
        if remaining == 1:
            log.cross(waiting[0])
            total_speed += waiting[0].speed
        elif remaining == 2:
            log.cross(waiting[1], waiting[0])
            total_speed += waiting[1].speed
        elif remaining == 3:
            log.cross(waiting[2], waiting[0])
            log.returns(waiting[0])
            log.cross(waiting[1], waiting[0])
            total_speed += waiting[0].speed + waiting[1].speed + waiting[2].speed
        
        return total_speed


def cross_optimally(roster: PeopleRoster, sink=None):
    """Run the shielding solver on ``roster`` and return its CrossingResult."""
    return ShieldingSolver().solve(roster, sink=sink)
