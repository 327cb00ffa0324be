"""Service for running solvers on behalf of the API."""

import logging
from collections import deque
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from ..bridge import Bridge
from ..config import Config
from ..models.crossing import CrossingResult
from ..models.roster import PeopleRoster
from ..solvers import SOLVERS

logger = logging.getLogger(__name__)


class SolverService:
    """Runs solvers on request and keeps a short in-memory history of runs."""
    
    def __init__(self, config: Config = None):
        """
        Initialize solver service.
        
        Args:
            config: Configuration object (history size)
        """
        self.config = config or Config()
        self.history = deque(maxlen=self.config.HISTORY_LIMIT)
    
    def list_solvers(self) -> List[Dict[str, str]]:
        return [
            {"name": name, "description": solver_cls.description}
            for name, solver_cls in SOLVERS.items()
        ]
    
    def solve(self, people: List[Tuple[str, int]], solver: str) -> List[CrossingResult]:
        """
        Solve a roster with one solver or all of them.
        
        Args:
            people: (name, speed) pairs in request order
            solver: Solver name or "both"
            
        Returns:
            One CrossingResult per solver run
            
        Raises:
            KeyError: If the solver name is unknown
            InvalidInputError: If a speed is not positive
        """
        bridge = Bridge(PeopleRoster.from_pairs(people), config=self.config)
        results = bridge.run(solver)
        
        timestamp = datetime.now().isoformat()
        for result in results:
            self.history.append({
                "timestamp": timestamp,
                "solver": result.solver,
                "people_count": result.people_count,
                "total": result.total,
            })
        logger.info(f"Solved {len(people)} people with {solver}: "
                    f"{', '.join(f'{r.solver}={r.total}' for r in results)}")
        return results
    
    def get_history(self, limit: Optional[int] = None) -> Dict:
        """
        Get recent runs, oldest first.
        
        Args:
            limit: Number of most recent runs to return (None for all)
        """
        runs = list(self.history)
        if limit is not None:
            runs = runs[-limit:]
        return {"runs": runs, "total_runs": len(self.history)}
    
    def clear(self) -> None:
        self.history.clear()
