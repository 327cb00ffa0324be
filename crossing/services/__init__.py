"""Service layer shared by the API routes."""

from typing import Optional

from .solver_service import SolverService

_solver_service: Optional[SolverService] = None


def get_solver_service() -> SolverService:
    """Return the process-wide SolverService, creating it on first use."""
    global _solver_service
    if _solver_service is None:
        _solver_service = SolverService()
    return _solver_service


__all__ = ["SolverService", "get_solver_service"]
