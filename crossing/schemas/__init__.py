"""API schemas for request/response models."""

from .solve_schemas import PersonInput, SolveRequest, EventResponse, SolverRunResponse, SolveResponse
from .status_schemas import SolverInfo, SolversResponse, HistoryEntry, HistoryResponse

__all__ = [
    "PersonInput",
    "SolveRequest",
    "EventResponse",
    "SolverRunResponse",
    "SolveResponse",
    "SolverInfo",
    "SolversResponse",
    "HistoryEntry",
    "HistoryResponse",
]
