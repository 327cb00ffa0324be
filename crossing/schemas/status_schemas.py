"""Schemas for solver listing and history endpoints."""

from pydantic import BaseModel
from typing import List


class SolverInfo(BaseModel):
    """A solver available to the API."""
    
    name: str
    description: str


class SolversResponse(BaseModel):
    """Response model for the solver listing."""
    
    solvers: List[SolverInfo]


class HistoryEntry(BaseModel):
    """Summary of one past solver run."""
    
    timestamp: str
    solver: str
    people_count: int
    total: int


class HistoryResponse(BaseModel):
    """Response model for recent solver runs."""
    
    runs: List[HistoryEntry]
    total_runs: int
