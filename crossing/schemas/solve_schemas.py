"""Schemas for solve endpoints."""

from pydantic import BaseModel, Field, StrictInt
from typing import List

from ..config import ALL_SOLVERS


class PersonInput(BaseModel):
    """One person in a solve request."""
    
    name: str
    speed: StrictInt = Field(..., description="Minutes to cross alone")


class SolveRequest(BaseModel):
    """Request model for solving a roster."""
    
    people: List[PersonInput]
    solver: str = Field(ALL_SOLVERS, description="naive, optimal or both")
    
    class Config:
        json_schema_extra = {
            "example": {
                "people": [
                    {"name": "A", "speed": 1},
                    {"name": "B", "speed": 2},
                    {"name": "C", "speed": 5},
                    {"name": "D", "speed": 10},
                ],
                "solver": "both",
            }
        }


class EventResponse(BaseModel):
    """One crossing or return in a response."""
    
    kind: str
    names: List[str]
    cost: int
    description: str


class SolverRunResponse(BaseModel):
    """Result of one solver run."""
    
    solver: str
    total: int
    total_formatted: str
    events: List[EventResponse]


class SolveResponse(BaseModel):
    """Response model for a solve request."""
    
    people_count: int
    results: List[SolverRunResponse]
