"""Crossing event and result models."""

from typing import List, Literal
from pydantic import BaseModel, Field
from .person import Person


CROSS = "cross"
RETURN = "return"


class CrossingEvent(BaseModel):
    """One trip over the bridge: a crossing of one or two people, or a return."""
    
    kind: Literal["cross", "return"]
    people: List[Person] = Field(..., min_length=1, max_length=2)
    cost: int  # minutes the trip takes
    
    @classmethod
    def crossing(cls, *people: Person) -> "CrossingEvent":
        """Create a crossing event; the pair moves at the slower member's pace."""
        return cls(
            kind=CROSS,
            people=list(people),
            cost=max(person.speed for person in people),
        )
    
    @classmethod
    def returning(cls, person: Person) -> "CrossingEvent":
        """Create a return event for the person bringing the torch back."""
        return cls(kind=RETURN, people=[person], cost=person.speed)
    
    def describe(self) -> str:
        """
        Human-readable form of the event.
        
        Examples:
            "(B,2) and (A,1) cross", "(A,1) crosses", "(A,1) returns"
        """
        if self.kind == RETURN:
            return f"{self.people[0]} returns"
        if len(self.people) == 1:
            return f"{self.people[0]} crosses"
        return f"{self.people[0]} and {self.people[1]} cross"


class CrossingResult(BaseModel):
    """Outcome of one solver run."""
    
    solver: str
    total: int
    people_count: int
    events: List[CrossingEvent] = Field(default_factory=list)
    
    def lines(self) -> List[str]:
        """Event descriptions in crossing order."""
        return [event.describe() for event in self.events]
    
    class Config:
        json_schema_extra = {
            "example": {
                "solver": "optimal",
                "total": 3,
                "people_count": 2,
                "events": [
                    {
                        "kind": "cross",
                        "people": [{"name": "B", "speed": 3}, {"name": "A", "speed": 1}],
                        "cost": 3,
                    }
                ],
            }
        }
