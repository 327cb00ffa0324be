"""Person model."""

from pydantic import BaseModel, StrictInt


class Person(BaseModel):
    """Represents a person waiting to cross the bridge."""
    
    name: str
    speed: StrictInt  # minutes to cross alone
    
    def __lt__(self, other: "Person") -> bool:
        """Order people by speed, fastest first."""
        return self.speed < other.speed
    
    def __le__(self, other: "Person") -> bool:
        """Less than or equal comparison."""
        return self.speed <= other.speed
    
    def __gt__(self, other: "Person") -> bool:
        """Greater than comparison."""
        return self.speed > other.speed
    
    def __ge__(self, other: "Person") -> bool:
        """Greater than or equal comparison."""
        return self.speed >= other.speed
    
    def __str__(self) -> str:
        # (Fred,12)
        return f"({self.name},{self.speed})"
    
    class Config:
        validate_assignment = True
        json_schema_extra = {
            "example": {
                "name": "A",
                "speed": 1,
            }
        }
