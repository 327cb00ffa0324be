"""People roster model."""

from typing import Iterable, Iterator, List, Optional, Tuple
from .person import Person


class PeopleRoster:
    """Ordered, mutable collection of people who have not crossed yet.
    
    Solvers consume a roster destructively (sorting it and popping people off
    the end), so each run works on its own ``copy()``.
    """
    
    def __init__(self, people: Optional[Iterable[Person]] = None):
        self._people: List[Person] = list(people) if people is not None else []
    
    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, int]]) -> "PeopleRoster":
        """Build a roster from (name, speed) pairs."""
        return cls(Person(name=name, speed=speed) for name, speed in pairs)
    
    def add(self, person: Person) -> None:
        """Append a person to the end of the roster."""
        self._people.append(person)
    
    def copy(self) -> "PeopleRoster":
        """Return an independent copy, people included."""
        return PeopleRoster(person.model_copy() for person in self._people)
    
    def sort_by_speed(self) -> None:
        """Sort in place, fastest first. Ties keep their input order."""
        self._people.sort(key=lambda person: person.speed)
    
    def pop(self) -> Person:
        """Remove and return the last person."""
        return self._people.pop()
    
    def fastest(self) -> Tuple[int, Person]:
        """
        Find the fastest person in one pass.
        
        When several people share the minimum speed the first one in roster
        order is returned.
        
        Returns:
            Tuple of (index, person)
            
        Raises:
            ValueError: If the roster is empty
        """
        if not self._people:
            raise ValueError("Cannot pick the fastest person of an empty roster")
        
        fastest_index = 0
        for i, person in enumerate(self._people):
            if person.speed < self._people[fastest_index].speed:
                fastest_index = i
        return fastest_index, self._people[fastest_index]
    
    def speeds(self) -> List[int]:
        return [person.speed for person in self._people]
    
    def names(self) -> List[str]:
        return [person.name for person in self._people]
    
    def __len__(self) -> int:
        return len(self._people)
    
    def __iter__(self) -> Iterator[Person]:
        return iter(self._people)
    
    def __getitem__(self, index: int) -> Person:
        return self._people[index]
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PeopleRoster):
            return NotImplemented
        return self._people == other._people
    
    def __repr__(self) -> str:
        return f"PeopleRoster({', '.join(str(p) for p in self._people)})"
