"""Validator module for roster checks before any solver runs."""

import logging
from collections import Counter
from typing import List
from pydantic import BaseModel
from .models.roster import PeopleRoster

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when a roster cannot be solved (e.g. a non-positive speed)."""
    
    def __init__(self, message: str, errors: List[str] = None):
        super().__init__(message)
        self.errors = errors or []


class ValidationReport(BaseModel):
    """Validation report with errors and warnings."""
    
    errors: List[str]
    warnings: List[str]
    
    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0


class Validator:
    """Validates a roster of people."""
    
    def validate_roster(self, roster: PeopleRoster) -> ValidationReport:
        """
        Validate every person in the roster.
        
        Speeds must be strictly positive integers. Duplicate names are allowed
        but reported as warnings.
        
        Args:
            roster: Roster to check
            
        Returns:
            ValidationReport with errors and warnings
        """
        errors = []
        warnings = []
        
        for i, person in enumerate(roster):
            # bool is an int subclass, so check it explicitly
            if isinstance(person.speed, bool) or not isinstance(person.speed, int):
                errors.append(
                    f"Person {i} ({person.name}): speed must be an integer, got {person.speed!r}"
                )
            elif person.speed <= 0:
                errors.append(
                    f"Person {i} ({person.name}): speed must be positive, got {person.speed}"
                )
        
        counts = Counter(roster.names())
        for name, count in counts.items():
            if count > 1:
                warnings.append(f"Name {name!r} appears {count} times")
        
        return ValidationReport(errors=errors, warnings=warnings)
    
    def ensure_valid(self, roster: PeopleRoster) -> ValidationReport:
        """
        Validate the roster and raise if it has errors.
        
        Raises:
            InvalidInputError: If any person has an invalid speed
        """
        report = self.validate_roster(roster)
        for warning in report.warnings:
            logger.warning(warning)
        
        if not report.is_valid():
            raise InvalidInputError(
                f"Invalid roster: {'; '.join(report.errors)}", errors=report.errors
            )
        return report
