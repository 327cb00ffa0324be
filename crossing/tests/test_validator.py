"""Tests for validator module."""

import pytest
from crossing.models import Person, PeopleRoster
from crossing.validator import Validator, ValidationReport, InvalidInputError


def test_validate_roster_valid(classic_roster):
    """Test validation of a valid roster."""
    report = Validator().validate_roster(classic_roster)
    
    assert report.is_valid()
    assert report.errors == []
    assert report.warnings == []


def test_validate_empty_roster():
    """Test an empty roster is valid."""
    assert Validator().validate_roster(PeopleRoster()).is_valid()


def test_validate_roster_non_positive_speeds():
    """Test validation detects zero and negative speeds."""
    roster = PeopleRoster.from_pairs([("A", 0), ("B", 2), ("C", -1)])
    report = Validator().validate_roster(roster)
    
    assert not report.is_valid()
    assert len(report.errors) == 2
    assert all("must be positive" in error for error in report.errors)


@pytest.mark.parametrize("speed", [1.5, True, "3"])
def test_validate_roster_bypassed_model_validation(speed):
    """Test a person built without validation is still checked."""
    roster = PeopleRoster([Person.model_construct(name="A", speed=speed)])
    report = Validator().validate_roster(roster)
    
    assert not report.is_valid()
    assert "must be an integer" in report.errors[0]


def test_validate_roster_duplicate_names_warn():
    """Test duplicate names are a warning, not an error."""
    roster = PeopleRoster.from_pairs([("A", 1), ("A", 2)])
    report = Validator().validate_roster(roster)
    
    assert report.is_valid()
    assert len(report.warnings) == 1


def test_ensure_valid_raises():
    """Test ensure_valid raises with the collected errors."""
    roster = PeopleRoster.from_pairs([("A", 0)])
    
    with pytest.raises(InvalidInputError) as excinfo:
        Validator().ensure_valid(roster)
    
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.errors == ["Person 0 (A): speed must be positive, got 0"]


def test_ensure_valid_returns_report(classic_roster):
    """Test ensure_valid returns the report for a valid roster."""
    assert isinstance(Validator().ensure_valid(classic_roster), ValidationReport)
