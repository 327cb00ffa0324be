"""Tests for the greedy (naive) solver."""

import pytest
from crossing.models import PeopleRoster
from crossing.solvers import GreedySolver, cross_naively
from crossing.validator import InvalidInputError


def test_greedy_no_people():
    """Test an empty roster takes no time."""
    result = GreedySolver().solve(PeopleRoster())
    
    assert result.total == 0
    assert result.events == []
    assert result.solver == "naive"


def test_greedy_one_person():
    """Test a single person just walks across."""
    result = GreedySolver().solve(PeopleRoster.from_pairs([("A", 7)]))
    
    assert result.total == 7
    assert result.lines() == ["(A,7) crosses"]


def test_greedy_two_people():
    """Test two people cross together at the slower pace."""
    result = GreedySolver().solve(PeopleRoster.from_pairs([("A", 8), ("B", 3)]))
    
    assert result.total == 8
    assert result.lines() == ["(A,8) and (B,3) cross"]


def test_greedy_classic_instance(classic_roster):
    """Test the fastest person escorts everyone for 19 minutes."""
    result = GreedySolver().solve(classic_roster)
    
    assert result.total == 19
    assert result.lines() == [
        "(B,2) and (A,1) cross",
        "(A,1) returns",
        "(C,5) and (A,1) cross",
        "(A,1) returns",
        "(D,10) and (A,1) cross",
    ]


def test_greedy_keeps_input_order():
    """Test the escorted people cross in roster order, not sorted order."""
    roster = PeopleRoster.from_pairs([("D", 10), ("A", 1), ("C", 5), ("B", 2)])
    result = GreedySolver().solve(roster)
    
    assert result.total == 19
    crossings = [event for event in result.events if event.kind == "cross"]
    assert [event.people[0].name for event in crossings] == ["D", "C", "B"]


def test_greedy_tie_for_fastest_uses_first():
    """Test the first of two equally fast people is the escort."""
    roster = PeopleRoster.from_pairs([("X", 4), ("A", 1), ("B", 1)])
    result = GreedySolver().solve(roster)
    
    assert result.total == 4 + 1 + 1
    assert result.lines() == [
        "(X,4) and (A,1) cross",
        "(A,1) returns",
        "(B,1) and (A,1) cross",
    ]


def test_greedy_does_not_modify_roster(classic_roster):
    """Test the caller's roster is left as it was."""
    before = classic_roster.copy()
    GreedySolver().solve(classic_roster)
    assert classic_roster == before


def test_greedy_sink_receives_events_in_order(classic_roster):
    """Test events reach the sink as they are produced."""
    received = []
    result = cross_naively(classic_roster, sink=received.append)
    
    assert received == result.events


def test_greedy_rejects_non_positive_speed():
    """Test a zero speed is refused instead of producing a total."""
    roster = PeopleRoster.from_pairs([("A", 1), ("B", 0)])
    with pytest.raises(InvalidInputError):
        GreedySolver().solve(roster)


def test_greedy_escort_is_first_fastest():
    """Test the escort is the first of the fastest people in roster order."""
    roster = PeopleRoster.from_pairs([("X", 4), ("A", 1), ("B", 1)])
    index, person = GreedySolver.escort(roster)
    
    assert (index, person.name) == (1, "A")
    assert GreedySolver().solve(roster).events[0].people[1] == person
