"""Tests for utility functions and report generation."""

import json

import pytest
from crossing.bridge import Bridge
from crossing.logger import generate_report
from crossing.utils import format_minutes


@pytest.mark.parametrize(
    "minutes, expected",
    [
        (0, "0 minutes"),
        (1, "1 minute"),
        (17, "17 minutes"),
        (60, "1 hour"),
        (61, "1 hour 1 minute"),
        (135, "2 hours 15 minutes"),
    ],
)
def test_format_minutes(minutes, expected):
    """Test durations are spelled out."""
    assert format_minutes(minutes) == expected


def test_generate_report(classic_roster, tmp_path):
    """Test the JSON report holds every run with its events."""
    results = Bridge(classic_roster).compare()
    generate_report(results, str(tmp_path / "crossing.report"))
    
    data = json.loads((tmp_path / "crossing.json").read_text())
    assert [run["solver"] for run in data["runs"]] == ["naive", "optimal"]
    assert len(data["runs"][1]["events"]) == 5
    
    text = (tmp_path / "crossing.txt").read_text()
    assert "BRIDGE CROSSING REPORT" in text
    assert "(D,10) and (C,5) cross" in text
