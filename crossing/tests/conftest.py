"""Shared fixtures for crossing tests."""

import logging

import pytest
from crossing.logger import HANDLER_NAMES
from crossing.models.roster import PeopleRoster


@pytest.fixture
def classic_roster():
    """The four-person puzzle: A=1, B=2, C=5, D=10."""
    return PeopleRoster.from_pairs([("A", 1), ("B", 2), ("C", 5), ("D", 10)])


@pytest.fixture
def people_file(tmp_path):
    """Write a YAML people file and return its path."""
    def _write(text: str, name: str = "people.yaml") -> str:
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write


@pytest.fixture(autouse=True)
def reset_logging_handlers():
    """Remove handlers installed by configure_logging once a test finishes."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() in HANDLER_NAMES:
            root_logger.removeHandler(handler)
            handler.close()
