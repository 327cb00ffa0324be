"""Data loader module for reading people files."""

import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd
import yaml
from pydantic import ValidationError

from .config import Config, CSV_SUFFIXES
from .models.person import Person
from .models.roster import PeopleRoster

logger = logging.getLogger(__name__)


class RosterLoadError(ValueError):
    """Raised when a people file is malformed or has invalid records."""


def _records_from_yaml(path: Path, people_key: str) -> List[Any]:
    """
    Read the list of person records from a YAML document.
    
    The format of the file is:
    
        people:
          - name: A
            speed: 1
          - name: B
            speed: 2
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RosterLoadError(f"{path}: not a valid YAML document ({e})") from e
    
    if not isinstance(document, dict) or people_key not in document:
        raise RosterLoadError(f"{path}: missing top-level '{people_key}' key")
    
    records = document[people_key]
    # "people:" with nothing under it parses as None
    if records is None:
        return []
    if not isinstance(records, list):
        raise RosterLoadError(f"{path}: '{people_key}' must be a list of records")
    return records


def _records_from_csv(path: Path) -> List[Dict[str, Any]]:
    """Read person records from a CSV file with ``name`` and ``speed`` columns."""
    try:
        df = pd.read_csv(path, dtype={"name": str})
    except pd.errors.EmptyDataError:
        return []
    logger.info(f"Loaded people CSV with {len(df)} rows")
    
    required_cols = ["name", "speed"]
    for col in required_cols:
        if col not in df.columns:
            raise RosterLoadError(f"{path}: missing required column: {col}")
    
    records = []
    for _, row in df.iterrows():
        speed = row["speed"]
        # pandas reads integer columns as numpy ints; floats only when a value is fractional or missing
        if pd.isna(speed):
            speed = None
        else:
            try:
                if float(speed).is_integer():
                    speed = int(float(speed))
            except (TypeError, ValueError):
                pass  # left as text, rejected when the Person is built
        # blank cells come back as NaN even for the str-typed name column
        name = None if pd.isna(row["name"]) else row["name"]
        records.append({"name": name, "speed": speed})
    return records


def _person_from_record(index: int, record: Any) -> Person:
    if not isinstance(record, dict):
        raise RosterLoadError(f"Person {index}: expected a mapping with name and speed, got {record!r}")
    
    for field in ("name", "speed"):
        if record.get(field) is None:
            raise RosterLoadError(f"Person {index}: missing required field '{field}'")
    
    try:
        return Person(name=str(record["name"]), speed=record["speed"])
    except ValidationError as e:
        raise RosterLoadError(
            f"Person {index} ({record['name']}): speed must be an integer, got {record['speed']!r}"
        ) from e


def load_people(path: str, config: Config = None) -> PeopleRoster:
    """
    Parse a people file into a roster.
    
    YAML is the native format; files ending in ``.csv`` are read with pandas.
    
    Args:
        path: Path to the people file
        config: Configuration object (for the top-level YAML key)
        
    Returns:
        PeopleRoster in file order
        
    Raises:
        FileNotFoundError: If the file does not exist
        RosterLoadError: If the document or one of its records is malformed
    """
    if config is None:
        config = Config()
    
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"People file not found: {path}")
    
    try:
        if file_path.suffix.lower() in CSV_SUFFIXES:
            records = _records_from_csv(file_path)
        else:
            records = _records_from_yaml(file_path, config.PEOPLE_KEY)
        
        roster = PeopleRoster(
            _person_from_record(i, record) for i, record in enumerate(records)
        )
    except Exception as e:
        logger.error(f"Error loading people from {path}: {e}")
        raise
    
    logger.info(f"Successfully loaded {len(roster)} people from {path}")
    return roster
