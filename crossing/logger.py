"""Logging and reporting module."""

import json
import logging
import logging.handlers
from pathlib import Path
from typing import List, Optional
from datetime import datetime

from .models.crossing import CrossingResult
from .utils import format_minutes

CONSOLE_HANDLER = "crossing.console"
FILE_HANDLER = "crossing.file"
HANDLER_NAMES = (CONSOLE_HANDLER, FILE_HANDLER)


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure logging.
    
    Can be called again (e.g. once per CLI run); handlers installed by an
    earlier call are replaced.
    
    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file, or None to log to the console only
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() in HANDLER_NAMES:
            root_logger.removeHandler(handler)
            handler.close()
    
    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    
    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)
    
    # File handler
    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.set_name(FILE_HANDLER)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def generate_report(results: List[CrossingResult], output_path: str) -> None:
    """
    Write the crossing results as a JSON report and a text summary.
    
    Args:
        results: One result per solver run
        output_path: Path of the report; the suffix is replaced by .json and .txt
    """
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    
    report = {
        "generated_at": datetime.now().isoformat(),
        "summary": {result.solver: result.total for result in results},
        "runs": [result.model_dump() for result in results],
    }
    
    # Write JSON report
    json_path = output_file.with_suffix(".json")
    with open(json_path, "w") as f:
        json.dump(report, f, indent=2)
    
    # Write text summary
    text_path = output_file.with_suffix(".txt")
    with open(text_path, "w") as f:
        f.write("=" * 60 + "\n")
        f.write("BRIDGE CROSSING REPORT\n")
        f.write("=" * 60 + "\n\n")
        for result in results:
            f.write(f"Solver: {result.solver}\n")
            f.write(f"People: {result.people_count}\n")
            for line in result.lines():
                f.write(f"  {line}\n")
            f.write(f"Total: {result.total} ({format_minutes(result.total)})\n\n")
        f.write("=" * 60 + "\n")
    
    logging.info(f"Report generated: {json_path} and {text_path}")
