"""Configuration module for constants and settings."""

from typing import Optional
from pydantic_settings import BaseSettings


# Solver names, in the order they are run for comparison
NAIVE_SOLVER = "naive"
OPTIMAL_SOLVER = "optimal"
SOLVER_NAMES = [NAIVE_SOLVER, OPTIMAL_SOLVER]
ALL_SOLVERS = "both"

# Input file suffixes read with pandas instead of the YAML parser
CSV_SUFFIXES = (".csv",)


class Config(BaseSettings):
    """Application configuration with environment variable support."""
    
    # Input document
    PEOPLE_KEY: str = "people"
    DEFAULT_SOLVER: str = ALL_SOLVERS
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    
    # HTTP service
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    HISTORY_LIMIT: int = 100  # runs kept in memory
    
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }
