"""Routes package for API endpoints."""

from .solve_routes import router as solve_router
from .history_routes import router as history_router

__all__ = ["solve_router", "history_router"]
