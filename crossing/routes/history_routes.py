"""Routes for run history."""

import logging
from typing import Optional
from fastapi import APIRouter
from ..schemas.status_schemas import HistoryResponse
from ..services import get_solver_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["history"])


@router.get("/history", response_model=HistoryResponse)
async def get_history(limit: Optional[int] = 20):
    """
    Get recent solver runs.
    
    Args:
        limit: Number of recent runs to return (default: 20, use 0 or None for all)
    
    Returns:
        Recent runs and the number of runs kept
    """
    solver_service = get_solver_service()
    history_data = solver_service.get_history(limit=limit if limit and limit > 0 else None)
    return HistoryResponse(**history_data)
