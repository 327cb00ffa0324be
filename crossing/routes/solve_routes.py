"""Routes for solving rosters."""

import logging
from fastapi import APIRouter, HTTPException
from ..schemas.solve_schemas import SolveRequest, SolveResponse, SolverRunResponse, EventResponse
from ..schemas.status_schemas import SolversResponse, SolverInfo
from ..services import get_solver_service
from ..utils import format_minutes
from ..validator import InvalidInputError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["solve"])


@router.get("/solvers", response_model=SolversResponse)
async def list_solvers():
    """
    List the available crossing methods.
    
    Returns:
        Solver names and descriptions
    """
    solver_service = get_solver_service()
    return SolversResponse(
        solvers=[SolverInfo(**info) for info in solver_service.list_solvers()]
    )


@router.post("/solve", response_model=SolveResponse)
async def solve(request: SolveRequest):
    """
    Compute crossing sequences and totals for a roster.
    
    Args:
        request: People with their speeds and the solver to run
        
    Returns:
        One result per solver run, with the ordered crossing events
    """
    solver_service = get_solver_service()
    people = [(person.name, person.speed) for person in request.people]
    
    try:
        results = solver_service.solve(people, request.solver)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=e.args[0])
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.errors or str(e))
    
    return SolveResponse(
        people_count=len(people),
        results=[
            SolverRunResponse(
                solver=result.solver,
                total=result.total,
                total_formatted=format_minutes(result.total),
                events=[
                    EventResponse(
                        kind=event.kind,
                        names=[person.name for person in event.people],
                        cost=event.cost,
                        description=event.describe(),
                    )
                    for event in result.events
                ],
            )
            for result in results
        ],
    )
