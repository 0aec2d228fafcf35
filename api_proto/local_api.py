from datetime import date
from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from meeting_solver import MeetingSolverError, solve_schedule
from meeting_solver.constraints import parse_constraint
from meeting_solver.logging_utils import get_logger
from meeting_solver.postprocess.render_result import build_result

logger = get_logger()

app = FastAPI()


class SolveRequest(BaseModel):
    meetings: int = Field(ge=0)
    range_start: date
    range_end: date
    constraints: List[str] = []  # e.g. ["0 < 1", "0 + 3 <= 2", "1 != 2024-05-01"]


@app.post("/api/solve")
def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Parses the constraint expressions and runs the meeting scheduler.
    """
    try:
        constraints = [parse_constraint(text) for text in request.constraints]
        result = solve_schedule(
            request.meetings,
            request.range_start,
            request.range_end,
            constraints,
        )
    except MeetingSolverError as e:
        logger.warning("Rejected solve request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return build_result(result)


@app.get("/api/health")
def api_health():
    return {"status": "ok"}
