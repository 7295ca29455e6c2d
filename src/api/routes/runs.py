"""
Run endpoints
=============

GET  /api/v1/runs                 -- list active runs
POST /api/v1/runs                 -- publish a run (returns its edit token once)
GET  /api/v1/runs/search          -- active runs ranked for a location + pace
GET  /api/v1/runs/{run_id}        -- run details
PUT  /api/v1/runs/{run_id}?token= -- edit a run (edit token required)
"""

import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_db
from src.api.middleware import RATE_LIMIT, limiter
from src.api.schemas import (
    DataResponse,
    ErrorResponse,
    RankedRunResponse,
    RunCreatedResponse,
    RunCreateRequest,
    RunResponse,
    RunUpdateRequest,
)
from src.config import settings
from src.domain.enums import PaceRange
from src.domain.ranking import rank_runs
from src.infrastructure.repositories import RunRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/runs", tags=["runs"])


@router.get(
    "",
    response_model=DataResponse[list[RunResponse]],
    summary="List active runs",
)
@limiter.limit(RATE_LIMIT)
async def list_runs(
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    runs = await RunRepository(db).get_active_runs()
    return {"data": [RunResponse.model_validate(r) for r in runs]}


@router.post(
    "",
    status_code=201,
    response_model=DataResponse[RunCreatedResponse],
    summary="Publish a run",
    responses={201: {"description": "Run created; keep the edit token."}},
)
@limiter.limit(RATE_LIMIT)
async def create_run(
    request: Request,
    body: RunCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    run = await RunRepository(db).create_run(**body.model_dump(mode="json"))
    logger.info("Created run %d (%s)", run.id, run.name)
    return {"data": RunCreatedResponse.model_validate(run)}


@router.get(
    "/search",
    response_model=DataResponse[list[RankedRunResponse]],
    summary="Rank active runs by pace match and proximity",
)
@limiter.limit(RATE_LIMIT)
async def search_runs(
    request: Request,
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    pace: PaceRange = Query(..., description="Seeker's pace range"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    runs = await RunRepository(db).get_active_runs()
    ranked = rank_runs(runs, lat, lng, pace)

    limit = limit or settings.search_default_limit
    if limit is not None:
        ranked = ranked[:limit]

    logger.info(
        "Ranked %d runs for pace=%s at (%.4f, %.4f)",
        len(runs), pace.value, lat, lng,
    )
    return {
        "data": [
            RankedRunResponse(
                run=RunResponse.model_validate(r.run),
                relevance_score=r.relevance_score,
                distance_miles=r.distance_miles,
                pace_match=r.pace_match,
            )
            for r in ranked
        ]
    }


@router.get(
    "/{run_id}",
    response_model=DataResponse[RunResponse],
    summary="Get run details",
    responses={404: {"model": ErrorResponse, "description": "Run not found"}},
)
@limiter.limit(RATE_LIMIT)
async def get_run(
    request: Request,
    run_id: int,
    db: AsyncSession = Depends(get_db),
):
    run = await RunRepository(db).get_by_id(run_id)
    if not run or not run.is_active:
        raise HTTPException(status_code=404, detail="Run not found")
    return {"data": RunResponse.model_validate(run)}


@router.put(
    "/{run_id}",
    response_model=DataResponse[RunResponse],
    summary="Edit a run",
    description=(
        "Requires the edit token returned when the run was created. "
        "Only the fields present in the body are changed; set "
        "``is_active`` to false to take a run off the map."
    ),
    responses={
        403: {"model": ErrorResponse, "description": "Missing or wrong edit token"},
        404: {"model": ErrorResponse, "description": "Run not found"},
    },
)
@limiter.limit(RATE_LIMIT)
async def update_run(
    request: Request,
    run_id: int,
    body: RunUpdateRequest,
    token: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    repo = RunRepository(db)

    run = await repo.get_by_id(run_id)
    if not run:
        raise HTTPException(status_code=404, detail="Run not found")

    if not token or not secrets.compare_digest(
        token.encode(), run.edit_token.encode()
    ):
        raise HTTPException(status_code=403, detail="Invalid edit token")

    changes = body.model_dump(mode="json", exclude_unset=True)
    run = await repo.update_run(run, changes)
    logger.info("Updated run %d (fields=%s)", run.id, sorted(changes))
    return {"data": RunResponse.model_validate(run)}
