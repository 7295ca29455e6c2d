"""
Admin / observability endpoints
===============================

GET /api/v1/admin/health -- liveness check, always ``{"status": "ok"}``
GET /api/v1/admin/stats  -- number of active runs currently on the map
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_db
from src.api.middleware import RATE_LIMIT, limiter
from src.api.schemas import HealthResponse, StatsResponse
from src.infrastructure.repositories import RunRepository

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()


@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="Count of runs currently listed on the map",
)
@limiter.limit(RATE_LIMIT)
async def stats(
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    return StatsResponse(active_runs=await RunRepository(db).count_active())
