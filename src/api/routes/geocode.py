"""
Geocoding proxy
===============

GET /api/v1/geocode?q=... -- up to five candidate coordinates for a place

Proxies Nominatim so browsers never call it directly; the shared throttle
keeps the whole deployment within Nominatim's usage policy.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from src.api.dependencies import get_geocoder
from src.api.middleware import RATE_LIMIT, limiter
from src.api.schemas import (
    DataResponse,
    ErrorResponse,
    GeocodeResultResponse,
)
from src.infrastructure.geocoding import GeocodingError, NominatimGeocoder
from src.infrastructure.locks import ThrottleTimeout

router = APIRouter(prefix="/geocode", tags=["geocode"])


@router.get(
    "",
    response_model=DataResponse[list[GeocodeResultResponse]],
    summary="Look up coordinates for a place name or address",
    responses={
        400: {"model": ErrorResponse, "description": "Missing or blank query"},
        502: {
            "model": ErrorResponse,
            "description": "Upstream geocoding service failed",
        },
    },
)
@limiter.limit(RATE_LIMIT)
async def geocode(
    request: Request,
    q: str = Query("", description="Free-text place or address"),
    geocoder: NominatimGeocoder = Depends(get_geocoder),
):
    if not q.strip():
        raise HTTPException(
            status_code=400, detail="Missing required query parameter: q"
        )
    try:
        results = await geocoder.search(q)
    except (GeocodingError, ThrottleTimeout):
        raise HTTPException(status_code=502, detail="Geocoding service error")
    return {"data": [GeocodeResultResponse.model_validate(r) for r in results]}
