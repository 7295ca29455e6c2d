"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from src.domain.enums import AvailabilityLevel, DayOfWeek, PaceRange, Terrain

T = TypeVar("T")

# Columns that are NOT NULL in the database; an update may omit them but
# may not null them out.
_REQUIRED_ON_UPDATE = (
    "name",
    "day_of_week",
    "start_time",
    "location_name",
    "latitude",
    "longitude",
    "typical_distances",
    "terrain",
    "pace_groups",
    "is_active",
)

PaceGroupsField = dict[PaceRange, AvailabilityLevel]


def _check_pace_groups(value: Optional[PaceGroupsField]) -> Optional[PaceGroupsField]:
    if value is not None and set(value) != set(PaceRange):
        missing = sorted(p.value for p in set(PaceRange) - set(value))
        raise ValueError(f"pace_groups is missing pace ranges: {missing}")
    return value


# ── Requests ──────────────────────────────────────────────────────────


class RunCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    day_of_week: DayOfWeek
    start_time: str = Field(..., min_length=1, examples=["6:30 AM"])
    location_name: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    typical_distances: str = Field(..., min_length=1, examples=["4-6 miles"])
    terrain: Terrain
    pace_groups: PaceGroupsField = Field(
        ...,
        description="Availability level for every one of the four pace ranges.",
    )
    contact_name: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("pace_groups")
    @classmethod
    def pace_groups_complete(cls, value):
        return _check_pace_groups(value)


class RunUpdateRequest(BaseModel):
    """Partial update: only the fields sent are changed."""

    name: Optional[str] = Field(None, min_length=1)
    day_of_week: Optional[DayOfWeek] = None
    start_time: Optional[str] = Field(None, min_length=1)
    location_name: Optional[str] = Field(None, min_length=1)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    typical_distances: Optional[str] = Field(None, min_length=1)
    terrain: Optional[Terrain] = None
    pace_groups: Optional[PaceGroupsField] = None
    contact_name: Optional[str] = None
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = None
    notes: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("pace_groups")
    @classmethod
    def pace_groups_complete(cls, value):
        return _check_pace_groups(value)

    @model_validator(mode="after")
    def required_fields_not_null(self) -> "RunUpdateRequest":
        for name in _REQUIRED_ON_UPDATE:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


# ── Responses ─────────────────────────────────────────────────────────


class DataResponse(BaseModel, Generic[T]):
    data: T


class RunResponse(BaseModel):
    id: int
    name: str
    day_of_week: str
    start_time: str
    location_name: str
    latitude: float
    longitude: float
    typical_distances: str
    terrain: str
    pace_groups: dict[str, str]
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    notes: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class RunCreatedResponse(RunResponse):
    """Returned once, on creation: the only time the edit token is exposed."""

    edit_token: str


class RankedRunResponse(BaseModel):
    run: RunResponse
    relevance_score: float
    distance_miles: float
    pace_match: AvailabilityLevel

    model_config = {"from_attributes": True}


class GeocodeResultResponse(BaseModel):
    display_name: str
    lat: float
    lng: float

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    status: str = "ok"


class StatsResponse(BaseModel):
    active_runs: int


class ErrorResponse(BaseModel):
    detail: str
