"""
Domain entities and value objects.

Patterns used
-------------
- ``PaceGroups`` is a fixed-field record: one attribute per pace range, so
  a complete availability map is guaranteed once the object exists.
- ``Run`` carries the listing's lifecycle (active / inactive).
- ``RankedRun`` is the immutable output of one ranking call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

from .enums import AvailabilityLevel, DayOfWeek, PaceRange, Terrain


class InvalidPaceRange(ValueError):
    """Raised when a pace range key is not one of the four known bands."""


class MalformedRunRecord(ValueError):
    """Raised when a run's pace-availability map is incomplete or invalid."""


def parse_pace_range(value: PaceRange | str) -> PaceRange:
    """Coerce *value* to a ``PaceRange`` or raise ``InvalidPaceRange``."""
    try:
        return PaceRange(value)
    except ValueError:
        raise InvalidPaceRange(f"Unknown pace range: {value!r}") from None


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


# Attribute name on ``PaceGroups`` for each pace range key
_PACE_FIELDS: dict[PaceRange, str] = {
    PaceRange.SUB_8: "sub_8",
    PaceRange.EIGHT_TO_NINE: "eight_to_nine",
    PaceRange.NINE_TO_TEN: "nine_to_ten",
    PaceRange.TEN_PLUS: "ten_plus",
}


@dataclass(frozen=True)
class PaceGroups:
    sub_8: AvailabilityLevel
    eight_to_nine: AvailabilityLevel
    nine_to_ten: AvailabilityLevel
    ten_plus: AvailabilityLevel

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PaceGroups":
        """
        Build from the wire / JSON shape ``{"sub_8": "rarely", ...}``.

        Exactly the four pace range keys must be present, each holding a
        known availability level.
        """
        keys = set(data)
        expected = {p.value for p in PaceRange}
        if keys != expected:
            missing = sorted(expected - keys)
            extra = sorted(str(k) for k in keys - expected)
            raise MalformedRunRecord(
                f"Pace groups must have exactly {sorted(expected)} "
                f"(missing={missing}, unexpected={extra})"
            )
        levels = {}
        for pace, attr in _PACE_FIELDS.items():
            raw = data[pace.value]
            try:
                levels[attr] = AvailabilityLevel(raw)
            except ValueError:
                raise MalformedRunRecord(
                    f"Unknown availability level {raw!r} for {pace.value}"
                ) from None
        return cls(**levels)

    def level_for(self, pace_range: PaceRange | str) -> AvailabilityLevel:
        return getattr(self, _PACE_FIELDS[parse_pace_range(pace_range)])

    def to_dict(self) -> dict[str, str]:
        return {
            pace.value: getattr(self, attr).value
            for pace, attr in _PACE_FIELDS.items()
        }


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class Run:
    id: Optional[int] = None
    name: str = ""
    day_of_week: DayOfWeek = DayOfWeek.MONDAY
    start_time: str = ""
    location_name: str = ""
    location: Location = field(default_factory=lambda: Location(0, 0))
    typical_distances: str = ""
    terrain: Terrain = Terrain.ROAD
    pace_groups: PaceGroups = field(
        default_factory=lambda: PaceGroups(
            AvailabilityLevel.RARELY,
            AvailabilityLevel.RARELY,
            AvailabilityLevel.RARELY,
            AvailabilityLevel.RARELY,
        )
    )
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    notes: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def latitude(self) -> float:
        return self.location.latitude

    @property
    def longitude(self) -> float:
        return self.location.longitude

    def deactivate(self) -> None:
        self.is_active = False

    def activate(self) -> None:
        self.is_active = True


@dataclass(frozen=True)
class RankedRun:
    run: Any
    relevance_score: float
    distance_miles: float
    pace_match: AvailabilityLevel
