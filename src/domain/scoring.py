"""
Relevance Scoring
=================

Formula
-------
Relevance = PACE_WEIGHT x Pace_Score + PROXIMITY_WEIGHT x Proximity

* **Pace_Score** -- fixed desirability per availability level
  (consistently 1.0, frequently 0.7, sometimes 0.4, rarely 0.1).
* **Proximity**  -- distance decay ``1 / (1 + d / 5)``: 1.0 at the user's
  location, 0.5 at five miles, tending to 0 far away.

The two weights must sum to exactly 1.0 so that a perfect pace match at
zero distance scores 1.0.

Complexity: O(1) per score.
"""

from __future__ import annotations

from .distance import haversine_miles
from .enums import AvailabilityLevel

PACE_SCORES: dict[AvailabilityLevel, float] = {
    AvailabilityLevel.CONSISTENTLY: 1.0,
    AvailabilityLevel.FREQUENTLY: 0.7,
    AvailabilityLevel.SOMETIMES: 0.4,
    AvailabilityLevel.RARELY: 0.1,
}

PACE_WEIGHT = 0.6
PROXIMITY_WEIGHT = 0.4

# Distance (miles) at which proximity has decayed to one half
PROXIMITY_HALF_DISTANCE_MILES = 5.0

if PACE_WEIGHT + PROXIMITY_WEIGHT != 1.0:
    raise ValueError("relevance weights must sum to 1.0")


def proximity_score(distance_miles: float) -> float:
    """Map a non-negative distance to a desirability value in (0, 1]."""
    return 1 / (1 + distance_miles / PROXIMITY_HALF_DISTANCE_MILES)


def pace_score(level: AvailabilityLevel | str) -> float:
    return PACE_SCORES[AvailabilityLevel(level)]


def relevance_score(
    pace_availability: AvailabilityLevel | str, distance_miles: float
) -> float:
    return (
        PACE_WEIGHT * pace_score(pace_availability)
        + PROXIMITY_WEIGHT * proximity_score(distance_miles)
    )


def relevance_score_from_coords(
    pace_availability: AvailabilityLevel | str,
    user_lat: float,
    user_lng: float,
    run_lat: float,
    run_lng: float,
) -> float:
    """Convenience wrapper: haversine distance, then ``relevance_score``."""
    distance = haversine_miles(user_lat, user_lng, run_lat, run_lng)
    return relevance_score(pace_availability, distance)
