"""
Run Ranking
===========

For each run:

1. ``d``          = haversine distance from the seeker to the meeting point.
2. ``pace_match`` = the run's availability level for the selected pace range.
3. ``score``      = ``relevance_score(pace_match, d)``.

Results are sorted by score, highest first.  Python's sort is stable, so
runs with exactly equal scores keep their input order; no secondary key
(distance, name, ...) is applied.

Runs are duck-typed: anything exposing ``latitude``, ``longitude`` and
``pace_groups`` works, where ``pace_groups`` is either a ``PaceGroups``
record or the raw JSON mapping stored on the ORM row.

Complexity
----------
Scoring: O(N), sorting: O(N log N) for N runs.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .distance import haversine_miles
from .entities import (
    MalformedRunRecord,
    PaceGroups,
    RankedRun,
    parse_pace_range,
)
from .enums import AvailabilityLevel, PaceRange
from .scoring import relevance_score


def pace_match_for(run: Any, pace_range: PaceRange) -> AvailabilityLevel:
    """Return the run's availability level for *pace_range*."""
    groups = run.pace_groups
    if isinstance(groups, PaceGroups):
        return groups.level_for(pace_range)
    if not isinstance(groups, Mapping) or pace_range.value not in groups:
        raise MalformedRunRecord(
            f"Run {getattr(run, 'id', None)!r} has no pace group "
            f"for {pace_range.value}"
        )
    try:
        return AvailabilityLevel(groups[pace_range.value])
    except ValueError:
        raise MalformedRunRecord(
            f"Run {getattr(run, 'id', None)!r} has unknown availability "
            f"level {groups[pace_range.value]!r}"
        ) from None


def rank_run(
    run: Any, user_lat: float, user_lng: float, pace_range: PaceRange
) -> RankedRun:
    distance = haversine_miles(user_lat, user_lng, run.latitude, run.longitude)
    pace_match = pace_match_for(run, pace_range)
    return RankedRun(
        run=run,
        relevance_score=relevance_score(pace_match, distance),
        distance_miles=distance,
        pace_match=pace_match,
    )


def rank_runs(
    runs: Iterable[Any],
    user_lat: float,
    user_lng: float,
    pace_range: PaceRange | str,
) -> list[RankedRun]:
    """
    Score every run against the seeker's location and pace and return them
    ordered by relevance, highest first.

    Raises ``InvalidPaceRange`` for an unknown *pace_range* and
    ``MalformedRunRecord`` if any run lacks a valid level for it; no run
    is ever silently dropped.
    """
    pace = parse_pace_range(pace_range)
    ranked = [rank_run(run, user_lat, user_lng, pace) for run in runs]
    ranked.sort(key=lambda r: r.relevance_score, reverse=True)
    return ranked
