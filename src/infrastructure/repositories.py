"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

Each repository receives an ``AsyncSession`` (unit-of-work) and exposes
domain-relevant queries only.
"""

from __future__ import annotations

import secrets
from datetime import datetime, timezone
from typing import Any, Optional

from geoalchemy2.functions import ST_MakePoint, ST_SetSRID
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import RunModel


def new_edit_token() -> str:
    """Unguessable per-run secret that authorises edits."""
    return secrets.token_urlsafe(32)


def _point(lat: float, lng: float):
    return ST_SetSRID(ST_MakePoint(lng, lat), 4326)


class RunRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_run(
        self,
        *,
        name: str,
        day_of_week: str,
        start_time: str,
        location_name: str,
        latitude: float,
        longitude: float,
        typical_distances: str,
        terrain: str,
        pace_groups: dict[str, str],
        contact_name: str | None = None,
        contact_email: str | None = None,
        contact_phone: str | None = None,
        notes: str | None = None,
    ) -> RunModel:
        """Create an active run with a fresh edit token and PostGIS point."""
        now = datetime.now(timezone.utc)
        run = RunModel(
            name=name,
            day_of_week=day_of_week,
            start_time=start_time,
            location_name=location_name,
            latitude=latitude,
            longitude=longitude,
            meeting_point=_point(latitude, longitude),
            typical_distances=typical_distances,
            terrain=terrain,
            pace_groups=pace_groups,
            contact_name=contact_name,
            contact_email=contact_email,
            contact_phone=contact_phone,
            notes=notes,
            is_active=True,
            edit_token=new_edit_token(),
            created_at=now,
            updated_at=now,
        )
        self.session.add(run)
        await self.session.flush()
        return run

    async def get_by_id(self, run_id: int) -> Optional[RunModel]:
        return await self.session.get(RunModel, run_id)

    async def get_active_runs(self) -> list[RunModel]:
        result = await self.session.execute(
            select(RunModel)
            .where(RunModel.is_active.is_(True))
            .order_by(RunModel.id)
        )
        return list(result.scalars().all())

    async def update_run(self, run: RunModel, changes: dict[str, Any]) -> RunModel:
        """Apply a partial update; keeps ``meeting_point`` in sync."""
        for attr, value in changes.items():
            setattr(run, attr, value)
        if "latitude" in changes or "longitude" in changes:
            run.meeting_point = _point(run.latitude, run.longitude)
        run.updated_at = datetime.now(timezone.utc)
        await self.session.flush()
        return run

    async def count_active(self) -> int:
        result = await self.session.execute(
            select(func.count())
            .select_from(RunModel)
            .where(RunModel.is_active.is_(True))
        )
        return result.scalar() or 0
