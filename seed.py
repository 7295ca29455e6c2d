"""
Seed script -- populates the database with sample data for reviewers.

Run after migrations:
    python seed.py

Creates 12 weekly drop-in group runs around Montgomery County, MD.  Pace
group availability is an estimate based on the type of run.
"""

import asyncio

from sqlalchemy import text

from src.domain.entities import PaceGroups
from src.domain.enums import AvailabilityLevel, DayOfWeek, PaceRange, Terrain
from src.infrastructure.database import async_session_factory, dispose_engine
from src.infrastructure.repositories import RunRepository

C = AvailabilityLevel.CONSISTENTLY
F = AvailabilityLevel.FREQUENTLY
S = AvailabilityLevel.SOMETIMES
R = AvailabilityLevel.RARELY


def _paces(sub_8, eight_to_nine, nine_to_ten, ten_plus) -> dict[str, str]:
    """Pace map in the stored JSON shape, ordered sub_8 .. 10_plus."""
    return PaceGroups(sub_8, eight_to_nine, nine_to_ten, ten_plus).to_dict()


RUNS = [
    {
        "name": "KenGar Long Run",
        "day_of_week": DayOfWeek.SUNDAY, "start_time": "8:00 AM",
        "location_name": "Ken-Gar, Rock Creek Park (4140 Wexford Dr, Kensington)",
        "lat": 39.0321, "lng": -77.0718,
        "typical_distances": "5-20 miles", "terrain": Terrain.MIXED,
        "paces": _paces(C, C, C, C),
        "notes": "Flagship long run. Multiple pace groups form every Sunday.",
    },
    {
        "name": "JobJog",
        "day_of_week": DayOfWeek.MONDAY, "start_time": "9:30 AM",
        "location_name": "Coffee Republic (801 Pleasant Dr #100, Rockville)",
        "lat": 39.0780, "lng": -77.1382,
        "typical_distances": "30-35 min run/walk", "terrain": Terrain.ROAD,
        "paces": _paces(R, S, F, C),
        "notes": "Social run/walk, beginner-friendly. Coffee afterward.",
    },
    {
        "name": "Kentlands/Lakelands Run",
        "day_of_week": DayOfWeek.MONDAY, "start_time": "7:00 PM",
        "location_name": "Lakelands Park Pavilion (1368 Main St, Gaithersburg)",
        "lat": 39.1273, "lng": -77.2316,
        "typical_distances": "3 or 5 miles", "terrain": Terrain.ROAD,
        "paces": _paces(S, F, C, F),
    },
    {
        "name": "Third Hill Brewing Pub Run",
        "day_of_week": DayOfWeek.TUESDAY, "start_time": "6:00 PM",
        "location_name": "Third Hill Brewing (8216 Georgia Ave, Silver Spring)",
        "lat": 38.9960, "lng": -77.0277,
        "typical_distances": "3 or 5 miles", "terrain": Terrain.ROAD,
        "paces": _paces(S, F, C, C),
    },
    {
        "name": "My Muddy Shoes (Tuesday)",
        "day_of_week": DayOfWeek.TUESDAY, "start_time": "6:00 PM",
        "location_name": "Redland Middle School (6505 Muncaster Mill Rd, Derwood)",
        "lat": 39.1203, "lng": -77.1390,
        "typical_distances": "5+ miles", "terrain": Terrain.TRAIL,
        "paces": _paces(R, S, F, C),
        "notes": "Trail pace is slower than road pace. Watch for roots.",
    },
    {
        "name": "Track Workout (Montgomery College)",
        "day_of_week": DayOfWeek.WEDNESDAY, "start_time": "6:30 PM",
        "location_name": "Montgomery College Track (51 Mannakee St, Rockville)",
        "lat": 39.0868, "lng": -77.1482,
        "typical_distances": "Track intervals", "terrain": Terrain.ROAD,
        "paces": _paces(C, F, S, R),
    },
    {
        "name": "Silver Spring Run",
        "day_of_week": DayOfWeek.WEDNESDAY, "start_time": "7:00 PM",
        "location_name": "Acorn Park (8075 Newell St, Silver Spring)",
        "lat": 38.9974, "lng": -77.0268,
        "typical_distances": "3 or 5 miles", "terrain": Terrain.ROAD,
        "paces": _paces(S, F, C, F),
    },
    {
        "name": "Eastern County Track Workout",
        "day_of_week": DayOfWeek.WEDNESDAY, "start_time": "7:00 PM",
        "location_name": "Montgomery Blair HS Track (51 University Blvd E, Silver Spring)",
        "lat": 39.0147, "lng": -77.0096,
        "typical_distances": "Track intervals", "terrain": Terrain.ROAD,
        "paces": _paces(C, F, S, R),
    },
    {
        "name": "Fallsgrove Run",
        "day_of_week": DayOfWeek.THURSDAY, "start_time": "5:30 AM",
        "location_name": "Millennium Trail, Fallsgrove (Seven Locks Rd, Rockville)",
        "lat": 39.1007, "lng": -77.1933,
        "typical_distances": "4-6 miles", "terrain": Terrain.ROAD,
        "paces": _paces(F, C, F, S),
    },
    {
        "name": "Kemp Mill Run",
        "day_of_week": DayOfWeek.THURSDAY, "start_time": "5:30 AM",
        "location_name": "Kemp Mill Shopping Center (1370 Lamberton Dr, Silver Spring)",
        "lat": 39.0423, "lng": -77.0187,
        "typical_distances": "4-6 miles", "terrain": Terrain.ROAD,
        "paces": _paces(F, C, F, S),
    },
    {
        "name": "My Muddy Shoes (Thursday)",
        "day_of_week": DayOfWeek.THURSDAY, "start_time": "6:00 PM",
        "location_name": "Locust Grove Nature Center (7777 Democracy Blvd, Bethesda)",
        "lat": 39.0263, "lng": -77.1461,
        "typical_distances": "6-8 miles", "terrain": Terrain.TRAIL,
        "paces": _paces(R, S, F, C),
    },
    {
        "name": "BabyCat Pub Run",
        "day_of_week": DayOfWeek.THURSDAY, "start_time": "6:30 PM",
        "location_name": "BabyCat Bethesda Taproom (10241 Kensington Pkwy, Kensington)",
        "lat": 39.0221, "lng": -77.0733,
        "typical_distances": "3-4 miles", "terrain": Terrain.ROAD,
        "paces": _paces(S, F, C, C),
    },
]

assert all(set(r["paces"]) == {p.value for p in PaceRange} for r in RUNS)


async def seed():
    async with async_session_factory() as session:
        # Check if already seeded
        result = await session.execute(text("SELECT count(*) FROM runs"))
        if result.scalar() > 0:
            print("Database already seeded. Skipping.")
            return

        repo = RunRepository(session)
        for r in RUNS:
            run = await repo.create_run(
                name=r["name"],
                day_of_week=r["day_of_week"].value,
                start_time=r["start_time"],
                location_name=r["location_name"],
                latitude=r["lat"],
                longitude=r["lng"],
                typical_distances=r["typical_distances"],
                terrain=r["terrain"].value,
                pace_groups=r["paces"],
                notes=r.get("notes"),
            )
            print(f"  {run.id:>3}  {run.name}  (edit token: {run.edit_token})")

        await session.commit()
        print(f"\nSeed complete! Created {len(RUNS)} runs.")


async def main():
    print("Seeding database...")
    await seed()
    await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
