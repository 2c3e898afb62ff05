"""
Proximity ranking.

Every school is scored against the caller's location and the full list is
returned nearest-first.  ``sorted`` is stable, so schools at the same
rounded distance keep the order the store returned them in.

Complexity: O(n log n) in the number of stored schools.
"""

from __future__ import annotations

from typing import Iterable

from .distance import haversine_km
from .entities import Location, RankedSchool, School

DISTANCE_DECIMALS = 3


def distance_to(origin: Location, school: School) -> float:
    """Distance from *origin* to *school* in km, rounded for display."""
    km = haversine_km(
        origin.latitude, origin.longitude, school.latitude, school.longitude
    )
    return round(km, DISTANCE_DECIMALS)


def rank_schools(
    origin: Location, schools: Iterable[School]
) -> list[RankedSchool]:
    ranked = [
        RankedSchool.from_school(s, distance_to(origin, s)) for s in schools
    ]
    return sorted(ranked, key=lambda r: r.distance_km)
