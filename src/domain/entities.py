"""
Domain entities.

``School`` mirrors a row of the ``schools`` table; ``RankedSchool`` is the
per-request view of a school annotated with its distance from the caller.
Neither knows anything about SQLAlchemy.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional


# ── Value Object ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


# ── Entities ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class School:
    id: Optional[int]
    name: str
    address: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class RankedSchool:
    id: Optional[int]
    name: str
    address: str
    latitude: float
    longitude: float
    distance_km: float

    @classmethod
    def from_school(cls, school: School, distance_km: float) -> RankedSchool:
        return cls(
            id=school.id,
            name=school.name,
            address=school.address,
            latitude=school.latitude,
            longitude=school.longitude,
            distance_km=distance_km,
        )

    def to_dict(self) -> dict:
        return asdict(self)
