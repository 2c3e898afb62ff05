"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

The repository receives an ``AsyncSession`` (unit-of-work) and hands back
domain ``School`` entities, never ORM rows.
"""

from __future__ import annotations

from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession

from .models import SchoolModel
from src.domain.entities import School


def _to_entity(row: SchoolModel) -> School:
    return School(
        id=row.id,
        name=row.name,
        address=row.address,
        latitude=float(row.latitude),
        longitude=float(row.longitude),
    )


class SchoolRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_school(
        self,
        *,
        name: str,
        address: str,
        latitude: float,
        longitude: float,
    ) -> School:
        """INSERT one school and commit; the store assigns the id."""
        row = SchoolModel(
            name=name,
            address=address,
            latitude=latitude,
            longitude=longitude,
        )
        self.session.add(row)
        await self.session.flush()
        await self.session.commit()
        return School(
            id=row.id,
            name=name,
            address=address,
            latitude=latitude,
            longitude=longitude,
        )

    async def list_schools(self) -> list[School]:
        result = await self.session.execute(
            select(SchoolModel).order_by(SchoolModel.id)
        )
        return [_to_entity(r) for r in result.scalars().all()]

    async def ping(self) -> None:
        """Trivial round-trip used by the connectivity check."""
        await self.session.execute(text("SELECT 1"))
