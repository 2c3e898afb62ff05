"""
Seed script -- populates the database with sample schools for reviewers.

Run after migrations (or on an empty database; the table is created if
missing):
    python seed.py

Creates 8 schools spread across Delhi and Mumbai so that ``/listSchools``
returns a visibly ordered result from either city.
"""

import asyncio

from sqlalchemy import func, select

from src.config import settings
from src.infrastructure.database import (
    Base,
    create_engine,
    create_session_factory,
)
from src.infrastructure.models import SchoolModel


SCHOOLS = [
    {"name": "Modern School", "address": "Barakhamba Road, New Delhi", "lat": 28.6280, "lng": 77.2270},
    {"name": "Delhi Public School", "address": "Mathura Road, New Delhi", "lat": 28.5960, "lng": 77.2500},
    {"name": "Sardar Patel Vidyalaya", "address": "Lodhi Estate, New Delhi", "lat": 28.5890, "lng": 77.2260},
    {"name": "Springdales School", "address": "Pusa Road, New Delhi", "lat": 28.6440, "lng": 77.1850},
    {"name": "Cathedral & John Connon School", "address": "Fort, Mumbai", "lat": 18.9320, "lng": 72.8320},
    {"name": "Bombay Scottish School", "address": "Mahim, Mumbai", "lat": 19.0400, "lng": 72.8410},
    {"name": "Jamnabai Narsee School", "address": "Juhu, Mumbai", "lat": 19.1070, "lng": 72.8360},
    {"name": "Dhirubhai Ambani International School", "address": "BKC, Mumbai", "lat": 19.0650, "lng": 72.8680},
]


async def seed():
    engine = create_engine(settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with create_session_factory(engine)() as session:
        # Check if already seeded
        result = await session.execute(
            select(func.count()).select_from(SchoolModel)
        )
        if result.scalar() > 0:
            print("Database already seeded. Skipping.")
        else:
            for s in SCHOOLS:
                session.add(
                    SchoolModel(
                        name=s["name"],
                        address=s["address"],
                        latitude=s["lat"],
                        longitude=s["lng"],
                    )
                )
            await session.commit()
            print(f"  Created {len(SCHOOLS)} schools")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
