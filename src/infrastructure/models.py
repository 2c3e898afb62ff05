"""
SQLAlchemy ORM models (maps to MySQL).

Tables
------
* ``schools`` -- one flat table, no relationships.  Coordinates are plain
  floats; there is no spatial index, every proximity query scans the table.
"""

from sqlalchemy import Column, Float, Integer, String

from .database import Base


class SchoolModel(Base):
    __tablename__ = "schools"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    address = Column(String(500), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
