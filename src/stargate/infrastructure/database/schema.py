"""SQLAlchemy Core table definitions for the stargate database.

Three tables: people, their career summary (at most one row per person),
and their duty timeline. Dates are stored as SQLite ``DATE`` (ISO text),
so ordering by ``duty_start_date`` is chronological.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

person = Table(
    "person",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False, unique=True),
)

astronaut_detail = Table(
    "astronaut_detail",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("person_id", Integer, ForeignKey("person.id"), nullable=False, unique=True),
    Column("current_rank", Text, nullable=False),
    Column("current_duty_title", Text, nullable=False),
    Column("career_start_date", Date, nullable=False),
    Column("career_end_date", Date),
)

astronaut_duty = Table(
    "astronaut_duty",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("person_id", Integer, ForeignKey("person.id"), nullable=False),
    Column("rank", Text, nullable=False),
    Column("duty_title", Text, nullable=False),
    Column("duty_start_date", Date, nullable=False),
    Column("duty_end_date", Date),  # NULL = the open (current) duty
    UniqueConstraint("person_id", "duty_title", "duty_start_date"),
)

Index(
    "ix_astronaut_duty_person_start",
    astronaut_duty.c.person_id,
    astronaut_duty.c.duty_start_date,
)
