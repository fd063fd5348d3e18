"""Pydantic models for people, duty records, and career summaries.

Rows read from the roster are converted into these frozen models before
domain logic sees them, so the planner never touches SQLAlchemy rows.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel


class Person(BaseModel):
    """A tracked person. Names are unique and compared case-sensitively."""

    model_config = {"frozen": True}

    id: int
    name: str


class DutyRecord(BaseModel):
    """One rank + title assignment in a person's duty timeline.

    ``duty_end_date`` is None while the duty is the open (current) one.
    """

    model_config = {"frozen": True}

    id: int
    person_id: int
    rank: str
    duty_title: str
    duty_start_date: date
    duty_end_date: date | None = None

    @property
    def is_open(self) -> bool:
        return self.duty_end_date is None


class CareerSummary(BaseModel):
    """Current rank/title and career bounds, maintained per person."""

    model_config = {"frozen": True}

    person_id: int
    current_rank: str
    current_duty_title: str
    career_start_date: date
    career_end_date: date | None = None

    @property
    def retired(self) -> bool:
        return self.career_end_date is not None


def from_row[T: BaseModel](model_cls: type[T], row: Any) -> T:
    """Build *model_cls* from a SQLAlchemy row (or any mapping)."""
    mapping = row._mapping if hasattr(row, "_mapping") else row
    return model_cls.model_validate(dict(mapping))
