"""Duty timeline rules.

Recording a duty is a state transition over two pieces of per-person
state: the career summary and the most recent duty record. The planner
here is pure: given the current state and the incoming duty it returns
the writes to perform. Persistence happens in the service layer.

Rules:
- First duty ever: a career summary is created starting on the duty's
  start date. A first duty that is already a retirement ends the career
  on that same date.
- Later duties: rank and title are replaced. A retirement ends the career
  the day before the retirement duty starts. A non-retirement duty never
  clears an existing career end date.
- The most recent duty (greatest start date), if any, is closed the day
  before the new duty starts. The new duty is always appended open.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from enum import StrEnum

from pydantic import BaseModel

from stargate.domain.models import CareerSummary, DutyRecord


class DutyTitle(StrEnum):
    """Duty titles with special meaning to the timeline."""

    RETIRED = "Retired"


def is_retirement(duty_title: str) -> bool:
    """True if *duty_title* is the reserved retirement title (exact match)."""
    return duty_title == DutyTitle.RETIRED


def as_day(value: date | datetime | str) -> date:
    """Truncate *value* to calendar-day precision.

    Accepts a ``date``, a ``datetime`` (time of day dropped), or an ISO
    8601 string (``"2024-01-01"`` or ``"2024-01-01T10:30:00"``).

    Raises:
        ValueError: If a string is not ISO 8601.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        return datetime.fromisoformat(text).date()


def day_before(day: date) -> date:
    return day - timedelta(days=1)


class CareerPlan(BaseModel):
    """Career summary values to write."""

    model_config = {"frozen": True}

    current_rank: str
    current_duty_title: str
    career_start_date: date
    career_end_date: date | None = None


class DutyPlan(BaseModel):
    """Writes that record one new duty.

    Attributes:
        career: Career summary values after the transition.
        create_career: True when no summary existed (first duty ever).
        close_duty_id: Id of the previous most-recent duty to close, if any.
        close_end_date: End date to set on ``close_duty_id``.
        rank: Rank of the new duty.
        duty_title: Title of the new duty.
        duty_start_date: Start date of the new (open) duty.
    """

    model_config = {"frozen": True}

    career: CareerPlan
    create_career: bool
    close_duty_id: int | None = None
    close_end_date: date | None = None
    rank: str
    duty_title: str
    duty_start_date: date

    @property
    def retiring(self) -> bool:
        return is_retirement(self.duty_title)


def plan_duty(
    career: CareerSummary | None,
    latest: DutyRecord | None,
    *,
    rank: str,
    duty_title: str,
    start: date | datetime | str,
) -> DutyPlan:
    """Compute the writes that record a new duty.

    Args:
        career: The person's current career summary, or None if they have
            no duty history.
        latest: The person's most recent duty by start date (open or not),
            or None.
        rank: Rank held for the new duty.
        duty_title: Title of the new duty.
        start: Start of the new duty; truncated to a date.
    """
    start_day = as_day(start)
    retiring = is_retirement(duty_title)

    if career is None:
        career_plan = CareerPlan(
            current_rank=rank,
            current_duty_title=duty_title,
            career_start_date=start_day,
            career_end_date=start_day if retiring else None,
        )
    else:
        career_plan = CareerPlan(
            current_rank=rank,
            current_duty_title=duty_title,
            career_start_date=career.career_start_date,
            career_end_date=day_before(start_day) if retiring else career.career_end_date,
        )

    return DutyPlan(
        career=career_plan,
        create_career=career is None,
        close_duty_id=latest.id if latest is not None else None,
        close_end_date=day_before(start_day) if latest is not None else None,
        rank=rank,
        duty_title=duty_title,
        duty_start_date=start_day,
    )
