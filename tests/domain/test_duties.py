"""Tests for the duty timeline planner and date helpers."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from stargate.domain.duties import (
    DutyTitle,
    as_day,
    day_before,
    is_retirement,
    plan_duty,
)
from stargate.domain.models import CareerSummary, DutyRecord


def _career(**overrides: object) -> CareerSummary:
    values: dict[str, object] = {
        "person_id": 1,
        "current_rank": "Major",
        "current_duty_title": "Pilot",
        "career_start_date": date(2024, 1, 1),
        "career_end_date": None,
    }
    values.update(overrides)
    return CareerSummary.model_validate(values)


def _duty(
    duty_id: int = 10, start: date = date(2024, 1, 1), end: date | None = None
) -> DutyRecord:
    return DutyRecord(
        id=duty_id,
        person_id=1,
        rank="Major",
        duty_title="Pilot",
        duty_start_date=start,
        duty_end_date=end,
    )


class TestAsDay:
    def test_date_passes_through(self) -> None:
        assert as_day(date(2024, 3, 5)) == date(2024, 3, 5)

    def test_datetime_truncated(self) -> None:
        assert as_day(datetime(2024, 3, 5, 23, 59, 59)) == date(2024, 3, 5)

    def test_iso_date_string(self) -> None:
        assert as_day("2024-03-05") == date(2024, 3, 5)

    def test_iso_datetime_string(self) -> None:
        assert as_day("2024-03-05T10:30:00") == date(2024, 3, 5)

    def test_garbage_rejected(self) -> None:
        with pytest.raises(ValueError):
            as_day("next tuesday")


class TestDayBefore:
    def test_month_boundary(self) -> None:
        assert day_before(date(2024, 7, 1)) == date(2024, 6, 30)

    def test_leap_day(self) -> None:
        assert day_before(date(2024, 3, 1)) == date(2024, 2, 29)

    def test_year_boundary(self) -> None:
        assert day_before(date(2025, 1, 1)) == date(2024, 12, 31)


class TestIsRetirement:
    def test_reserved_title(self) -> None:
        assert is_retirement(DutyTitle.RETIRED)
        assert is_retirement("Retired")

    def test_exact_match_only(self) -> None:
        assert not is_retirement("Retired ")
        assert not is_retirement("retired")
        assert not is_retirement("Pilot")


class TestPlanFirstDuty:
    def test_creates_career(self) -> None:
        plan = plan_duty(None, None, rank="Major", duty_title="Pilot", start=date(2024, 1, 1))
        assert plan.create_career is True
        assert plan.career.current_rank == "Major"
        assert plan.career.current_duty_title == "Pilot"
        assert plan.career.career_start_date == date(2024, 1, 1)
        assert plan.career.career_end_date is None

    def test_nothing_to_close(self) -> None:
        plan = plan_duty(None, None, rank="Major", duty_title="Pilot", start=date(2024, 1, 1))
        assert plan.close_duty_id is None
        assert plan.close_end_date is None

    def test_start_truncated(self) -> None:
        plan = plan_duty(
            None, None, rank="Major", duty_title="Pilot", start=datetime(2024, 1, 1, 15, 45)
        )
        assert plan.duty_start_date == date(2024, 1, 1)
        assert plan.career.career_start_date == date(2024, 1, 1)

    def test_first_duty_retired_ends_same_day(self) -> None:
        plan = plan_duty(
            None, None, rank="Colonel", duty_title=DutyTitle.RETIRED, start=date(2024, 5, 1)
        )
        assert plan.career.career_start_date == date(2024, 5, 1)
        assert plan.career.career_end_date == date(2024, 5, 1)
        assert plan.retiring is True


class TestPlanLaterDuty:
    def test_replaces_rank_and_title(self) -> None:
        plan = plan_duty(
            _career(), _duty(), rank="Colonel", duty_title="Commander", start=date(2024, 7, 1)
        )
        assert plan.create_career is False
        assert plan.career.current_rank == "Colonel"
        assert plan.career.current_duty_title == "Commander"
        assert plan.career.career_start_date == date(2024, 1, 1)

    def test_closes_latest_day_before(self) -> None:
        plan = plan_duty(
            _career(),
            _duty(duty_id=42),
            rank="Colonel",
            duty_title="Commander",
            start="2024-07-01",
        )
        assert plan.close_duty_id == 42
        assert plan.close_end_date == date(2024, 6, 30)

    def test_closes_latest_even_if_already_ended(self) -> None:
        latest = _duty(duty_id=7, end=date(2024, 3, 1))
        plan = plan_duty(
            _career(), latest, rank="Colonel", duty_title="Commander", start=date(2024, 7, 1)
        )
        assert plan.close_duty_id == 7
        assert plan.close_end_date == date(2024, 6, 30)

    def test_retirement_ends_career_day_before(self) -> None:
        plan = plan_duty(
            _career(),
            _duty(),
            rank="Colonel",
            duty_title=DutyTitle.RETIRED,
            start=date(2030, 1, 1),
        )
        assert plan.career.career_end_date == date(2029, 12, 31)
        assert plan.career.career_start_date == date(2024, 1, 1)

    def test_retirement_duty_stays_open(self) -> None:
        plan = plan_duty(
            _career(),
            _duty(),
            rank="Colonel",
            duty_title=DutyTitle.RETIRED,
            start=date(2030, 1, 1),
        )
        assert plan.duty_title == "Retired"
        assert plan.close_end_date == date(2029, 12, 31)

    def test_non_retirement_keeps_existing_end_date(self) -> None:
        retired = _career(current_duty_title="Retired", career_end_date=date(2029, 12, 31))
        plan = plan_duty(
            retired, _duty(), rank="Colonel", duty_title="Advisor", start=date(2031, 1, 1)
        )
        assert plan.career.career_end_date == date(2029, 12, 31)
        assert plan.career.current_duty_title == "Advisor"

    def test_career_without_duty_still_plans(self) -> None:
        plan = plan_duty(
            _career(), None, rank="Colonel", duty_title="Commander", start="2024-07-01"
        )
        assert plan.create_career is False
        assert plan.close_duty_id is None
