"""Typed payload contracts for the query operations.

These models validate payload shapes before they leave the service layer
so a renamed column or a dropped career field fails fast in tests.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class PersonAstronaut(BaseModel):
    """A person plus their career summary fields (None without a summary)."""

    person_id: int
    name: str
    current_rank: str | None = None
    current_duty_title: str | None = None
    career_start_date: date | None = None
    career_end_date: date | None = None


class DutyItem(BaseModel):
    """One duty record row."""

    id: int
    person_id: int
    rank: str
    duty_title: str
    duty_start_date: date
    duty_end_date: date | None = None


class PersonResultData(BaseModel):
    """Payload contract for ``QueryService.get_person``."""

    person: PersonAstronaut


class PeopleResultData(BaseModel):
    """Payload contract for ``QueryService.list_people``."""

    count: int
    people: list[PersonAstronaut]


class DutyHistoryResultData(BaseModel):
    """Payload contract for ``QueryService.get_duty_history``.

    ``person`` is None when nobody has the requested name.
    """

    person: PersonAstronaut | None
    duties: list[DutyItem]
