"""QueryService — read-only career projection.

Nothing here writes. ``get_person`` reports a missing person as
``NOT_FOUND`` while ``get_duty_history`` answers with an empty history;
callers depend on both behaviors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stargate.infrastructure.repositories.query import QueryRepository
from stargate.services.base import BaseService
from stargate.services.contracts import (
    DutyHistoryResultData,
    PeopleResultData,
    PersonResultData,
    dump_validated,
)
from stargate.services.result import ErrorCode, ServiceResult
from stargate.services.telemetry import traced

if TYPE_CHECKING:
    from stargate.infrastructure.roster import Roster


class QueryService(BaseService):
    """Person and duty-history lookups."""

    def __init__(self, roster: Roster) -> None:
        super().__init__(roster)
        self._repo = QueryRepository(roster.engine)

    @traced
    def get_person(self, name: str) -> ServiceResult:
        """The person named *name* with their current career fields."""
        op = "get_person"
        row = self._repo.get_person_astronaut(name)
        if row is None:
            return ServiceResult.failure(op, ErrorCode.NOT_FOUND, f"No person named {name!r}")
        data = dump_validated(PersonResultData, {"person": row})
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def list_people(self) -> ServiceResult:
        """Every person with their current career fields, by id."""
        rows = self._repo.list_person_astronauts()
        data = dump_validated(PeopleResultData, {"count": len(rows), "people": rows})
        return ServiceResult(ok=True, op="list_people", data=data)

    @traced
    def get_duty_history(self, name: str) -> ServiceResult:
        """Career fields plus every duty of *name*, most recent first."""
        row = self._repo.get_person_astronaut(name)
        duties = self._repo.list_duties(row["person_id"]) if row is not None else []
        data = dump_validated(DutyHistoryResultData, {"person": row, "duties": duties})
        return ServiceResult(ok=True, op="get_duty_history", data=data)
