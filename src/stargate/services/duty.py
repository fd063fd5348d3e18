"""DutyService — records duty assignments against a person's timeline.

Pipeline: VALIDATE → PLAN → PERSIST → RESPOND, inside one write
transaction so the guard's reads and the writes see the same state.

- VALIDATE (read-only): the person exists, and they have no duty with
  the same title and start date.
- PLAN: :func:`stargate.domain.duties.plan_duty` decides the career
  summary values and which duty to close.
- PERSIST: upsert the career summary, close the previous most-recent
  duty, append the new open duty.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from stargate.domain.duties import DutyPlan, as_day, plan_duty
from stargate.domain.models import CareerSummary, DutyRecord, from_row
from stargate.infrastructure.database.schema import astronaut_detail, astronaut_duty, person
from stargate.services.base import BaseService, Precondition
from stargate.services.result import ErrorCode, ServiceResult
from stargate.services.telemetry import traced

if TYPE_CHECKING:
    from stargate.infrastructure.roster import RosterTransaction


class DutyService(BaseService):
    """Duty timeline engine."""

    # ------------------------------------------------------------------
    # Phase 1 — guard
    # ------------------------------------------------------------------

    @staticmethod
    def validate(
        txn: RosterTransaction,
        name: str,
        duty_title: str,
        start: date | datetime | str,
    ) -> Precondition:
        """Check that a duty may be recorded. Performs no writes.

        Fails with ``NOT_FOUND`` if nobody is named *name*, and with
        ``CONFLICT`` if that person already has a duty with the same title
        starting on the same day. Other people's duties are not considered.

        Raises:
            ValueError: If *start* is a string that is not ISO 8601.
        """
        row = txn.find_one(person, name=name)
        if row is None:
            return Precondition.failed(
                ErrorCode.NOT_FOUND,
                f"No person named {name!r}",
                name=name,
            )

        start_day = as_day(start)
        if txn.exists(
            astronaut_duty,
            person_id=row.id,
            duty_title=duty_title,
            duty_start_date=start_day,
        ):
            return Precondition.failed(
                ErrorCode.CONFLICT,
                f"{name!r} already has a {duty_title!r} duty starting {start_day.isoformat()}",
                name=name,
                duty_title=duty_title,
                duty_start_date=start_day.isoformat(),
            )
        return Precondition.passed(person_id=row.id)

    # ------------------------------------------------------------------
    # Phase 2 — mutation
    # ------------------------------------------------------------------

    @staticmethod
    def apply(
        txn: RosterTransaction,
        check: Precondition,
        *,
        rank: str,
        duty_title: str,
        start: date | datetime | str,
    ) -> tuple[int, DutyPlan]:
        """Write the transition for a passed *check*. Returns (new duty id, plan).

        Raises:
            ValueError: If *check* did not pass.
        """
        if not check.ok or check.person_id is None:
            msg = "apply() requires a passed precondition"
            raise ValueError(msg)
        person_id = check.person_id

        career_row = txn.find_one(astronaut_detail, person_id=person_id)
        latest_row = txn.find_latest(astronaut_duty, "duty_start_date", person_id=person_id)
        career = from_row(CareerSummary, career_row) if career_row is not None else None
        latest = from_row(DutyRecord, latest_row) if latest_row is not None else None

        plan = plan_duty(career, latest, rank=rank, duty_title=duty_title, start=start)

        career_values = plan.career.model_dump()
        if career_row is None:
            txn.insert(astronaut_detail, person_id=person_id, **career_values)
        else:
            txn.update(astronaut_detail, career_row.id, **career_values)

        if plan.close_duty_id is not None:
            txn.update(astronaut_duty, plan.close_duty_id, duty_end_date=plan.close_end_date)

        duty_id = txn.insert(
            astronaut_duty,
            person_id=person_id,
            rank=plan.rank,
            duty_title=plan.duty_title,
            duty_start_date=plan.duty_start_date,
            duty_end_date=None,
        )
        return duty_id, plan

    # ------------------------------------------------------------------
    # Command
    # ------------------------------------------------------------------

    @traced
    def record_duty(
        self,
        name: str,
        rank: str,
        duty_title: str,
        start: date | datetime | str,
    ) -> ServiceResult:
        """Record a new duty for *name* starting on *start* (date-truncated).

        Closes the person's previous most-recent duty the day before
        *start*, updates their career summary, and appends the new duty
        as the open one. All-or-nothing.

        Raises:
            ValueError: If *start* is a string that is not an ISO 8601
                date or datetime. Nothing is written.
        """
        op = "record_duty"
        with self._roster.transaction() as txn:
            check = self.validate(txn, name, duty_title, start)
            if not check.ok:
                return self._log_outcome(check.to_result(op), name=name, duty_title=duty_title)
            duty_id, plan = self.apply(txn, check, rank=rank, duty_title=duty_title, start=start)

        result = ServiceResult(
            ok=True,
            op=op,
            data={
                "id": duty_id,
                "person_id": check.person_id,
                "closed_duty_id": plan.close_duty_id,
                "retired": plan.retiring,
            },
        )
        return self._log_outcome(
            result,
            "duty.recorded",
            duty_id=duty_id,
            person_id=check.person_id,
            name=name,
            rank=rank,
            duty_title=duty_title,
            duty_start_date=plan.duty_start_date.isoformat(),
            closed_duty_id=plan.close_duty_id,
        )
