"""SeedService — development data for an empty roster."""

from __future__ import annotations

from datetime import UTC, datetime

from stargate.infrastructure.database.schema import person
from stargate.services.base import BaseService, Precondition
from stargate.services.duty import DutyService
from stargate.services.person import PersonService
from stargate.services.result import ServiceResult
from stargate.services.telemetry import traced

SEED_PEOPLE = ("John Doe", "Jane Doe")
SEED_DUTY = {"name": "John Doe", "rank": "1LT", "duty_title": "Commander"}


class _SeedRejected(Exception):
    """Unwinds the seed transaction when a guard fails."""

    def __init__(self, check: Precondition) -> None:
        super().__init__(check.error.message if check.error else "seed rejected")
        self.check = check


class SeedService(BaseService):
    """Loads sample people and one duty. Never touches a non-empty roster."""

    @traced
    def seed_development_data(self) -> ServiceResult:
        """Create the sample people and record John Doe's first duty (today).

        The emptiness check and every insert share one write transaction,
        so two processes seeding the same database at once produce one
        set of sample rows. The rows pass through the person and duty
        guards like user-entered ones; a failed guard rolls back
        everything.
        """
        op = "seed"
        try:
            with self._roster.transaction() as txn:
                if txn.find_one(person) is not None:
                    return ServiceResult(ok=True, op=op, data={"seeded": False, "people": []})

                for name in SEED_PEOPLE:
                    check = PersonService.validate_create(txn, name)
                    if not check.ok:
                        raise _SeedRejected(check)
                    txn.insert(person, name=name)

                today = datetime.now(UTC).date()
                check = DutyService.validate(
                    txn, SEED_DUTY["name"], SEED_DUTY["duty_title"], today
                )
                if not check.ok:
                    raise _SeedRejected(check)
                DutyService.apply(
                    txn,
                    check,
                    rank=SEED_DUTY["rank"],
                    duty_title=SEED_DUTY["duty_title"],
                    start=today,
                )
        except _SeedRejected as exc:
            return self._log_outcome(exc.check.to_result(op))

        result = ServiceResult(ok=True, op=op, data={"seeded": True, "people": list(SEED_PEOPLE)})
        return self._log_outcome(result, "roster.seeded", people=len(SEED_PEOPLE))
