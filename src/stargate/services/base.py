"""BaseService — abstract foundation for all stargate services.

Every service receives a :class:`Roster` at construction time. Commands
own their transaction boundaries via ``self._roster.transaction()`` and
run in two phases against that transaction: a read-only ``validate``
returning a :class:`Precondition`, then the mutating ``apply``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from pydantic import BaseModel

from stargate.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from stargate.infrastructure.roster import Roster

log = structlog.get_logger("stargate.services")


class Precondition(BaseModel):
    """Outcome of a read-only command guard.

    ``person_id`` carries the resolved person when the guard needed one,
    so ``apply`` does not look it up again.
    """

    model_config = {"frozen": True}

    error: ServiceError | None = None
    person_id: int | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def passed(cls, person_id: int | None = None) -> Precondition:
        return cls(person_id=person_id)

    @classmethod
    def failed(cls, code: ErrorCode, message: str, **detail: Any) -> Precondition:
        return cls(error=ServiceError(code=code, message=message, detail=detail))

    def to_result(self, op: str) -> ServiceResult:
        """A failed ServiceResult for *op* carrying this guard's error."""
        return ServiceResult(ok=False, op=op, error=self.error)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class PersonService(BaseService):
            def create_person(self, name: str) -> ServiceResult:
                with self._roster.transaction() as txn:
                    ...
    """

    def __init__(self, roster: Roster) -> None:
        self._roster = roster

    def _log_outcome(
        self,
        result: ServiceResult,
        event: str | None = None,
        **fields: Any,
    ) -> ServiceResult:
        """Emit one structured event for a command outcome.

        Success logs *event* (default ``<op>.ok``) at info. Failure logs
        ``<op>.rejected`` at warning with the error code.

        INVARIANT: Logging failures are warnings on the result, never errors.
        """
        try:
            if result.ok:
                log.info(event or f"{result.op}.ok", op=result.op, **fields)
            else:
                error = result.error
                log.warning(
                    f"{result.op}.rejected",
                    op=result.op,
                    code=error.code if error else None,
                    reason=error.message if error else None,
                    **fields,
                )
        except Exception:
            warnings = [*result.warnings, f"Outcome event for {result.op} was not logged"]
            return result.model_copy(update={"warnings": warnings})
        return result
