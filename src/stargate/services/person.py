"""PersonService — identity registry (create and rename).

Names are unique and matched exactly (case-sensitive). Renaming changes
the name in place; duty and career rows reference the person by id and
are never touched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from stargate.infrastructure.database.schema import person
from stargate.services.base import BaseService, Precondition
from stargate.services.result import ErrorCode, ServiceResult
from stargate.services.telemetry import traced

if TYPE_CHECKING:
    from stargate.infrastructure.roster import RosterTransaction


class PersonService(BaseService):
    """Creates and renames people."""

    # ------------------------------------------------------------------
    # Guards (read-only)
    # ------------------------------------------------------------------

    @staticmethod
    def validate_create(txn: RosterTransaction, name: str) -> Precondition:
        if txn.exists(person, name=name):
            return Precondition.failed(
                ErrorCode.CONFLICT,
                f"A person named {name!r} already exists",
                name=name,
            )
        return Precondition.passed()

    @staticmethod
    def validate_rename(txn: RosterTransaction, current_name: str, new_name: str) -> Precondition:
        row = txn.find_one(person, name=current_name)
        if row is None:
            return Precondition.failed(
                ErrorCode.NOT_FOUND,
                f"No person named {current_name!r}",
                name=current_name,
            )
        holder = txn.find_one(person, name=new_name)
        if holder is not None and holder.id != row.id:
            return Precondition.failed(
                ErrorCode.CONFLICT,
                f"A person named {new_name!r} already exists",
                name=new_name,
            )
        return Precondition.passed(person_id=row.id)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @traced
    def create_person(self, name: str) -> ServiceResult:
        """Create a person with no duty history. Returns the new id."""
        op = "create_person"
        with self._roster.transaction() as txn:
            check = self.validate_create(txn, name)
            if not check.ok:
                return self._log_outcome(check.to_result(op), name=name)
            person_id = txn.insert(person, name=name)

        result = ServiceResult(ok=True, op=op, data={"id": person_id, "name": name})
        return self._log_outcome(result, "person.created", person_id=person_id, name=name)

    @traced
    def rename_person(self, current_name: str, new_name: str) -> ServiceResult:
        """Rename the person called *current_name*. The id is unchanged."""
        op = "rename_person"
        with self._roster.transaction() as txn:
            check = self.validate_rename(txn, current_name, new_name)
            if not check.ok:
                return self._log_outcome(
                    check.to_result(op),
                    current_name=current_name,
                    new_name=new_name,
                )
            person_id = cast("int", check.person_id)
            if new_name != current_name:
                txn.update(person, person_id, name=new_name)

        result = ServiceResult(
            ok=True,
            op=op,
            data={"id": person_id, "name": new_name, "previous_name": current_name},
        )
        return self._log_outcome(
            result,
            "person.renamed",
            person_id=person_id,
            previous_name=current_name,
            name=new_name,
        )
