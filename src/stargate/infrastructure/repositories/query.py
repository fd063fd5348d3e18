"""Read-oriented repository for the career projection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from stargate.infrastructure.database.schema import astronaut_detail, astronaut_duty, person

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.engine import Engine


def _projection() -> Select[Any]:
    """Person LEFT JOIN career summary; career columns are NULL without one."""
    return select(
        person.c.id.label("person_id"),
        person.c.name,
        astronaut_detail.c.current_rank,
        astronaut_detail.c.current_duty_title,
        astronaut_detail.c.career_start_date,
        astronaut_detail.c.career_end_date,
    ).select_from(
        person.outerjoin(astronaut_detail, astronaut_detail.c.person_id == person.c.id)
    )


class QueryRepository:
    """Encapsulates SQL for read-side query operations."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_person_astronaut(self, name: str) -> dict[str, Any] | None:
        """Projection row for the person named exactly *name*, or None."""
        stmt = _projection().where(person.c.name == name)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return dict(row) if row is not None else None

    def list_person_astronauts(self) -> list[dict[str, Any]]:
        """Projection rows for every person, ordered by person id."""
        stmt = _projection().order_by(person.c.id)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [dict(row) for row in rows]

    def list_duties(self, person_id: int) -> list[dict[str, Any]]:
        """Duty rows for *person_id*, most recent start date first."""
        stmt = (
            select(astronaut_duty)
            .where(astronaut_duty.c.person_id == person_id)
            .order_by(astronaut_duty.c.duty_start_date.desc(), astronaut_duty.c.id.desc())
        )
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [dict(row) for row in rows]
