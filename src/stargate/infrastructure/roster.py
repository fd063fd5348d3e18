"""Roster — repository pattern with a single unit of work per command.

The Roster is the single dependency injected into every service. It owns
the database engine. :meth:`Roster.transaction` opens one SQLite write
transaction (``BEGIN IMMEDIATE``) and yields a :class:`RosterTransaction`
whose record-store operations all run on that connection:

- Everything read inside the block sees one consistent snapshot, and no
  other writer can interleave between the reads and the writes.
- Commit happens once, when the block exits normally. Any exception
  rolls back every write made in the block.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sqlalchemy import func, insert, select, update

from stargate.infrastructure.database.engine import init_database
from stargate.infrastructure.database.schema import person

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy import Connection, Row, Table
    from sqlalchemy.engine import Engine

    from stargate.config.settings import StargateSettings


# ---------------------------------------------------------------------------
# RosterTransaction — yielded to callers within transaction()
# ---------------------------------------------------------------------------


@dataclass
class RosterTransaction:
    """Active unit of work. All reads and writes go through ``conn``.

    Predicates are keyword equalities on column names, e.g.
    ``txn.find_one(person, name="Jane Doe")``.
    """

    conn: Connection

    def find(self, table: Table, **equals: Any) -> list[Row[Any]]:
        """All rows of *table* matching every ``column == value`` pair."""
        stmt = select(table).where(*_equalities(table, equals)).order_by(table.c.id)
        return list(self.conn.execute(stmt).all())

    def find_one(self, table: Table, **equals: Any) -> Row[Any] | None:
        """First row matching the predicate, or None."""
        stmt = select(table).where(*_equalities(table, equals)).limit(1)
        return self.conn.execute(stmt).first()

    def find_latest(self, table: Table, order_column: str, **equals: Any) -> Row[Any] | None:
        """Row with the greatest *order_column* among matches, or None.

        Ties on *order_column* go to the most recently inserted row.
        """
        stmt = (
            select(table)
            .where(*_equalities(table, equals))
            .order_by(table.c[order_column].desc(), table.c.id.desc())
            .limit(1)
        )
        return self.conn.execute(stmt).first()

    def exists(self, table: Table, **equals: Any) -> bool:
        stmt = select(func.count()).select_from(table).where(*_equalities(table, equals))
        return bool(self.conn.execute(stmt).scalar_one())

    def insert(self, table: Table, **values: Any) -> int:
        """Insert one row and return its integer primary key."""
        result = self.conn.execute(insert(table).values(**values))
        return int(result.inserted_primary_key[0])

    def update(self, table: Table, row_id: int, **values: Any) -> None:
        """Update the row with primary key *row_id*.

        Raises:
            LookupError: If no row has that id.
        """
        result = self.conn.execute(update(table).where(table.c.id == row_id).values(**values))
        if result.rowcount != 1:
            msg = f"No {table.name} row with id {row_id}"
            raise LookupError(msg)


def _equalities(table: Table, equals: dict[str, Any]) -> list[Any]:
    return [table.c[column] == value for column, value in equals.items()]


# ---------------------------------------------------------------------------
# Roster — the repository
# ---------------------------------------------------------------------------


class Roster:
    """Repository encapsulating database access.

    Constructed once at CLI startup from :class:`StargateSettings` and
    stored on the Click context. Services receive the Roster via their
    :class:`BaseService` constructor.
    """

    def __init__(self, settings: StargateSettings) -> None:
        self._settings = settings
        self._engine: Engine = init_database(
            settings.data_root,
            filename=settings.database.filename,
            busy_timeout=settings.database.busy_timeout,
        )

    @property
    def root(self) -> Path:
        """The data root directory."""
        return self._settings.data_root

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for read-side repositories)."""
        return self._engine

    @property
    def settings(self) -> StargateSettings:
        return self._settings

    def is_empty(self) -> bool:
        """True if no person has been created yet."""
        with self._engine.connect() as conn:
            return conn.execute(select(person.c.id).limit(1)).first() is None

    def close(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()

    @contextmanager
    def transaction(self) -> Iterator[RosterTransaction]:
        """One atomic unit of work.

        The write lock is taken at ``BEGIN IMMEDIATE``, before the first
        read, so two commands touching the same person run one after the
        other. Commits on normal exit, rolls back on any exception
        (including a caller abandoning the block).

        Usage::

            with roster.transaction() as txn:
                row = txn.find_one(person, name=name)
                txn.update(person, row.id, name=new_name)
        """
        with self._engine.connect() as conn:
            conn.execution_options(sqlite_begin="IMMEDIATE")
            with conn.begin():
                yield RosterTransaction(conn=conn)
