"""Database engine setup for SQLite with WAL mode.

The DB is stored at ``{data_root}/.stargate/{filename}``.

pysqlite's implicit transaction handling is switched off so SQLAlchemy
emits ``BEGIN`` itself. Connections carrying the ``sqlite_begin``
execution option start with that mode instead; the roster uses
``IMMEDIATE`` for commands so the write lock is held from the first read
of the precondition guard to the commit.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine

from stargate.infrastructure.database.schema import metadata

DEFAULT_DB_FILENAME = "starbase.db"


def create_db_engine(db_path: Path, *, busy_timeout: float = 30.0) -> Engine:
    """Create a SQLite engine with WAL mode, foreign keys, and explicit BEGIN."""
    engine = create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        connect_args={"timeout": busy_timeout},
    )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        dbapi_conn.isolation_level = None
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _do_begin(conn: Connection) -> None:
        mode = conn.get_execution_options().get("sqlite_begin", "DEFERRED")
        conn.exec_driver_sql(f"BEGIN {mode}")

    return engine


def init_database(
    data_root: Path,
    *,
    filename: str = DEFAULT_DB_FILENAME,
    busy_timeout: float = 30.0,
) -> Engine:
    """Initialize the database at ``{data_root}/.stargate/{filename}``.

    Creates the ``.stargate/`` directory and all tables from
    :data:`schema.metadata`. Idempotent.

    Returns the engine ready for use.
    """
    stargate_dir = data_root / ".stargate"
    stargate_dir.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(stargate_dir / filename, busy_timeout=busy_timeout)
    metadata.create_all(engine)
    return engine
