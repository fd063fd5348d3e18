"""Shared pytest fixtures and test helpers for stargate tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import date
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner
from sqlalchemy import select
from sqlalchemy.engine import Engine

from stargate.config.settings import StargateSettings
from stargate.infrastructure.database.engine import init_database
from stargate.infrastructure.database.schema import astronaut_detail, astronaut_duty, person
from stargate.infrastructure.roster import Roster
from stargate.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer STARGATE_* variables out of tests."""
    for var in ("STARGATE_CONFIG", "STARGATE_DATA_ROOT", "STARGATE_DATABASE__FILENAME"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _reset_cli_state() -> Iterator[None]:
    """Undo the telemetry switch and log handlers a CLI invocation installs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    yield
    disable_telemetry()
    root.handlers = handlers
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def roster(tmp_path: Path) -> Iterator[Roster]:
    """Roster on an empty database under a temp data root."""
    settings = StargateSettings.from_cli(data_root=tmp_path)
    r = Roster(settings)
    try:
        yield r
    finally:
        r.close()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers (used across service test modules)
# ---------------------------------------------------------------------------


def create_person(roster: Roster, name: str) -> dict[str, Any]:
    """Create a person via PersonService, asserting success."""
    from stargate.services.person import PersonService

    result = PersonService(roster).create_person(name)
    assert result.ok, result.error
    return result.data


def record_duty(
    roster: Roster,
    name: str,
    rank: str,
    duty_title: str,
    start: date | str,
) -> dict[str, Any]:
    """Record a duty via DutyService, asserting success."""
    from stargate.services.duty import DutyService

    result = DutyService(roster).record_duty(name, rank, duty_title, start)
    assert result.ok, result.error
    return result.data


def duty_rows(roster: Roster, person_id: int) -> list[Any]:
    """All duty rows for *person_id*, oldest start first."""
    with roster.engine.connect() as conn:
        return list(
            conn.execute(
                select(astronaut_duty)
                .where(astronaut_duty.c.person_id == person_id)
                .order_by(astronaut_duty.c.duty_start_date, astronaut_duty.c.id)
            ).all()
        )


def career_row(roster: Roster, person_id: int) -> Any:
    """The astronaut_detail row for *person_id*, or None."""
    with roster.engine.connect() as conn:
        return conn.execute(
            select(astronaut_detail).where(astronaut_detail.c.person_id == person_id)
        ).first()


def table_counts(roster: Roster) -> dict[str, int]:
    """Row counts per table, for no-side-effect assertions."""
    with roster.engine.connect() as conn:
        return {
            t.name: len(conn.execute(select(t)).all())
            for t in (person, astronaut_detail, astronaut_duty)
        }
