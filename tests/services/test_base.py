"""Tests for BaseService, Precondition and outcome logging."""

from __future__ import annotations

from typing import Any

import pytest
from structlog.testing import capture_logs

from stargate.infrastructure.roster import Roster
from stargate.services import base as base_module
from stargate.services.base import BaseService, Precondition
from stargate.services.person import PersonService
from stargate.services.result import ErrorCode, ServiceResult


class TestPrecondition:
    def test_passed(self) -> None:
        check = Precondition.passed(person_id=4)
        assert check.ok
        assert check.person_id == 4

    def test_failed(self) -> None:
        check = Precondition.failed(ErrorCode.NOT_FOUND, "missing", name="X")
        assert not check.ok
        assert check.error is not None
        assert check.error.detail == {"name": "X"}

    def test_to_result(self) -> None:
        result = Precondition.failed(ErrorCode.CONFLICT, "taken").to_result("create_person")
        assert result.ok is False
        assert result.op == "create_person"
        assert result.error is not None
        assert result.error.code == ErrorCode.CONFLICT


class TestLogOutcome:
    def test_success_event(self, roster: Roster) -> None:
        with capture_logs() as logs:
            PersonService(roster).create_person("Jane Doe")
        (entry,) = [e for e in logs if e["event"] == "person.created"]
        assert entry["log_level"] == "info"
        assert entry["name"] == "Jane Doe"

    def test_rejection_event(self, roster: Roster) -> None:
        PersonService(roster).create_person("Jane Doe")
        with capture_logs() as logs:
            PersonService(roster).create_person("Jane Doe")
        (entry,) = [e for e in logs if e["event"] == "create_person.rejected"]
        assert entry["log_level"] == "warning"
        assert entry["code"] == ErrorCode.CONFLICT

    def test_default_event_name(self, roster: Roster) -> None:
        service = BaseService(roster)
        with capture_logs() as logs:
            service._log_outcome(ServiceResult(ok=True, op="sample"))
        assert [e["event"] for e in logs] == ["sample.ok"]

    def test_logging_failure_becomes_warning(
        self, roster: Roster, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        class _BrokenLogger:
            def info(self, *args: Any, **kwargs: Any) -> None:
                raise OSError("log sink unavailable")

            warning = info

        monkeypatch.setattr(base_module, "log", _BrokenLogger())
        result = PersonService(roster).create_person("Jane Doe")
        assert result.ok
        assert result.warnings == ["Outcome event for create_person was not logged"]
        assert roster.is_empty() is False

