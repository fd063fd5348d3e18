"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from stargate.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from stargate.services.result import ServiceResult

_NONE = "-"


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)

    if verbose and result.meta:
        _render_meta(console, result)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: ids for mutations, names for listings."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    people = result.data.get("people")
    if isinstance(people, list):
        return "\n".join(str(p["name"] if isinstance(p, dict) else p) for p in people)
    duties = result.data.get("duties")
    if isinstance(duties, list):
        return "\n".join(str(d["id"]) for d in duties)
    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _cell(value: Any) -> str:
    return _NONE if value is None else str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="sg.ok"), Text(f"  {result.op}", style="sg.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="sg.key")
    if key == "id" or key.endswith("_id"):
        v = Text(_cell(value), style="sg.id")
    elif key == "name":
        v = Text(_cell(value), style="sg.name")
    else:
        v = Text(_cell(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    console.print(Text("  meta:", style="dim"))
    for key, value in (result.meta or {}).items():
        console.print(f"    {key}: {_json.dumps(value, default=str)}")


def _career_fields(console: Console, person: dict[str, Any]) -> None:
    for key in (
        "person_id",
        "name",
        "current_rank",
        "current_duty_title",
        "career_start_date",
        "career_end_date",
    ):
        _field(console, key, person.get(key))


def _people_table(people: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="sg.id")
    table.add_column("Name", style="sg.name")
    table.add_column("Rank")
    table.add_column("Duty Title")
    table.add_column("Career Start")
    table.add_column("Career End", style="sg.retired")
    for p in people:
        table.add_row(
            _cell(p["person_id"]),
            _cell(p["name"]),
            _cell(p.get("current_rank")),
            _cell(p.get("current_duty_title")),
            _cell(p.get("career_start_date")),
            _cell(p.get("career_end_date")),
        )
    return table


def _duties_table(duties: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="sg.id")
    table.add_column("Rank")
    table.add_column("Duty Title")
    table.add_column("Start")
    table.add_column("End")
    for d in duties:
        end_date = d.get("duty_end_date")
        end = Text("current", style="sg.open") if end_date is None else _cell(end_date)
        table.add_row(
            _cell(d["id"]),
            _cell(d["rank"]),
            _cell(d["duty_title"]),
            _cell(d["duty_start_date"]),
            end,
        )
    return table


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    console.print(
        Text("ERROR", style="sg.error"),
        Text(f"  {result.op}", style="sg.op"),
        Text(f"{code} — {msg}"),
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _render_person(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _career_fields(console, result.data["person"])


def _render_people(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    people = result.data.get("people", [])
    if not people:
        console.print(Text("  No people found.", style="dim"))
        return
    console.print(_people_table(people))


def _render_duty_history(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    person = result.data.get("person")
    if person is None:
        console.print(Text("  No such person.", style="dim"))
    else:
        _career_fields(console, person)
    duties = result.data.get("duties", [])
    if duties:
        console.print(_duties_table(duties))
    else:
        console.print(Text("  No duties recorded.", style="dim"))


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":"), default=str))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "get_person": _render_person,
    "list_people": _render_people,
    "get_duty_history": _render_duty_history,
}
