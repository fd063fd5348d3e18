"""Command group: duties (record, history)."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from stargate.commands._base import StargateGroup
from stargate.services.duty import DutyService
from stargate.services.query import QueryService

if TYPE_CHECKING:
    from stargate.commands._context import AppContext

_DUTY_EXAMPLES = """\
  stargate duty record "Jane Doe" --rank Major --title Pilot --start 2024-01-01
  stargate duty record "Jane Doe" --rank Colonel --title Retired --start 2030-07-01
  stargate duty history 'Jane Doe'"""


@click.group(cls=StargateGroup, examples=_DUTY_EXAMPLES)
def duty() -> None:
    """Record duty assignments and show duty history."""


@duty.command(
    examples='  stargate duty record "Jane Doe" --rank Major --title Pilot --start 2024-01-01'
)
@click.argument("name")
@click.option("--rank", required=True, help="Rank held during this duty.")
@click.option("--title", "duty_title", required=True, help='Duty title ("Retired" retires).')
@click.option(
    "--start",
    required=True,
    type=click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"]),
    help="Start date (time of day is ignored).",
)
@click.pass_obj
def record(app: AppContext, name: str, rank: str, duty_title: str, start: datetime) -> None:
    """Record a new duty for NAME, closing their previous one."""
    app.emit(DutyService(app.roster).record_duty(name, rank, duty_title, start))


@duty.command(examples='  stargate duty history "Jane Doe"\n  stargate -q duty history "Jane Doe"')
@click.argument("name")
@click.pass_obj
def history(app: AppContext, name: str) -> None:
    """Show NAME's career fields and duties, most recent first."""
    app.emit(QueryService(app.roster).get_duty_history(name))
