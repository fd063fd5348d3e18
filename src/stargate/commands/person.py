"""Command group: people (create, rename, get, list)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stargate.commands._base import StargateGroup
from stargate.services.person import PersonService
from stargate.services.query import QueryService

if TYPE_CHECKING:
    from stargate.commands._context import AppContext

_PERSON_EXAMPLES = """\
  stargate person create "Jane Doe"
  stargate person rename "Jane Doe" "Jane Smith"
  stargate person get "Jane Smith"
  stargate --json person list"""


@click.group(cls=StargateGroup, examples=_PERSON_EXAMPLES)
def person() -> None:
    """Create, rename, and look up people."""


@person.command(examples='  stargate person create "Jane Doe"')
@click.argument("name")
@click.pass_obj
def create(app: AppContext, name: str) -> None:
    """Create a person named NAME (names are unique)."""
    app.emit(PersonService(app.roster).create_person(name))


@person.command(examples='  stargate person rename "Jane Doe" "Jane Smith"')
@click.argument("current_name")
@click.argument("new_name")
@click.pass_obj
def rename(app: AppContext, current_name: str, new_name: str) -> None:
    """Rename CURRENT_NAME to NEW_NAME."""
    app.emit(PersonService(app.roster).rename_person(current_name, new_name))


@person.command(examples='  stargate person get "Jane Doe"')
@click.argument("name")
@click.pass_obj
def get(app: AppContext, name: str) -> None:
    """Show NAME with their current rank, title, and career dates."""
    app.emit(QueryService(app.roster).get_person(name))


@person.command(name="list", examples="  stargate person list\n  stargate -q person list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every person with their current career fields."""
    app.emit(QueryService(app.roster).list_people())
