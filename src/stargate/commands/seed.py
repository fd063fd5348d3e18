"""Standalone command: load development data into an empty roster."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stargate.commands._base import StargateCommand
from stargate.services.seed import SeedService

if TYPE_CHECKING:
    from stargate.commands._context import AppContext


@click.command(cls=StargateCommand, examples="  stargate seed")
@click.pass_obj
def seed(app: AppContext) -> None:
    """Add sample people and a first duty if the roster is empty."""
    app.emit(SeedService(app.roster).seed_development_data())
