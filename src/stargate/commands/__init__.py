"""Subcommand modules for stargate.

register_commands() imports lazily to keep ``stargate --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``person`` and ``duty`` groups and the ``seed`` command."""
    from stargate.commands.duty import duty
    from stargate.commands.person import person
    from stargate.commands.seed import seed

    cli.add_command(person)
    cli.add_command(duty)
    cli.add_command(seed)
