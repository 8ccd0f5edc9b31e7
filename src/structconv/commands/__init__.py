"""Subcommand modules for structconv.

Provides register_commands() which uses deferred imports to keep
``structconv --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the decode commands on the root CLI group."""
    from structconv.commands.decode import env, form, map_cmd, query

    cli.add_command(env)
    cli.add_command(query)
    cli.add_command(form)
    cli.add_command(map_cmd)
