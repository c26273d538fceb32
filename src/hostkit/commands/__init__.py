"""Subcommand modules for hostkit.

Provides register_commands() which uses deferred imports to keep
``hostkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from hostkit.commands.address import parse
    from hostkit.commands.paths import basename, isdir, mkdirs, touch
    from hostkit.commands.shell import escape

    cli.add_command(parse)
    cli.add_command(escape)
    cli.add_command(isdir)
    cli.add_command(mkdirs)
    cli.add_command(basename)
    cli.add_command(touch)
