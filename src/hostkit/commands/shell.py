"""Command: quote arguments for a POSIX shell."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hostkit.commands._base import HostCommand

if TYPE_CHECKING:
    from hostkit.commands._context import AppContext


@click.command(
    cls=HostCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  hostkit escape ls -l "/sdcard/My Files"
  hostkit -q escape echo "it's done"
  hostkit --json escape -- rm -rf '/data/local/tmp/a b'""",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def escape(app: AppContext, args: tuple[str, ...]) -> None:
    """Quote ARGS into a single POSIX shell command line."""
    from hostkit.services.shell import ShellService

    app.emit(ShellService(app.settings).escape(list(args)))
