"""Commands: directory probing and creation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hostkit.commands._base import HostCommand

if TYPE_CHECKING:
    from hostkit.commands._context import AppContext


@click.command(
    cls=HostCommand,
    examples="""\
  hostkit isdir /proc
  hostkit -q isdir ./build""",
)
@click.argument("path")
@click.pass_obj
def isdir(app: AppContext, path: str) -> None:
    """Report whether PATH is a directory (symlinks and junctions are not)."""
    from hostkit.services.paths import PathService

    app.emit(PathService(app.settings).directory_exists(path))


@click.command(
    cls=HostCommand,
    examples="""\
  hostkit mkdirs out/logs/run-1/output.txt
  hostkit mkdirs /tmp/pull/sdcard/""",
)
@click.argument("path")
@click.pass_obj
def mkdirs(app: AppContext, path: str) -> None:
    """Create every directory above the last component of PATH."""
    from hostkit.services.paths import PathService

    app.emit(PathService(app.settings).mkdirs(path))


@click.command(
    cls=HostCommand,
    examples="""\
  hostkit basename /system/bin/sh""",
)
@click.argument("path")
@click.pass_obj
def basename(app: AppContext, path: str) -> None:
    """Print the last component of PATH."""
    from hostkit.services.paths import PathService

    app.emit(PathService(app.settings).basename(path))


@click.command(
    cls=HostCommand,
    examples="""\
  hostkit touch pulled/sdcard/DCIM/photo.jpg""",
)
@click.argument("path")
@click.pass_obj
def touch(app: AppContext, path: str) -> None:
    """Create PATH as an empty file, making parent directories first."""
    from hostkit.services.paths import PathService

    app.emit(PathService(app.settings).prepare_file(path))
