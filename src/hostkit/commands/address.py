"""Command: parse a host[:port] connection string."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hostkit.commands._base import HostCommand

if TYPE_CHECKING:
    from hostkit.commands._context import AppContext


@click.command(
    cls=HostCommand,
    examples="""\
  hostkit parse 192.168.1.20
  hostkit parse emulator.local:5557
  hostkit parse '[fe80::200:5aee:feaa:20a2]:5555'
  hostkit parse ::1 --default-port 6000
  hostkit --json parse 10.0.0.2:5555""",
)
@click.argument("address")
@click.option(
    "-p",
    "--default-port",
    type=int,
    default=None,
    help="Port used when ADDRESS has none (default from [network] config).",
)
@click.pass_obj
def parse(app: AppContext, address: str, default_port: int | None) -> None:
    """Parse ADDRESS into host, port, and canonical address."""
    from hostkit.services.address import AddressService

    app.emit(AddressService(app.settings).parse(address, default_port=default_port))
