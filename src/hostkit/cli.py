"""Root CLI group for hostkit with global flags and command registration."""

from __future__ import annotations

import click

from hostkit import __version__
from hostkit.commands import register_commands
from hostkit.commands._base import HostGroup
from hostkit.commands._context import AppContext
from hostkit.config.settings import HostSettings


@click.group(
    cls=HostGroup,
    invoke_without_command=True,
    examples="""\
  hostkit parse 10.0.0.2:5555
  hostkit escape sh -c 'echo $HOME'
  hostkit -c ./hostkit.toml touch pulled/file.bin""",
)
@click.version_option(version=__version__, prog_name="hostkit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the primary value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """hostkit — address parsing, shell quoting, and path helpers."""
    # Unset flags are passed as None so env vars and TOML can still apply.
    settings = HostSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
