"""Click base classes with an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints usage examples and exits.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Accept an ``examples`` keyword and expose it as an eager flag."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class HostCommand(_ExamplesMixin, click.Command):
    """Click Command that supports ``--examples``."""


class HostGroup(_ExamplesMixin, click.Group):
    """Click Group that supports ``--examples``.

    Subcommands default to :class:`HostCommand`.
    """

    command_class = HostCommand
