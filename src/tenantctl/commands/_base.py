"""Click classes for commands that carry usage examples.

``org`` and ``urm`` are declared with ``cls=ExampleGroup``; their
subcommands pick up :class:`ExampleCommand` through ``command_class``, so
``@org.command(examples=...)`` works without repeating ``cls=``.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


class _ExamplesMixin:
    """Adds an eager ``--examples`` flag and lists the examples under ``--help``."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)  # type: ignore[call-arg]
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)  # type: ignore[misc]
        if self.examples:
            with formatter.section("Examples"):
                formatter.write_text(f"\b\n{textwrap.dedent(self.examples).strip()}")


class ExampleCommand(_ExamplesMixin, click.Command):
    """Leaf command with optional usage examples."""


class ExampleGroup(_ExamplesMixin, click.Group):
    """Command group whose subcommands accept ``examples=``."""

    command_class = ExampleCommand
