"""Custom Click base class with --examples support.

When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class OperandCommand(click.Command):
    """Click Command for commands whose arguments are raw operands.

    Unknown options are passed through as arguments so negative numbers
    (``-2``, ``-16.5``) reach the operand parser instead of failing as
    unknown flags.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        context_settings = kwargs.pop("context_settings", None) or {}
        context_settings.setdefault("ignore_unknown_options", True)
        super().__init__(*args, context_settings=context_settings, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
