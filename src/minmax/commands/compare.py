"""Commands: min, max and clamp over literal operands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from minmax.commands._base import OperandCommand

if TYPE_CHECKING:
    from minmax.commands._context import AppContext


@click.command(
    "min",
    cls=OperandCommand,
    examples="""\
  minmax min 1 -2
  minmax min 4 3 2 1
  minmax min "(1, 8)" "(1, 2)"
  minmax --allow-strings min pear apple
  minmax -q min 3.5 -0.25""",
)
@click.argument("operands", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def min_cmd(app: AppContext, operands: tuple[str, ...]) -> None:
    """Print the smallest OPERANDS value (ties go to the later operand)."""
    from minmax.services.compare import ComparisonService

    app.emit(ComparisonService(app.settings).min(operands))


@click.command(
    "max",
    cls=OperandCommand,
    examples="""\
  minmax max 1.2 4.4
  minmax max 1 2 3 4 5 6 7
  minmax max "(1, 8)" "(1, 2)"
  minmax --json max 1 -2""",
)
@click.argument("operands", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def max_cmd(app: AppContext, operands: tuple[str, ...]) -> None:
    """Print the largest OPERANDS value (ties go to the later operand)."""
    from minmax.services.compare import ComparisonService

    app.emit(ComparisonService(app.settings).max(operands))


@click.command(
    "clamp",
    cls=OperandCommand,
    examples="""\
  minmax clamp 16 0 10
  minmax clamp -16 0 10
  minmax clamp 0.5 0.0 1.0
  minmax -q clamp 42 0 100""",
)
@click.argument("value", type=click.UNPROCESSED)
@click.argument("lower", type=click.UNPROCESSED)
@click.argument("upper", type=click.UNPROCESSED)
@click.pass_obj
def clamp_cmd(app: AppContext, value: str, lower: str, upper: str) -> None:
    """Bound VALUE to the inclusive range [LOWER, UPPER]."""
    from minmax.services.compare import ComparisonService

    app.emit(ComparisonService(app.settings).clamp(value, lower, upper))
