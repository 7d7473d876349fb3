"""ComparisonService — min, max and clamp over parsed CLI operands.

Parses raw tokens with the domain operand parser, runs the ordering
operation, and folds every failure into a ServiceResult:

- ``NO_OPERANDS``: min/max called without operands.
- ``INVALID_OPERAND``: a token is not a supported literal.
- ``INCOMPARABLE``: operands have no ordering between them (e.g. int vs tuple).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from minmax.domain import ordering
from minmax.domain.operands import OperandError, parse_operands
from minmax.services.base import BaseService
from minmax.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _type_names(values: Sequence[Any]) -> list[str]:
    """Distinct operand type names, in first-seen order."""
    names: list[str] = []
    for value in values:
        name = type(value).__name__
        if name not in names:
            names.append(name)
    return names


def _equal(a: Any, b: Any) -> bool:
    return not a < b and not a > b


def _clamped_side(v: Any, lo: Any, hi: Any, result: Any, *, inverted: bool) -> str:
    """Which bound clamped *v*: ``"upper"``, ``"lower"`` or ``"none"``."""
    if not inverted:
        if v > hi:
            return "upper"
        if v < lo:
            return "lower"
        return "none"
    # Inverted bounds: read the side off the composition's result.
    if _equal(result, v):
        return "none"
    if _equal(result, hi):
        return "upper"
    return "lower"


def _invalid_operand(op: str, exc: OperandError) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="INVALID_OPERAND",
            message=str(exc),
            detail={"token": exc.token, "reason": exc.reason},
        ),
    )


def _incomparable(op: str, values: Sequence[Any], exc: TypeError) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="INCOMPARABLE",
            message=f"Operands cannot be ordered: {exc}",
            detail={"types": _type_names(values)},
        ),
    )


class ComparisonService(BaseService):
    """Select or bound values given as command-line tokens."""

    def min(self, tokens: Sequence[str]) -> ServiceResult:
        """Smallest of *tokens*; ties resolve to the later operand."""
        return self._reduce("min", ordering.min, tokens)

    def max(self, tokens: Sequence[str]) -> ServiceResult:
        """Largest of *tokens*; ties resolve to the later operand."""
        return self._reduce("max", ordering.max, tokens)

    def clamp(self, value: str, lower: str, upper: str) -> ServiceResult:
        """Bound *value* to ``[lower, upper]``.

        Inverted bounds still produce the ``min(upper, max(lower, value))``
        result, with a warning unless ``[clamp] warn_inverted_bounds`` is off.
        """
        op = "clamp"
        try:
            v, lo, hi = parse_operands(
                [value, lower, upper],
                allow_strings=self._settings.operands.allow_strings,
            )
        except OperandError as exc:
            return _invalid_operand(op, exc)

        warnings: list[str] = []
        try:
            result = ordering.clamp(v, lo, hi)
            inverted = not ordering.is_ordered(lo, hi)
            clamped = _clamped_side(v, lo, hi, result, inverted=inverted)
        except TypeError as exc:
            return _incomparable(op, [v, lo, hi], exc)

        if inverted:
            logger.debug("clamp called with inverted bounds lower=%r upper=%r", lo, hi)
            if self._settings.clamp.warn_inverted_bounds:
                warnings.append(
                    f"Lower bound {lo!r} exceeds upper bound {hi!r}; result is not meaningful"
                )

        logger.debug("clamp(%r, %r, %r) -> %r", v, lo, hi, result)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "result": result,
                "value": v,
                "lower": lo,
                "upper": hi,
                "clamped": clamped,
            },
            warnings=warnings,
        )

    def _reduce(
        self,
        op: str,
        reducer: Callable[..., Any],
        tokens: Sequence[str],
    ) -> ServiceResult:
        if not tokens:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="NO_OPERANDS",
                    message=f"{op} requires at least one operand",
                ),
            )

        try:
            operands = parse_operands(
                tokens,
                allow_strings=self._settings.operands.allow_strings,
            )
        except OperandError as exc:
            return _invalid_operand(op, exc)

        try:
            result = reducer(*operands)
        except TypeError as exc:
            return _incomparable(op, operands, exc)

        logger.debug("%s over %d operands -> %r", op, len(operands), result)
        return ServiceResult(
            ok=True,
            op=op,
            data={"result": result, "operands": operands},
            meta={"count": len(operands)},
        )
