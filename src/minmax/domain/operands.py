"""Operand parsing — turn command-line tokens into comparable values.

Accepted: ints, finite floats, and (nested) tuples of those, e.g. ``-2``,
``4.4``, ``"(1, 8)"``. With *allow_strings* set, quoted string literals
and bare words are accepted too and compare lexicographically.
"""

from __future__ import annotations

import ast
import math
from typing import Any


class OperandError(ValueError):
    """A token could not be parsed into a supported operand."""

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"Invalid operand {token!r}: {reason}")
        self.token = token
        self.reason = reason


def _check_literal(value: Any, *, allow_strings: bool) -> str | None:
    """Return a rejection reason for *value*, or None if it is a valid operand."""
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool):
        return "booleans are not supported"
    if isinstance(value, int):
        return None
    if isinstance(value, float):
        return None if math.isfinite(value) else "non-finite floats are not supported"
    if isinstance(value, str):
        return None if allow_strings else "strings require --allow-strings"
    if isinstance(value, tuple):
        for item in value:
            reason = _check_literal(item, allow_strings=allow_strings)
            if reason is not None:
                return reason
        return None
    return f"unsupported literal type {type(value).__name__}"


def parse_operand(token: str, *, allow_strings: bool = False) -> Any:
    """Parse a single operand token.

    Examples:
        >>> parse_operand("-2")
        -2
        >>> parse_operand("(1, 8)")
        (1, 8)
        >>> parse_operand("apple", allow_strings=True)
        'apple'
    """
    text = token.strip()
    if not text:
        raise OperandError(token, "empty operand")
    try:
        value = ast.literal_eval(text)
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError):
        if allow_strings:
            return text
        raise OperandError(token, "not a number or tuple literal") from None

    reason = _check_literal(value, allow_strings=allow_strings)
    if reason is not None:
        raise OperandError(token, reason)
    return value


def parse_operands(tokens: list[str] | tuple[str, ...], *, allow_strings: bool = False) -> list[Any]:
    """Parse every token in order. Raises OperandError on the first bad token."""
    return [parse_operand(token, allow_strings=allow_strings) for token in tokens]
