"""Ordering operations — variadic min/max and clamp.

Each operation needs nothing beyond the strict ``<`` / ``>`` comparison on
its operands, so it works uniformly for ints, floats, strings and
lexicographically ordered tuples.

INVARIANT: On ties the right-hand operand wins, exactly as
``a if a < b else b`` does. Over N operands that means the *last* of the
equal extremes is returned.

Note: this module deliberately shadows the ``min`` and ``max`` builtins.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable
from typing import Any, Protocol, TypeVar


class SupportsOrdering(Protocol):
    """Operand type supporting strict less-than and greater-than."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=SupportsOrdering)


def _pick_min(a: T, b: T) -> T:
    return a if a < b else b


def _pick_max(a: T, b: T) -> T:
    return a if a > b else b


def min(first: T, *rest: T) -> T:
    """Return the smallest operand.

    A single operand is returned unchanged. Longer argument lists are a
    left-to-right pairwise reduction; on ties the later operand wins.

    Examples:
        >>> min(1, -2)
        -2
        >>> min(3, 2, 1)
        1
        >>> min((1, 8), (1, 2))
        (1, 2)
    """
    return functools.reduce(_pick_min, rest, first)


def max(first: T, *rest: T) -> T:
    """Return the largest operand.

    Symmetric to :func:`min`, using ``>``; on ties the later operand wins.

    Examples:
        >>> max(1.2, 4.4)
        4.4
        >>> max(1, 2, 3, 4, 5, 6, 7)
        7
        >>> max((1, 8), (1, 2))
        (1, 8)
    """
    return functools.reduce(_pick_max, rest, first)


def clamp(value: T, lower: T, upper: T) -> T:
    """Bound *value* to ``[lower, upper]``.

    Equivalent to ``min(upper, max(lower, value))``. The result when
    ``lower > upper`` is whatever that composition yields; do not rely on it.

    Examples:
        >>> clamp(16, 0, 10)
        10
        >>> clamp(-16, 0, 10)
        0
        >>> clamp(5, 0, 10)
        5
    """
    return min(upper, max(lower, value))


def min_of(values: Iterable[T]) -> T:
    """Fold :func:`min` over an iterable. Raises ValueError when it is empty."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("min_of() arg is an empty iterable") from None
    return functools.reduce(_pick_min, iterator, first)


def max_of(values: Iterable[T]) -> T:
    """Fold :func:`max` over an iterable. Raises ValueError when it is empty."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("max_of() arg is an empty iterable") from None
    return functools.reduce(_pick_max, iterator, first)


def is_ordered(lower: SupportsOrdering, upper: SupportsOrdering) -> bool:
    """Check that *lower* does not exceed *upper*, using ``>`` only."""
    return not lower > upper
