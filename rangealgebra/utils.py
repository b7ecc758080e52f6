"""Ordering helpers shared by the range shapes."""

# Copyright 2016-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def compare_values(a: Any, b: Any) -> int:
    """Compare two domain values using only ``<`` and ``==``.

    Args:
        a: First value.
        b: Second value.

    Returns:
        int: -1, 0 or 1.

    """
    if a == b:
        return 0
    return -1 if a < b else 1


def sorted_unique(values: Iterable[T]) -> list[T]:
    """Sort values ascending and drop duplicates.

    Works for unhashable values, duplicates are detected on the sorted
    sequence.

    Args:
        values: Values in any order.

    Returns:
        list[T]: Strictly increasing values.

    """
    result: list[T] = []
    for value in sorted(values):  # type: ignore[type-var]
        if not result or result[-1] != value:
            result.append(value)
    return result


def is_strictly_increasing(values: list[Any]) -> bool:
    """Return True if every value is strictly less than the next one."""
    return all(a < b for a, b in zip(values, values[1:]))


def min_by(a: T, b: T, cmp: Callable[[T, T], int]) -> T:
    """Return the smaller of two items under a comparison function, ``a`` on ties."""
    return b if cmp(b, a) < 0 else a


def max_by(a: T, b: T, cmp: Callable[[T, T], int]) -> T:
    """Return the larger of two items under a comparison function, ``a`` on ties."""
    return b if cmp(b, a) > 0 else a
