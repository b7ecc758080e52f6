"""Represent ranges made of discrete values."""

# Copyright 2016-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from rangealgebra.bound import Bound
from rangealgebra.continuous_range import ContinuousRange
from rangealgebra.kind import RangeKind
from rangealgebra.utils import compare_values, is_strictly_increasing, sorted_unique


class SingleValueRange:
    """A range holding exactly one value.

    Behaves like a ListRange of length 1 in every operation.
    """

    kind = RangeKind.SINGLE

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def is_empty(self) -> bool:
        return False

    def is_full(self) -> bool:
        return False

    def sorted_values(self) -> list[Any]:
        return [self.value]

    def contains_value(self, value: Any) -> bool:
        return self.value == value

    def map_values(self, fn: Callable[[Any], Any]) -> SingleValueRange:
        return SingleValueRange(fn(self.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SingleValueRange):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __repr__(self) -> str:
        return f"SingleValueRange({self.value!r})"

    def __str__(self) -> str:
        return str(self.value)


class ListRange:
    """A finite set of discrete values.

    Built through Range.list the values are strictly increasing. Built
    directly they may come in any order with duplicates, sorted_values always
    returns the canonical sequence.

    Attributes:
        values: The values as given.
    """

    kind = RangeKind.LIST

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Any]) -> None:
        self._values = tuple(values)

    @property
    def values(self) -> tuple[Any, ...]:
        return self._values

    def is_empty(self) -> bool:
        """Return True if there is no value, only possible when built directly."""
        return not self._values

    def is_full(self) -> bool:
        return False

    def sorted_values(self) -> list[Any]:
        """Return the values strictly increasing."""
        values = list(self.values)
        if is_strictly_increasing(values):
            return values
        return sorted_unique(values)

    def contains_value(self, value: Any) -> bool:
        return any(v == value for v in self.values)

    def map_values(self, fn: Callable[[Any], Any]) -> ListRange:
        return ListRange(fn(v) for v in self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListRange):
            return NotImplemented
        return self.values == other.values

    def __hash__(self) -> int:
        return hash((self.kind, self.values))

    def __repr__(self) -> str:
        return f"ListRange({self.values!r})"

    def __str__(self) -> str:
        return "{" + ", ".join(str(v) for v in self.values) + "}"


def merge_union(a: list[Any], b: list[Any]) -> list[Any]:
    """Merge two strictly increasing sequences keeping every value once."""
    result = []
    i = j = 0
    while i < len(a) and j < len(b):
        cmp = compare_values(a[i], b[j])
        if cmp < 0:
            result.append(a[i])
            i += 1
        elif cmp > 0:
            result.append(b[j])
            j += 1
        else:
            result.append(a[i])
            i += 1
            j += 1
    result.extend(a[i:])
    result.extend(b[j:])
    return result


def merge_intersection(a: list[Any], b: list[Any]) -> list[Any]:
    """Keep the values present in both strictly increasing sequences."""
    result = []
    i = j = 0
    while i < len(a) and j < len(b):
        cmp = compare_values(a[i], b[j])
        if cmp < 0:
            i += 1
        elif cmp > 0:
            j += 1
        else:
            result.append(a[i])
            i += 1
            j += 1
    return result


def merge_difference(a: list[Any], b: list[Any]) -> list[Any]:
    """Keep the values of a absent from b, both strictly increasing."""
    result = []
    i = j = 0
    while i < len(a):
        if j == len(b):
            result.extend(a[i:])
            break
        cmp = compare_values(a[i], b[j])
        if cmp < 0:
            result.append(a[i])
            i += 1
        elif cmp > 0:
            j += 1
        else:
            i += 1
            j += 1
    return result


def values_inside(values: list[Any], continuous: ContinuousRange) -> list[Any]:
    """Keep the values contained in a continuous range."""
    return [v for v in values if continuous.contains_value(v)]


def values_outside(values: list[Any], continuous: ContinuousRange) -> list[Any]:
    """Keep the values not contained in a continuous range."""
    return [v for v in values if not continuous.contains_value(v)]


def split_at_values(continuous: ContinuousRange, values: list[Any]) -> list[ContinuousRange]:
    """Remove discrete values from a continuous range.

    Args:
        continuous: Range to split.
        values: Strictly increasing values to remove.

    Returns:
        list[ContinuousRange]: Non-empty pieces, a single unchanged piece if no value lies inside.

    """
    pieces = []
    lower = continuous.lower
    for value in values_inside(values, continuous):
        piece = ContinuousRange(lower, Bound.excluded(value))
        if not piece.is_empty():
            pieces.append(piece)
        lower = Bound.excluded(value)
    last = ContinuousRange(lower, continuous.upper)
    if not last.is_empty():
        pieces.append(last)
    return pieces
