"""Represent one edge of a continuous range and order edges against each other."""

# Copyright 2016-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import Any

from rangealgebra.exceptions import BoundError
from rangealgebra.utils import compare_values, max_by, min_by


class BoundKind(enum.Enum):
    """Tag of a bound."""

    NEGATIVE_INFINITY = "-inf"
    FINITE = "finite"
    POSITIVE_INFINITY = "+inf"


class BoundSide(enum.Enum):
    """Role a bound plays inside a range."""

    LOWER = "lower"
    UPPER = "upper"


class BoundOrdering(enum.IntEnum):
    """Result of comparing two bounds.

    MEETS and IS_MET are returned when an upper bound and a lower bound sit at
    the same position: the two ranges touch without sharing a value, e.g.
    ``[1..5)`` and ``[5..10]`` or ``[1..5]`` and ``(5..10]``.
    """

    MEETS = -2
    LESS = -1
    EQUAL = 0
    GREATER = 1
    IS_MET = 2

    def sign(self) -> int:
        """Collapse the ordering to -1/0/1, touching bounds count as equal positions."""
        if self in (BoundOrdering.MEETS, BoundOrdering.IS_MET):
            return 0
        return int(self)


class Bound:
    """One edge of a continuous range.

    Attributes:
        kind: Negative infinity, positive infinity or finite.
        value: The edge value, None for infinite bounds.
        inclusive: Whether the value belongs to the range, always False for infinite bounds.

    Methods:
        included: Create an inclusive finite bound.
        excluded: Create an exclusive finite bound.
        finite: Create a finite bound.
        negative_infinity: Create the bound below every value.
        positive_infinity: Create the bound above every value.
        complement: Return the bound with flipped inclusivity.
        position: Return the sort key of the bound for a given side.
    """

    __slots__ = ("_kind", "_value", "_inclusive")

    def __init__(self, kind: BoundKind, value: Any = None, inclusive: bool = False) -> None:
        """Initialize a Bound, prefer the named constructors."""
        if kind is BoundKind.FINITE:
            if value is None:
                raise BoundError("A finite bound needs a value")
            if not isinstance(inclusive, bool):
                msg = f"Bound inclusivity must be a bool, not {inclusive!r}"
                raise BoundError(msg)
        else:
            value = None
            inclusive = False
        self._kind = kind
        self._value = value
        self._inclusive = inclusive

    @property
    def kind(self) -> BoundKind:
        return self._kind

    @property
    def value(self) -> Any:
        return self._value

    @property
    def inclusive(self) -> bool:
        return self._inclusive

    @classmethod
    def included(cls, value: Any) -> Bound:
        """Create an inclusive finite bound."""
        return cls(BoundKind.FINITE, value, True)

    @classmethod
    def excluded(cls, value: Any) -> Bound:
        """Create an exclusive finite bound."""
        return cls(BoundKind.FINITE, value, False)

    @classmethod
    def finite(cls, value: Any, inclusive: bool = True) -> Bound:
        """Create a finite bound.

        Args:
            value: Edge value.
            inclusive: Whether the value belongs to the range.

        Returns:
            Bound: Created bound.

        Raises:
            BoundError: The value is None or inclusive is not a bool.

        """
        return cls(BoundKind.FINITE, value, inclusive)

    @classmethod
    def negative_infinity(cls) -> Bound:
        """Create the bound below every value."""
        return cls(BoundKind.NEGATIVE_INFINITY)

    @classmethod
    def positive_infinity(cls) -> Bound:
        """Create the bound above every value."""
        return cls(BoundKind.POSITIVE_INFINITY)

    def is_finite(self) -> bool:
        """Return True if the bound carries a value."""
        return self.kind is BoundKind.FINITE

    def complement(self) -> Bound:
        """Return the bound with flipped inclusivity, infinite bounds are returned as-is.

        The complement of a lower bound used as an upper bound (and the other way
        round) ends exactly where the original begins.
        """
        if not self.is_finite():
            return self
        return Bound(BoundKind.FINITE, self.value, not self.inclusive)

    def map_value(self, fn: Callable[[Any], Any]) -> Bound:
        """Return the bound with fn applied to its value."""
        if not self.is_finite():
            return self
        return Bound(BoundKind.FINITE, fn(self.value), self.inclusive)

    def position(self, side: BoundSide) -> tuple:
        """Return the position of this bound on the ordered line.

        Finite bounds sit just below their value when they start including it
        (inclusive lower, exclusive upper) and just above it otherwise.

        Args:
            side: Role of the bound.

        Returns:
            tuple: (rank, value, offset), see compare_positions.

        """
        if self.kind is BoundKind.NEGATIVE_INFINITY:
            return (-1, None, 0)
        if self.kind is BoundKind.POSITIVE_INFINITY:
            return (1, None, 0)
        if side is BoundSide.LOWER:
            return (0, self.value, -1 if self.inclusive else 1)
        return (0, self.value, 1 if self.inclusive else -1)

    def __eq__(self, other: object) -> bool:
        """Return True if both bounds have the same kind, value and inclusivity."""
        if not isinstance(other, Bound):
            return NotImplemented
        return self.kind is other.kind and self.value == other.value and self.inclusive == other.inclusive

    def __hash__(self) -> int:
        """Return hash value of this bound."""
        return hash((self.kind, self.value, self.inclusive))

    def __repr__(self) -> str:
        """Return constructor form of this bound."""
        if self.kind is BoundKind.NEGATIVE_INFINITY:
            return "Bound.negative_infinity()"
        if self.kind is BoundKind.POSITIVE_INFINITY:
            return "Bound.positive_infinity()"
        if self.inclusive:
            return f"Bound.included({self.value!r})"
        return f"Bound.excluded({self.value!r})"


def value_position(value: Any) -> tuple:
    """Return the position of a value, between its lower and upper cuts."""
    return (0, value, 0)


def compare_positions(a: tuple, b: tuple) -> int:
    """Compare two positions returned by Bound.position or value_position."""
    if a[0] != b[0]:
        return -1 if a[0] < b[0] else 1
    if a[0] != 0:
        return 0
    cmp = compare_values(a[1], b[1])
    if cmp:
        return cmp
    return compare_values(a[2], b[2])


def compare_bounds(this: Bound, this_side: BoundSide, other: Bound, other_side: BoundSide) -> BoundOrdering:
    """Compare two bounds, each in its role.

    Args:
        this: First bound.
        this_side: Role of the first bound.
        other: Second bound.
        other_side: Role of the second bound.

    Returns:
        BoundOrdering: MEETS/IS_MET when an upper and a lower bound touch.

    """
    cmp = compare_positions(this.position(this_side), other.position(other_side))
    if cmp < 0:
        return BoundOrdering.LESS
    if cmp > 0:
        return BoundOrdering.GREATER
    if this_side is other_side:
        return BoundOrdering.EQUAL
    if this_side is BoundSide.UPPER:
        return BoundOrdering.MEETS
    return BoundOrdering.IS_MET


def _same_side(side: BoundSide) -> Callable[[Bound, Bound], int]:
    return lambda a, b: compare_bounds(a, side, b, side).sign()


def min_bound(a: Bound, b: Bound, side: BoundSide) -> Bound:
    """Return the lower-positioned of two bounds playing the same role."""
    return min_by(a, b, _same_side(side))


def max_bound(a: Bound, b: Bound, side: BoundSide) -> Bound:
    """Return the higher-positioned of two bounds playing the same role."""
    return max_by(a, b, _same_side(side))
