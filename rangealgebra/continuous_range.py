"""Represent an interval between two bounds."""

# Copyright 2016-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from rangealgebra.bound import (
    Bound,
    BoundKind,
    BoundSide,
    compare_positions,
    max_bound,
    min_bound,
    value_position,
)
from rangealgebra.exceptions import BoundError
from rangealgebra.kind import RangeKind
from rangealgebra.relation import RangesRelation

LOWER = BoundSide.LOWER
UPPER = BoundSide.UPPER


class ContinuousRange:
    """An interval with no holes, from a lower to an upper bound.

    A ContinuousRange whose lower bound lies above its upper bound is allowed
    and is empty. Every operation only compares bound positions, nothing is
    computed on the values themselves.

    Attributes:
        lower: Lower bound.
        upper: Upper bound.

    Methods:
        closed: Create ``[a..b]``.
        open: Create ``(a..b)``.
        open_closed: Create ``(a..b]``.
        closed_open: Create ``[a..b)``.
        at_least: Create ``[a..)``.
        greater_than: Create ``(a..)``.
        at_most: Create ``(..b]``.
        less_than: Create ``(..b)``.
        full: Create ``(..)``.
        point: Create ``[v..v]``.
        compare: Return the RangesRelation to another range.
        overlaps: Return True if both ranges share a value.
        touches: Return True if the ranges are adjacent.
        union: Return the pieces covering both ranges.
        intersection: Return the common part.
        difference: Return the pieces of this range outside another one.
    """

    kind = RangeKind.CONTINUOUS

    __slots__ = ("_lower", "_upper")

    def __init__(self, lower: Bound, upper: Bound) -> None:
        """Initialize a ContinuousRange."""
        if not isinstance(lower, Bound) or not isinstance(upper, Bound):
            msg = f"ContinuousRange needs two bounds, got {lower!r} and {upper!r}"
            raise BoundError(msg)
        self._lower = lower
        self._upper = upper

    @property
    def lower(self) -> Bound:
        return self._lower

    @property
    def upper(self) -> Bound:
        return self._upper

    @classmethod
    def closed(cls, lower: Any, upper: Any) -> ContinuousRange:
        """Create a range including both ends."""
        return cls(Bound.included(lower), Bound.included(upper))

    @classmethod
    def open(cls, lower: Any, upper: Any) -> ContinuousRange:
        """Create a range excluding both ends."""
        return cls(Bound.excluded(lower), Bound.excluded(upper))

    @classmethod
    def open_closed(cls, lower: Any, upper: Any) -> ContinuousRange:
        """Create a range excluding its lower end."""
        return cls(Bound.excluded(lower), Bound.included(upper))

    @classmethod
    def closed_open(cls, lower: Any, upper: Any) -> ContinuousRange:
        """Create a range excluding its upper end."""
        return cls(Bound.included(lower), Bound.excluded(upper))

    @classmethod
    def at_least(cls, lower: Any) -> ContinuousRange:
        return cls(Bound.included(lower), Bound.positive_infinity())

    @classmethod
    def greater_than(cls, lower: Any) -> ContinuousRange:
        return cls(Bound.excluded(lower), Bound.positive_infinity())

    @classmethod
    def at_most(cls, upper: Any) -> ContinuousRange:
        return cls(Bound.negative_infinity(), Bound.included(upper))

    @classmethod
    def less_than(cls, upper: Any) -> ContinuousRange:
        return cls(Bound.negative_infinity(), Bound.excluded(upper))

    @classmethod
    def full(cls) -> ContinuousRange:
        return cls(Bound.negative_infinity(), Bound.positive_infinity())

    @classmethod
    def point(cls, value: Any) -> ContinuousRange:
        """Create the range holding exactly one value."""
        return cls(Bound.included(value), Bound.included(value))

    def _lower_position(self) -> tuple:
        return self.lower.position(LOWER)

    def _upper_position(self) -> tuple:
        return self.upper.position(UPPER)

    def is_empty(self) -> bool:
        """Return True if no value lies between the bounds, e.g. crossed bounds or ``[v..v)``."""
        return compare_positions(self._lower_position(), self._upper_position()) >= 0

    def is_full(self) -> bool:
        """Return True if the range spans every value."""
        return self.lower.kind is BoundKind.NEGATIVE_INFINITY and self.upper.kind is BoundKind.POSITIVE_INFINITY

    def is_single(self) -> bool:
        """Return True if the range is ``[v..v]``."""
        return (
            self.lower.is_finite()
            and self.upper.is_finite()
            and self.lower.inclusive
            and self.upper.inclusive
            and self.lower.value == self.upper.value
        )

    def contains_value(self, value: Any) -> bool:
        """Check whether the range contains the given value.

        Args:
            value: Value to be checked.

        Returns:
            bool: The value lies between the bounds.

        """
        position = value_position(value)
        return (
            compare_positions(self._lower_position(), position) < 0
            and compare_positions(position, self._upper_position()) < 0
        )

    def contains_range(self, other: ContinuousRange) -> bool:
        """Check whether every value of other lies in this range, an empty other is always contained."""
        if other.is_empty():
            return True
        if self.is_empty():
            return False
        return (
            compare_positions(self._lower_position(), other._lower_position()) <= 0
            and compare_positions(other._upper_position(), self._upper_position()) <= 0
        )

    def overlaps(self, other: ContinuousRange) -> bool:
        """Return True if both ranges share at least one value."""
        if self.is_empty() or other.is_empty():
            return False
        return (
            compare_positions(self._lower_position(), other._upper_position()) < 0
            and compare_positions(other._lower_position(), self._upper_position()) < 0
        )

    def touches(self, other: ContinuousRange) -> bool:
        """Return True if the ranges share no value but their union has no hole.

        ``[1..5)`` touches ``[5..10]``, ``[1..5)`` does not touch ``(5..10]``.
        """
        if self.is_empty() or other.is_empty() or self.overlaps(other):
            return False
        return (
            compare_positions(self._upper_position(), other._lower_position()) == 0
            or compare_positions(other._upper_position(), self._lower_position()) == 0
        )

    def compare(self, other: ContinuousRange) -> RangesRelation | None:
        """Return how this range relates to other.

        Args:
            other: Range to compare with.

        Returns:
            RangesRelation | None: The relation, None if exactly one of the ranges is empty.

        """
        if self.is_empty() or other.is_empty():
            return RangesRelation.EQUAL if self.is_empty() and other.is_empty() else None

        end_start = compare_positions(self._upper_position(), other._lower_position())
        if end_start < 0:
            return RangesRelation.STRICTLY_BEFORE
        if end_start == 0:
            return RangesRelation.MEETS
        start_end = compare_positions(self._lower_position(), other._upper_position())
        if start_end > 0:
            return RangesRelation.STRICTLY_AFTER
        if start_end == 0:
            return RangesRelation.IS_MET

        start_start = compare_positions(self._lower_position(), other._lower_position())
        end_end = compare_positions(self._upper_position(), other._upper_position())
        if start_start < 0:
            if end_end < 0:
                return RangesRelation.OVERLAPS
            if end_end == 0:
                return RangesRelation.IS_FINISHED
            return RangesRelation.STRICTLY_CONTAINS
        if start_start == 0:
            if end_end < 0:
                return RangesRelation.STARTS
            if end_end == 0:
                return RangesRelation.EQUAL
            return RangesRelation.IS_STARTED
        if end_end < 0:
            return RangesRelation.IS_STRICTLY_CONTAINED
        if end_end == 0:
            return RangesRelation.FINISHES
        return RangesRelation.IS_OVERLAPPED

    def span(self, other: ContinuousRange) -> ContinuousRange:
        """Return the smallest range covering both ranges, holes included."""
        return ContinuousRange(min_bound(self.lower, other.lower, LOWER), max_bound(self.upper, other.upper, UPPER))

    def union(self, other: ContinuousRange) -> tuple[ContinuousRange, ...]:
        """Return the non-empty pieces covering both ranges.

        Args:
            other: Range to unite with.

        Returns:
            tuple[ContinuousRange, ...]: One piece if the ranges overlap or touch, else both, sorted.

        """
        if self.is_empty():
            return () if other.is_empty() else (other,)
        if other.is_empty():
            return (self,)
        if self.overlaps(other) or self.touches(other):
            return (self.span(other),)
        if compare_positions(self._lower_position(), other._lower_position()) < 0:
            return (self, other)
        return (other, self)

    def intersection(self, other: ContinuousRange) -> ContinuousRange:
        """Return the common part of both ranges, empty if they do not overlap."""
        return ContinuousRange(max_bound(self.lower, other.lower, LOWER), min_bound(self.upper, other.upper, UPPER))

    def difference(self, other: ContinuousRange) -> tuple[ContinuousRange, ...]:
        """Return the non-empty pieces of this range not covered by other.

        The bounds of other are complemented where they become edges of the
        result, so ``[1..10] - (3..7)`` is ``[1..3]`` and ``[7..10]``.

        Args:
            other: Range to subtract.

        Returns:
            tuple[ContinuousRange, ...]: Zero, one or two pieces, sorted.

        """
        if self.is_empty():
            return ()
        if not self.overlaps(other):
            return (self,)
        pieces = (
            ContinuousRange(self.lower, other.lower.complement()),
            ContinuousRange(other.upper.complement(), self.upper),
        )
        return tuple(piece for piece in pieces if not piece.is_empty())

    def map_values(self, fn: Callable[[Any], Any]) -> ContinuousRange:
        """Return the range with fn applied to both bound values."""
        return ContinuousRange(self.lower.map_value(fn), self.upper.map_value(fn))

    def __eq__(self, other: object) -> bool:
        """Return True if both ranges have equal bounds."""
        if not isinstance(other, ContinuousRange):
            return NotImplemented
        return self.lower == other.lower and self.upper == other.upper

    def __hash__(self) -> int:
        return hash((self.lower, self.upper))

    def __repr__(self) -> str:
        return f"ContinuousRange({self.lower!r}, {self.upper!r})"

    def __str__(self) -> str:
        """Return the range as ``[1..5)``, ``(..0]`` or ``(..)``."""
        if self.lower.kind is BoundKind.NEGATIVE_INFINITY:
            start = "(.."
        elif self.lower.kind is BoundKind.POSITIVE_INFINITY:
            start = "(+inf.."
        else:
            start = f"{'[' if self.lower.inclusive else '('}{self.lower.value}.."
        if self.upper.kind is BoundKind.POSITIVE_INFINITY:
            end = ")"
        elif self.upper.kind is BoundKind.NEGATIVE_INFINITY:
            end = "-inf)"
        else:
            end = f"{self.upper.value}{']' if self.upper.inclusive else ')'}"
        return start + end
