"""The Range type and the operations dispatched over its shapes."""

# Copyright 2016-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from rangealgebra.bound import Bound
from rangealgebra.composite_range import (
    SHAPES,
    CompositeRange,
    EmptyRange,
    FullRange,
    Shape,
    canonical,
    flatten,
    from_sorted_values,
    simplify_shape,
    sweep,
)
from rangealgebra.continuous_range import ContinuousRange
from rangealgebra.exceptions import ShapeError
from rangealgebra.kind import RangeKind
from rangealgebra.list_range import (
    ListRange,
    SingleValueRange,
    merge_difference,
    merge_intersection,
    merge_union,
    split_at_values,
    values_inside,
    values_outside,
)

log = logging.getLogger("rangealgebra")

# Promotion order: a shape is handled as the most general shape of both operands.
DISCRETE = 1
CONTINUOUS = 2
COMPOSITE = 3

_LEVELS = {
    RangeKind.SINGLE: DISCRETE,
    RangeKind.LIST: DISCRETE,
    RangeKind.CONTINUOUS: CONTINUOUS,
    RangeKind.FULL: CONTINUOUS,
    RangeKind.COMPOSITE: COMPOSITE,
}

_LEVEL_NAMES = {DISCRETE: "discrete", CONTINUOUS: "continuous", COMPOSITE: "composite"}


def _level(operation: str, a: Shape, b: Shape) -> int:
    level = max(_LEVELS[a.kind], _LEVELS[b.kind])
    log.debug("%s of %s and %s handled as %s", operation, a.kind.value, b.kind.value, _LEVEL_NAMES[level])
    return level


def _as_continuous(shape: Shape) -> ContinuousRange:
    if shape.kind is RangeKind.FULL:
        return ContinuousRange.full()
    return shape


def _is_empty(shape: Shape) -> bool:
    return shape.is_empty()


def _is_full(shape: Shape) -> bool:
    return shape.is_full()


def union(a: Shape, b: Shape) -> Shape:
    """Return the canonical shape holding the values of a or b."""
    if a.kind is RangeKind.EMPTY:
        return simplify_shape(b)
    if b.kind is RangeKind.EMPTY:
        return simplify_shape(a)
    if a.kind is RangeKind.FULL or b.kind is RangeKind.FULL:
        return FullRange()

    level = _level("union", a, b)
    if level == DISCRETE:
        return from_sorted_values(merge_union(a.sorted_values(), b.sorted_values()))
    if level == CONTINUOUS and a.kind is b.kind:
        return canonical(a.union(b))
    return canonical(flatten(a) + flatten(b))


def intersection(a: Shape, b: Shape) -> Shape:
    """Return the canonical shape holding the values of both a and b."""
    if a.kind is RangeKind.EMPTY or b.kind is RangeKind.EMPTY:
        return EmptyRange()
    if a.kind is RangeKind.FULL:
        return simplify_shape(b)
    if b.kind is RangeKind.FULL:
        return simplify_shape(a)

    level = _level("intersection", a, b)
    if level == DISCRETE:
        return from_sorted_values(merge_intersection(a.sorted_values(), b.sorted_values()))
    if level == CONTINUOUS:
        if a.kind is b.kind:
            return canonical([a.intersection(b)])
        if a.kind is RangeKind.CONTINUOUS:
            return from_sorted_values(values_inside(b.sorted_values(), a))
        return from_sorted_values(values_inside(a.sorted_values(), b))

    pieces = []
    for piece_a in flatten(a):
        for piece_b in flatten(b):
            pieces.append(piece_a.intersection(piece_b))
    return canonical(pieces)


def difference(a: Shape, b: Shape) -> Shape:
    """Return the canonical shape holding the values of a that are not in b."""
    if a.kind is RangeKind.EMPTY or b.kind is RangeKind.FULL:
        return EmptyRange()
    if b.kind is RangeKind.EMPTY:
        return simplify_shape(a)

    a = _as_continuous(a)
    level = _level("difference", a, b)
    if level == DISCRETE:
        return from_sorted_values(merge_difference(a.sorted_values(), b.sorted_values()))
    if level == CONTINUOUS:
        if a.kind is b.kind:
            return canonical(a.difference(b))
        if a.kind is RangeKind.CONTINUOUS:
            return canonical(split_at_values(a, b.sorted_values()))
        return from_sorted_values(values_outside(a.sorted_values(), b))

    remaining = flatten(a)
    for piece_b in flatten(b):
        remaining = [piece for piece_a in remaining for piece in piece_a.difference(piece_b)]
    return canonical(remaining)


def contains_value(a: Shape, value: Any) -> bool:
    """Return True if value belongs to a."""
    return a.contains_value(value)


def contains_range(a: Shape, b: Shape) -> bool:
    """Return True if every value of b belongs to a, the empty range is contained in any range."""
    if _is_empty(b):
        return True
    if a.kind is RangeKind.EMPTY:
        return False
    if a.kind is RangeKind.FULL:
        return True
    if b.kind is RangeKind.FULL:
        return _is_full(a)

    level = _level("contains_range", a, b)
    if level == DISCRETE:
        return not merge_difference(b.sorted_values(), a.sorted_values())
    if level == CONTINUOUS:
        if a.kind is b.kind:
            return a.contains_range(b)
        if a.kind is RangeKind.CONTINUOUS:
            return all(a.contains_value(v) for v in b.sorted_values())
        return b.is_single() and a.contains_value(b.lower.value)

    merged = sweep(flatten(a))
    return all(any(piece_a.contains_range(piece_b) for piece_a in merged) for piece_b in flatten(b))


def overlaps(a: Shape, b: Shape) -> bool:
    """Return True if a and b share at least one value."""
    if a.kind is RangeKind.EMPTY or b.kind is RangeKind.EMPTY:
        return False
    if a.kind is RangeKind.FULL:
        return not _is_empty(b)
    if b.kind is RangeKind.FULL:
        return not _is_empty(a)

    level = _level("overlaps", a, b)
    if level == DISCRETE:
        return bool(merge_intersection(a.sorted_values(), b.sorted_values()))
    if level == CONTINUOUS:
        if a.kind is b.kind:
            return a.overlaps(b)
        if a.kind is RangeKind.CONTINUOUS:
            return any(a.contains_value(v) for v in b.sorted_values())
        return any(b.contains_value(v) for v in a.sorted_values())
    return any(piece_a.overlaps(piece_b) for piece_a in flatten(a) for piece_b in flatten(b))


class Range:
    """A range over a totally ordered domain, in one of six shapes.

    The named constructors return canonical values. Wrapping a shape directly,
    e.g. ``Range(CompositeRange([...]))``, keeps it as given: every operation
    still accepts it, and ``simplify`` returns its canonical form.

    Equality (``==``) and hashing compare canonical forms, ``identical``
    compares the shapes as they are stored.

    Attributes:
        shape: The wrapped shape.

    Methods:
        empty: The range holding no value.
        full: The range holding every value.
        single: The range holding one value.
        continuous: The interval between two bounds.
        list: The range holding a finite set of values.
        composite: The union of several ranges.
        union: Values in either range, also ``|``.
        intersection: Values in both ranges, also ``&``.
        difference: Values in this range but not the other, also ``-``.
        contains_value: Membership of a value, also ``in``.
        contains_range: Whether every value of the other range belongs to this one.
        overlaps: Whether both ranges share a value.
        simplify: The canonical form.
    """

    __slots__ = ("_shape",)

    def __init__(self, shape: Shape) -> None:
        """Wrap a shape without simplifying it.

        Raises:
            ShapeError: The value is not one of the six shapes.

        """
        if not isinstance(shape, SHAPES):
            msg = f"Not a range shape: {shape!r}"
            raise ShapeError(msg)
        self._shape = shape

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def kind(self) -> RangeKind:
        return self.shape.kind

    @classmethod
    def empty(cls) -> Range:
        return cls(EmptyRange())

    @classmethod
    def full(cls) -> Range:
        return cls(FullRange())

    @classmethod
    def single(cls, value: Any) -> Range:
        return cls(SingleValueRange(value))

    @classmethod
    def continuous(cls, lower: Bound, upper: Bound) -> Range:
        """Create the interval between two bounds.

        Crossed bounds give the empty range, ``[v..v]`` a single value and
        ``(..)`` the full range.

        Args:
            lower: Lower bound.
            upper: Upper bound.

        Returns:
            Range: Canonical range.

        """
        return cls(simplify_shape(ContinuousRange(lower, upper)))

    @classmethod
    def closed(cls, lower: Any, upper: Any) -> Range:
        """Create ``[lower..upper]``."""
        return cls.continuous(Bound.included(lower), Bound.included(upper))

    @classmethod
    def open(cls, lower: Any, upper: Any) -> Range:
        """Create ``(lower..upper)``."""
        return cls.continuous(Bound.excluded(lower), Bound.excluded(upper))

    @classmethod
    def open_closed(cls, lower: Any, upper: Any) -> Range:
        """Create ``(lower..upper]``."""
        return cls.continuous(Bound.excluded(lower), Bound.included(upper))

    @classmethod
    def closed_open(cls, lower: Any, upper: Any) -> Range:
        """Create ``[lower..upper)``."""
        return cls.continuous(Bound.included(lower), Bound.excluded(upper))

    @classmethod
    def at_least(cls, lower: Any) -> Range:
        return cls.continuous(Bound.included(lower), Bound.positive_infinity())

    @classmethod
    def greater_than(cls, lower: Any) -> Range:
        return cls.continuous(Bound.excluded(lower), Bound.positive_infinity())

    @classmethod
    def at_most(cls, upper: Any) -> Range:
        return cls.continuous(Bound.negative_infinity(), Bound.included(upper))

    @classmethod
    def less_than(cls, upper: Any) -> Range:
        return cls.continuous(Bound.negative_infinity(), Bound.excluded(upper))

    @classmethod
    def list(cls, values: Iterable[Any]) -> Range:
        """Create the range of a finite set of values, sorted and deduplicated."""
        return cls(simplify_shape(ListRange(values)))

    @classmethod
    def composite(cls, parts: Iterable[Range | Shape]) -> Range:
        """Create the canonical union of several ranges or shapes."""
        shapes = [part.shape if isinstance(part, Range) else part for part in parts]
        return cls(simplify_shape(CompositeRange(shapes)))

    def simplify(self) -> Range:
        """Return the canonical form of this range."""
        return Range(simplify_shape(self.shape))

    def is_empty(self) -> bool:
        return _is_empty(self.shape)

    def is_full(self) -> bool:
        return _is_full(self.shape)

    def union(self, other: Range) -> Range:
        return Range(union(self.shape, other.shape))

    def intersection(self, other: Range) -> Range:
        return Range(intersection(self.shape, other.shape))

    def difference(self, other: Range) -> Range:
        return Range(difference(self.shape, other.shape))

    def contains_value(self, value: Any) -> bool:
        return contains_value(self.shape, value)

    def contains_range(self, other: Range) -> bool:
        return contains_range(self.shape, other.shape)

    def overlaps(self, other: Range) -> bool:
        return overlaps(self.shape, other.shape)

    def disjoint(self, other: Range) -> bool:
        return not overlaps(self.shape, other.shape)

    def map_values(self, fn: Callable[[Any], Any]) -> Range:
        """Apply a strictly increasing function to every value and bound of the range.

        Args:
            fn: Strictly increasing function, e.g. a unit conversion.

        Returns:
            Range: Canonical mapped range.

        """
        return Range(simplify_shape(self.shape.map_values(fn)))

    def identical(self, other: Range) -> bool:
        """Return True if both ranges store structurally equal shapes."""
        return self.shape.kind is other.shape.kind and self.shape == other.shape

    def __or__(self, other: Range) -> Range:
        if not isinstance(other, Range):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: Range) -> Range:
        if not isinstance(other, Range):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: Range) -> Range:
        if not isinstance(other, Range):
            return NotImplemented
        return self.difference(other)

    def __contains__(self, value: Any) -> bool:
        return self.contains_value(value)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, other: object) -> bool:
        """Return True if both ranges hold the same values."""
        if not isinstance(other, Range):
            return NotImplemented
        return self.simplify().identical(other.simplify())

    def __hash__(self) -> int:
        return hash(simplify_shape(self.shape))

    def __repr__(self) -> str:
        return f"Range({self.shape!r})"

    def __str__(self) -> str:
        return str(self.shape)
