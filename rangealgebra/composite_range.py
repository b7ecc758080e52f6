"""Represent unions of ranges and bring any shape to its canonical form."""

# Copyright 2016-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from functools import cmp_to_key
from typing import Any, Union

from rangealgebra.bound import BoundSide, compare_positions
from rangealgebra.continuous_range import ContinuousRange
from rangealgebra.exceptions import ShapeError
from rangealgebra.kind import RangeKind
from rangealgebra.list_range import ListRange, SingleValueRange

log = logging.getLogger("rangealgebra")


class EmptyRange:
    """The range holding no value."""

    kind = RangeKind.EMPTY

    __slots__ = ()

    _instance = None

    def __new__(cls) -> EmptyRange:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_empty(self) -> bool:
        return True

    def is_full(self) -> bool:
        return False

    def contains_value(self, value: Any) -> bool:
        return False

    def map_values(self, fn: Callable[[Any], Any]) -> EmptyRange:
        return self

    def __repr__(self) -> str:
        return "EmptyRange()"

    def __str__(self) -> str:
        return "[]"


class FullRange:
    """The range holding every value."""

    kind = RangeKind.FULL

    __slots__ = ()

    _instance = None

    def __new__(cls) -> FullRange:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_empty(self) -> bool:
        return False

    def is_full(self) -> bool:
        return True

    def contains_value(self, value: Any) -> bool:
        return True

    def map_values(self, fn: Callable[[Any], Any]) -> FullRange:
        return self

    def __repr__(self) -> str:
        return "FullRange()"

    def __str__(self) -> str:
        return "(..)"


class CompositeRange:
    """A union of ranges that no simpler shape can hold.

    In canonical form the parts are ContinuousRange and SingleValueRange
    values, sorted, pairwise disjoint and not adjacent, and there are at
    least two of them. Built directly, the parts may be any shapes in any
    order, overlapping or not.

    Attributes:
        parts: The sub-ranges as given.
    """

    kind = RangeKind.COMPOSITE

    __slots__ = ("_parts",)

    def __init__(self, parts: Iterable[Shape]) -> None:
        self._parts = tuple(parts)
        for part in self._parts:
            if not isinstance(part, SHAPES):
                msg = f"Not a range shape: {part!r}"
                raise ShapeError(msg)

    @property
    def parts(self) -> tuple[Shape, ...]:
        return self._parts

    def is_empty(self) -> bool:
        """Return True if no part holds a value."""
        return not flatten(self)

    def is_full(self) -> bool:
        """Return True if the parts together hold every value."""
        return simplify_shape(self).kind is RangeKind.FULL

    def contains_value(self, value: Any) -> bool:
        return any(part.contains_value(value) for part in self.parts)

    def map_values(self, fn: Callable[[Any], Any]) -> CompositeRange:
        return CompositeRange(part.map_values(fn) for part in self.parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompositeRange):
            return NotImplemented
        return self.parts == other.parts

    def __hash__(self) -> int:
        return hash((self.kind, self.parts))

    def __repr__(self) -> str:
        return f"CompositeRange({self.parts!r})"

    def __str__(self) -> str:
        return " | ".join(str(part) for part in self.parts)


Shape = Union[EmptyRange, FullRange, ContinuousRange, SingleValueRange, ListRange, CompositeRange]

SHAPES = (EmptyRange, FullRange, ContinuousRange, SingleValueRange, ListRange, CompositeRange)


def flatten(shape: Shape) -> list[ContinuousRange]:
    """Turn any shape into continuous pieces, discrete values become ``[v..v]``.

    Args:
        shape: Shape to flatten, canonical or not.

    Returns:
        list[ContinuousRange]: Non-empty pieces in no particular order.

    Raises:
        ShapeError: The value is not a shape.

    """
    if shape.kind is RangeKind.EMPTY:
        return []
    if shape.kind is RangeKind.FULL:
        return [ContinuousRange.full()]
    if shape.kind is RangeKind.CONTINUOUS:
        return [] if shape.is_empty() else [shape]
    if shape.kind is RangeKind.SINGLE:
        return [ContinuousRange.point(shape.value)]
    if shape.kind is RangeKind.LIST:
        return [ContinuousRange.point(v) for v in shape.values]
    if shape.kind is RangeKind.COMPOSITE:
        pieces: list[ContinuousRange] = []
        for part in shape.parts:
            pieces.extend(flatten(part))
        return pieces
    msg = f"Not a range shape: {shape!r}"
    raise ShapeError(msg)


def _compare_pieces(a: ContinuousRange, b: ContinuousRange) -> int:
    cmp = compare_positions(a.lower.position(BoundSide.LOWER), b.lower.position(BoundSide.LOWER))
    if cmp:
        return cmp
    return compare_positions(a.upper.position(BoundSide.UPPER), b.upper.position(BoundSide.UPPER))


def sweep(pieces: Iterable[ContinuousRange]) -> list[ContinuousRange]:
    """Sort pieces and merge the ones that overlap or touch.

    Args:
        pieces: Continuous pieces in any order, empty pieces are dropped.

    Returns:
        list[ContinuousRange]: Sorted pieces, no two of them overlapping or adjacent.

    """
    ordered = sorted((piece for piece in pieces if not piece.is_empty()), key=cmp_to_key(_compare_pieces))
    merged: list[ContinuousRange] = []
    for piece in ordered:
        if merged and (merged[-1].overlaps(piece) or merged[-1].touches(piece)):
            merged[-1] = merged[-1].span(piece)
        else:
            merged.append(piece)
    log.debug("Merged %d pieces into %d", len(ordered), len(merged))
    return merged


def from_pieces(merged: list[ContinuousRange]) -> Shape:
    """Return the simplest shape for the output of sweep."""
    if not merged:
        return EmptyRange()
    if len(merged) == 1:
        piece = merged[0]
        if piece.is_full():
            return FullRange()
        if piece.is_single():
            return SingleValueRange(piece.lower.value)
        return piece
    if all(piece.is_single() for piece in merged):
        return ListRange(piece.lower.value for piece in merged)
    return CompositeRange(SingleValueRange(piece.lower.value) if piece.is_single() else piece for piece in merged)


def from_sorted_values(values: list[Any]) -> Shape:
    """Return the simplest shape for strictly increasing discrete values."""
    if not values:
        return EmptyRange()
    if len(values) == 1:
        return SingleValueRange(values[0])
    return ListRange(values)


def canonical(pieces: Iterable[ContinuousRange]) -> Shape:
    """Return the canonical shape covering the given pieces."""
    return from_pieces(sweep(pieces))


def simplify_shape(shape: Shape) -> Shape:
    """Return the canonical form of any shape.

    Empty continuous ranges become EmptyRange, ``[v..v]`` becomes a
    SingleValueRange, lists are sorted and deduplicated, composites are
    flattened, sorted and merged and collapse to a simpler shape when they can.
    """
    if shape.kind in (RangeKind.EMPTY, RangeKind.FULL):
        return shape
    if shape.kind is RangeKind.SINGLE:
        return shape
    if shape.kind is RangeKind.LIST:
        return from_sorted_values(shape.sorted_values())
    return canonical(flatten(shape))
