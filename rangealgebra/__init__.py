"""Algebra of ranges over any totally ordered domain."""

# Copyright 2016-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from rangealgebra.bound import Bound, BoundKind, BoundOrdering, BoundSide, compare_bounds
from rangealgebra.composite_range import CompositeRange, EmptyRange, FullRange
from rangealgebra.continuous_range import ContinuousRange
from rangealgebra.exceptions import BoundError, RangeError, ShapeError
from rangealgebra.kind import RangeKind
from rangealgebra.list_range import ListRange, SingleValueRange
from rangealgebra.range import Range
from rangealgebra.relation import RangesRelation

__all__ = [
    "Bound",
    "BoundError",
    "BoundKind",
    "BoundOrdering",
    "BoundSide",
    "CompositeRange",
    "ContinuousRange",
    "EmptyRange",
    "FullRange",
    "ListRange",
    "Range",
    "RangeError",
    "RangeKind",
    "RangesRelation",
    "ShapeError",
    "SingleValueRange",
    "compare_bounds",
]
