"""Algebraic properties checked on generated ranges"""

# Copyright 2016-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from hypothesis import given, settings
from hypothesis import strategies as st

from rangealgebra import (
    Bound,
    CompositeRange,
    ContinuousRange,
    EmptyRange,
    FullRange,
    ListRange,
    Range,
    RangeKind,
    SingleValueRange,
)
from rangealgebra.composite_range import flatten
from rangealgebra.utils import is_strictly_increasing

values = st.integers(min_value=-5, max_value=5)

bounds = st.one_of(
    st.builds(Bound.finite, values, st.booleans()),
    st.sampled_from([Bound.negative_infinity(), Bound.positive_infinity()]),
)

# Shapes are built directly, so crossed bounds, unsorted lists and
# overlapping composite parts all show up.
simple_shapes = st.one_of(
    st.just(EmptyRange()),
    st.just(FullRange()),
    st.builds(ContinuousRange, bounds, bounds),
    st.builds(SingleValueRange, values),
    st.builds(ListRange, st.lists(values, max_size=5)),
)

shapes = st.one_of(simple_shapes, st.builds(CompositeRange, st.lists(simple_shapes, max_size=4)))

ranges = st.builds(Range, shapes)

# Half steps probe open and closed bounds on integers.
PROBES = [x / 2 for x in range(-14, 15)]


@settings(deadline=None)
@given(ranges, ranges)
def test_membership_of_operations(a: Range, b: Range) -> None:
    """Test every operation agrees with membership of probe values"""
    union = a | b
    intersection = a & b
    difference = a - b
    for v in PROBES:
        assert (v in union) == (v in a or v in b)
        assert (v in intersection) == (v in a and v in b)
        assert (v in difference) == (v in a and v not in b)


@settings(deadline=None)
@given(ranges, ranges)
def test_commutativity(a: Range, b: Range) -> None:
    """Test union, intersection and overlaps are commutative"""
    assert a | b == b | a
    assert a & b == b & a
    assert a.overlaps(b) == b.overlaps(a)


@settings(deadline=None)
@given(ranges)
def test_identity_and_absorption(a: Range) -> None:
    """Test empty and full ranges as operands"""
    assert (a | Range.empty()).identical(a.simplify())
    assert (a & Range.full()).identical(a.simplify())
    assert (a | Range.full()).kind is RangeKind.FULL
    assert (a & Range.empty()).kind is RangeKind.EMPTY


@settings(deadline=None)
@given(ranges)
def test_simplify_is_idempotent(a: Range) -> None:
    """Test simplifying twice changes nothing"""
    once = a.simplify()
    assert once.simplify().identical(once)


@settings(deadline=None)
@given(ranges)
def test_self_difference(a: Range) -> None:
    """Test a range minus itself is empty"""
    assert (a - a).kind is RangeKind.EMPTY


@settings(deadline=None)
@given(ranges, ranges)
def test_containment_consistency(a: Range, b: Range) -> None:
    """Test contains_range agrees with contains_value and intersection"""
    if a.contains_range(b):
        assert all(v in a for v in PROBES if v in b)
        assert a & b == b.simplify()
    else:
        assert not (b - a).is_empty()


@settings(deadline=None)
@given(ranges, ranges)
def test_overlaps_agrees_with_intersection(a: Range, b: Range) -> None:
    """Test overlaps is true exactly when the intersection is not empty"""
    assert a.overlaps(b) == (not (a & b).is_empty())


@settings(deadline=None)
@given(ranges, ranges, ranges)
def test_distribution(a: Range, b: Range, c: Range) -> None:
    """Test intersection distributes over union"""
    assert a & (b | c) == (a & b) | (a & c)


@settings(deadline=None)
@given(ranges, ranges)
def test_difference_is_intersection_with_complement(a: Range, b: Range) -> None:
    """Test a - b equals a & (full - b)"""
    assert a - b == a & (Range.full() - b)


@settings(deadline=None)
@given(ranges)
def test_canonical_form(a: Range) -> None:
    """Test simplify returns the simplest shape with sorted, separated parts"""
    shape = a.simplify().shape
    if shape.kind is RangeKind.CONTINUOUS:
        assert not shape.is_empty()
        assert not shape.is_single()
        assert not shape.is_full()
    elif shape.kind is RangeKind.LIST:
        assert len(shape.values) >= 2
        assert is_strictly_increasing(list(shape.values))
    elif shape.kind is RangeKind.COMPOSITE:
        pieces = flatten(shape)
        assert len(pieces) >= 2
        assert not all(piece.is_single() for piece in pieces)
        for first, second in zip(pieces, pieces[1:]):
            assert first.compare(second).disjoint()
            assert not first.touches(second)
            assert first.compare(second).start_ordering() < 0
