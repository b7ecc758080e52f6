"""Test ranges of pint quantities"""

# Copyright 2016-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

import pint
import pytest

from rangealgebra import Range, RangeKind
from rangealgebra.quantity_range import Units, magnitudes, to_units, with_units


def km(magnitude: float) -> pint.Quantity:
    return Units().quantity(magnitude, "km")


def m(magnitude: float) -> pint.Quantity:
    return Units().quantity(magnitude, "m")


def test_units_share_one_registry() -> None:
    """Test every Units instance hands out units from the same registry"""
    assert Units().meter == Units().meter
    assert Units().quantity(1, "km") == Units().quantity(1000, Units().meter)


def test_quantities_in_mixed_units() -> None:
    """Test bounds in different units are compared by value"""
    r = Range.closed(m(0), m(500)) | Range.closed(km(0.4), km(1))

    assert r.kind is RangeKind.CONTINUOUS
    assert m(700) in r
    assert km(1.5) not in r
    assert Range.closed(km(1), km(2)).overlaps(Range.open_closed(m(0), m(1000)))
    assert not Range.closed(km(1), km(2)).overlaps(Range.open(m(0), m(1000)))


def test_to_units() -> None:
    """Test converting a range of quantities to another unit"""
    converted = to_units(Range.closed(km(1), km(2)), "m")

    assert str(converted.shape.lower.value.units) == "meter"
    assert converted == Range.closed(m(1000), m(2000))


def test_magnitudes() -> None:
    """Test stripping units from a range of quantities"""
    r = Range.composite([Range.at_most(km(1)), Range.single(km(3))])

    assert magnitudes(r, "m") == Range.composite([Range.at_most(1000), Range.single(3000)])
    assert magnitudes(Range.empty(), "m").is_empty()


def test_with_units() -> None:
    """Test attaching a unit to a range of numbers"""
    r = with_units(Range.closed_open(1, 3), "s")

    assert Units().quantity(2000, "ms") in r
    assert Units().quantity(3, "s") not in r
    assert with_units(Range.full(), "s").is_full()


def test_incompatible_units() -> None:
    """Test converting to a unit of another dimension"""
    with pytest.raises(pint.DimensionalityError):
        to_units(Range.single(m(1)), "s")
