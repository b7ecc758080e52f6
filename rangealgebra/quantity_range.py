"""Ranges of pint quantities"""

# Copyright 2016-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

import pint

from rangealgebra.range import Range


class Units:
    """Shared unit registry.

    Quantities can only be compared when they come from the same registry, so
    every range of quantities should be built from this one.
    """

    _instance = None

    def __init__(self) -> None:
        """Initialize the Units class."""
        if not Units._instance:
            Units._instance = pint.UnitRegistry()

    def __getattr__(self, name: str) -> pint.Unit:
        """Get a unit."""
        return getattr(Units._instance, name)

    def quantity(self, magnitude: float, unit: str | pint.Unit) -> pint.Quantity:
        """Create a quantity from the shared registry.

        Args:
            magnitude: Numerical value.
            unit: Unit name or unit.

        Returns:
            pint.Quantity: Created quantity.

        """
        return Units._instance.Quantity(magnitude, unit)  # type: ignore[union-attr]


def to_units(quantity_range: Range, unit: str | pint.Unit) -> Range:
    """Convert every value of a range of quantities to the given unit.

    Args:
        quantity_range: Range over pint quantities.
        unit: Target unit.

    Returns:
        Range: The same range expressed in unit.

    Raises:
        pint.DimensionalityError: A value cannot be converted to unit.

    """
    return quantity_range.map_values(lambda q: q.to(unit))


def magnitudes(quantity_range: Range, unit: str | pint.Unit) -> Range:
    """Strip the units of a range of quantities after converting them to unit."""
    return quantity_range.map_values(lambda q: q.m_as(unit))


def with_units(number_range: Range, unit: str | pint.Unit) -> Range:
    """Attach a unit to every value of a range of plain numbers."""
    units = Units()
    return number_range.map_values(lambda m: units.quantity(m, unit))
