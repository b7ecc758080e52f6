"""Exceptions raised by rangealgebra."""

# Copyright 2016-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.


class RangeError(Exception):
    """Base class for all errors"""


class BoundError(RangeError):
    """A bound could not be built from the given value"""


class ShapeError(RangeError):
    """A value is not one of the known range shapes"""
