"""Tags of the range shapes."""

# Copyright 2016-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

import enum


class RangeKind(enum.Enum):
    """The closed set of shapes a Range can take."""

    EMPTY = "empty"
    FULL = "full"
    CONTINUOUS = "continuous"
    SINGLE = "single"
    LIST = "list"
    COMPOSITE = "composite"
