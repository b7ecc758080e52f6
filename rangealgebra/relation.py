"""How two continuous ranges relate to each other (Allen's interval algebra)."""

# Copyright 2016-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

import enum


class RangesRelation(enum.Enum):
    """Relation of a range A to a range B.

    ``MEETS`` means A ends exactly where B starts without sharing a value
    (``[1..5)`` and ``[5..10]``), ``OVERLAPS`` means they share at least one
    value and A starts first.
    """

    STRICTLY_BEFORE = "strictly_before"
    STRICTLY_AFTER = "strictly_after"
    MEETS = "meets"
    IS_MET = "is_met"
    OVERLAPS = "overlaps"
    IS_OVERLAPPED = "is_overlapped"
    STARTS = "starts"
    IS_STARTED = "is_started"
    STRICTLY_CONTAINS = "strictly_contains"
    IS_STRICTLY_CONTAINED = "is_strictly_contained"
    FINISHES = "finishes"
    IS_FINISHED = "is_finished"
    EQUAL = "equal"

    def intersects(self) -> bool:
        """Return True if both ranges share at least one value."""
        return self not in _NOT_INTERSECTING

    def disjoint(self) -> bool:
        """Return True if the ranges share no value."""
        return not self.intersects()

    def touches(self) -> bool:
        """Return True if the ranges are adjacent and their union has no hole."""
        return self in (RangesRelation.MEETS, RangesRelation.IS_MET)

    def contains(self) -> bool:
        """Return True if A contains B."""
        return self in (
            RangesRelation.EQUAL,
            RangesRelation.STRICTLY_CONTAINS,
            RangesRelation.IS_STARTED,
            RangesRelation.IS_FINISHED,
        )

    def start_ordering(self) -> int:
        """Return the ordering of A's lower bound against B's lower bound."""
        return _ORDERINGS[self][0]

    def end_ordering(self) -> int:
        """Return the ordering of A's upper bound against B's upper bound."""
        return _ORDERINGS[self][1]


_NOT_INTERSECTING = frozenset(
    {
        RangesRelation.STRICTLY_BEFORE,
        RangesRelation.STRICTLY_AFTER,
        RangesRelation.MEETS,
        RangesRelation.IS_MET,
    }
)

# (start ordering, end ordering)
_ORDERINGS = {
    RangesRelation.STRICTLY_BEFORE: (-1, -1),
    RangesRelation.STRICTLY_AFTER: (1, 1),
    RangesRelation.MEETS: (-1, -1),
    RangesRelation.IS_MET: (1, 1),
    RangesRelation.OVERLAPS: (-1, -1),
    RangesRelation.IS_OVERLAPPED: (1, 1),
    RangesRelation.STARTS: (0, -1),
    RangesRelation.IS_STARTED: (0, 1),
    RangesRelation.STRICTLY_CONTAINS: (-1, 1),
    RangesRelation.IS_STRICTLY_CONTAINED: (1, -1),
    RangesRelation.FINISHES: (1, 0),
    RangesRelation.IS_FINISHED: (-1, 0),
    RangesRelation.EQUAL: (0, 0),
}
