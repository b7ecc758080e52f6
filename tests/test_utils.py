"""Tests for the ordering helpers"""

# Copyright 2018-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

import datetime

from rangealgebra.utils import compare_values, is_strictly_increasing, max_by, min_by, sorted_unique


def test_compare_values() -> None:
    """Test compare_values function"""
    test_values = [
        (1, 2, -1),
        (2, 1, 1),
        (2, 2, 0),
        (1, 1.0, 0),
        ("a", "b", -1),
        (datetime.date(2022, 1, 2), datetime.date(2022, 1, 1), 1),
    ]
    for a, b, result in test_values:
        assert compare_values(a, b) == result


def test_sorted_unique() -> None:
    """Test sorted_unique function"""
    assert sorted_unique([]) == []
    assert sorted_unique([3, 1, 2, 3, 1]) == [1, 2, 3]
    assert sorted_unique(["b", "a", "b"]) == ["a", "b"]
    assert sorted_unique([[2], [1], [2]]) == [[1], [2]]


def test_is_strictly_increasing() -> None:
    """Test is_strictly_increasing function"""
    assert is_strictly_increasing([])
    assert is_strictly_increasing([1])
    assert is_strictly_increasing([1, 2, 5])
    assert not is_strictly_increasing([1, 1, 2])
    assert not is_strictly_increasing([2, 1])


def test_min_by_and_max_by() -> None:
    """Test min_by and max_by functions"""
    by_length = lambda a, b: compare_values(len(a), len(b))  # noqa: E731
    assert min_by("abc", "de", by_length) == "de"
    assert max_by("abc", "de", by_length) == "abc"
    assert min_by("ab", "cd", by_length) == "ab"
    assert max_by("ab", "cd", by_length) == "ab"
