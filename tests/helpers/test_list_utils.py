"""Tests for list helpers"""

import pytest

from lambdalog.helpers.list_utils import cycle_index, cycle_member, find_first_index


def test_find_first_index() -> None:
    """Test finding the first matching item"""
    # Assert
    assert find_first_index([1, 4, 6, 8], lambda x: x % 2 == 0) == 1
    assert find_first_index([1, 3], lambda x: x % 2 == 0) is None


@pytest.mark.parametrize(
    "index, length, step, expected",
    [
        (0, 5, 1, 1),
        (4, 5, 1, 0),
        (0, 5, -1, 4),
        (2, 5, -3, 4),
        (3, 0, 1, 0),
    ],
)
def test_cycle_index(index: int, length: int, step: int, expected: int) -> None:
    """Test that indexes wrap around both ends"""
    # Assert
    assert cycle_index(index, length, step) == expected


def test_cycle_member() -> None:
    """Test moving between members of a sequence"""
    # Arrange
    members = ["a", "b", "c"]

    # Assert
    assert cycle_member(members, "c", 1) == "a"
    assert cycle_member(members, "a", -1) == "c"
