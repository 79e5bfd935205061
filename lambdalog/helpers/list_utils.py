from typing import Callable, Sequence, TypeVar

T = TypeVar("T")


def find_first_index(iterable: Sequence[T], predicate: Callable[[T], bool]) -> int | None:
    """Find the index of the first item in the iterable that matches the predicate"""
    for i, item in enumerate(iterable):
        if predicate(item):
            return i
    return None


def cycle_index(index: int, length: int, step: int) -> int:
    """Move an index by step positions, wrapping around both ends"""
    if length <= 0:
        return 0
    return (index + step) % length


def cycle_member(members: Sequence[T], current: T, step: int) -> T:
    """Get the member step positions away from current, wrapping around"""
    return members[cycle_index(members.index(current), len(members), step)]
