"""Linear and binary search over an inclusive index range."""

from __future__ import annotations

from typing import Optional, Sequence


def linear_search(array: Sequence[int], l: int, r: int, key: int) -> Optional[int]:
    """Index of ``key`` in ``array[l..r]``, or None if absent."""
    for index in range(l, r + 1):
        if array[index] == key:
            return index
    return None


def binary_search(array: Sequence[int], l: int, r: int, key: int) -> Optional[int]:
    """Iterative binary search of sorted ``array[l..r]``; None if absent."""
    low, high = l, r
    while low <= high:
        mid = (low + high) // 2
        if key == array[mid]:
            return mid
        if key > array[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search_rec(
    array: Sequence[int], l: int, r: int, key: int
) -> Optional[int]:
    """Recursive binary search of sorted ``array[l..r]``; None if absent."""
    if l > r:
        return None
    mid = (l + r) // 2
    if key == array[mid]:
        return mid
    if key > array[mid]:
        return binary_search_rec(array, mid + 1, r, key)
    return binary_search_rec(array, l, mid - 1, key)


def format_range(array: Sequence[int], l: int, r: int) -> str:
    """Render ``array[l..r]`` as space-terminated values and a newline."""
    return "".join(f"{value} " for value in array[l : r + 1]) + "\n"