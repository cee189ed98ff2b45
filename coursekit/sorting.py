"""In-place bubble, insertion and quick sort."""

from __future__ import annotations

from typing import MutableSequence, Optional


def bubble_sort(array: MutableSequence[int]) -> None:
    """Sort ``array`` in place by repeated passes of adjacent swaps."""
    swapped = True
    while swapped:
        swapped = False
        for i in range(len(array) - 1):
            if array[i] > array[i + 1]:
                array[i], array[i + 1] = array[i + 1], array[i]
                swapped = True


def insert_sort(array: MutableSequence[int]) -> None:
    """Sort ``array`` in place by insertion."""
    for unsorted in range(1, len(array)):
        item = array[unsorted]
        pos = unsorted - 1
        while pos >= 0 and item < array[pos]:
            array[pos + 1] = array[pos]
            pos -= 1
        array[pos + 1] = item


def partition(array: MutableSequence[int], low: int, high: int) -> int:
    """Partition ``array[low..high]`` around its last element; return the pivot's index."""
    pivot = array[high]
    i = low - 1
    for j in range(low, high):
        if array[j] < pivot:
            i += 1
            array[i], array[j] = array[j], array[i]
    array[i + 1], array[high] = array[high], array[i + 1]
    return i + 1


def quick_sort(
    array: MutableSequence[int], low: int = 0, high: Optional[int] = None
) -> None:
    """Sort ``array[low..high]`` in place; ``high`` defaults to the last index."""
    if high is None:
        high = len(array) - 1
    if low >= high:
        return
    pivot_index = partition(array, low, high)
    quick_sort(array, low, pivot_index - 1)
    quick_sort(array, pivot_index + 1, high)