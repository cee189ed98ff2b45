"""Array reversal and two-dimensional matrix helpers."""

from __future__ import annotations

from typing import MutableSequence, Sequence


def reverse_array(array: MutableSequence[int]) -> None:
    """Reverse ``array`` in place."""
    array[:] = array[::-1]


def format_array(array: Sequence[int]) -> str:
    """Render each value followed by two spaces, ending with a newline."""
    return "".join(f"{value}  " for value in array) + "\n"


def swap_rows(matrix: list[list[int]], x: int, y: int) -> None:
    """Swap rows ``x`` and ``y`` of ``matrix`` in place.

    Raises IndexError when either index is outside the matrix.
    """
    rows = len(matrix)
    if x < 0 or y < 0 or x >= rows or y >= rows:
        raise IndexError("exchange row index out of bound")
    matrix[x], matrix[y] = matrix[y], matrix[x]


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of ``matrix`` as a new list of rows."""
    return [list(column) for column in zip(*matrix)]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render values right-aligned in width 5, one row per line, then a blank line."""
    lines = "".join(
        "".join(f"{value:5d} " for value in row) + "\n" for row in matrix
    )
    return lines + "\n"