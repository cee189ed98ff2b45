"""N-queens solved by recursive backtracking."""

from __future__ import annotations

from typing import Callable, Optional

Board = list[list[int]]


def is_safe(board: Board, row: int, col: int) -> bool:
    """Whether a queen at ``board[row][col]`` is unattacked by queens in rows above."""
    size = len(board)
    if any(board[i][col] == 1 for i in range(row)):
        return False
    for i, j in zip(range(row, -1, -1), range(col, -1, -1)):
        if board[i][j] == 1:
            return False
    for i, j in zip(range(row, -1, -1), range(col, size)):
        if board[i][j] == 1:
            return False
    return True


def format_board(board: Board) -> str:
    """Render each cell as `` d ``, one row per line, followed by two blank lines."""
    rows = "".join("".join(f" {cell} " for cell in row) + "\n" for row in board)
    return rows + "\n\n"


def solve(
    board: Board, row: int = 0, trace: Optional[Callable[[str], None]] = None
) -> bool:
    """Place queens on rows ``row`` onwards; return True once every row holds one.

    ``trace``, when given, receives a rendering of the board after each
    placement and after each backtrack.
    """
    size = len(board)
    if row == size:
        return True
    for col in range(size):
        if not is_safe(board, row, col):
            continue
        board[row][col] = 1
        if trace is not None:
            trace("Current play \n" + format_board(board))
        if solve(board, row + 1, trace):
            return True
        board[row][col] = 0
        if trace is not None:
            trace("Back track: \n" + format_board(board))
    return False


def solve_queens(n: int) -> Optional[Board]:
    """Return the first solution on an ``n`` by ``n`` board, or None if there is none."""
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[0] * n for _ in range(n)]
    return board if solve(board) else None