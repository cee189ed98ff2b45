"""A mutable point on the integer grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Point:
    """A point with integer coordinates, at the origin by default."""

    x: int = 0
    y: int = 0

    def shift(self, val: int) -> None:
        """Add ``val`` to both coordinates in place."""
        self.x += val
        self.y += val

    def __iadd__(self, val: int) -> "Point":
        self.shift(val)
        return self

    def show_position(self) -> str:
        """Render the coordinates as ``x, y`` and a newline."""
        return f"{self.x}, {self.y}\n"