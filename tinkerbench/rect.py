"""Axis-aligned rectangles used for room layout."""

from __future__ import annotations

from dataclasses import dataclass


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its corner coordinates, edges inclusive."""

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> Rect:
        """Build a rectangle from its top-left corner and its size."""
        return cls(x1=x, y1=y, x2=x + w, y2=y + h)

    def intersect(self, other: Rect) -> bool:
        """Return True if this rectangle overlaps or touches ``other``."""
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def center(self) -> tuple[int, int]:
        """Return the integer centre point of the rectangle."""
        return _trunc_div(self.x1 + self.x2, 2), _trunc_div(self.y1 + self.y2, 2)