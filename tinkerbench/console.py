"""A character-cell console that the game draws into."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from tinkerbench.components import BLACK, RGB, WHITE


def to_cp437(ch: str) -> int:
    """Return the code page 437 index of ``ch``, or 0 if it has none."""
    try:
        encoded = ch.encode("cp437")
    except UnicodeEncodeError:
        return 0
    if len(encoded) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return encoded[0]


_BLANK_GLYPH = to_cp437(" ")


@dataclass(frozen=True)
class Cell:
    """One character cell: a glyph and its colours."""

    glyph: int = _BLANK_GLYPH
    fg: RGB = WHITE
    bg: RGB = BLACK

    @property
    def char(self) -> str:
        """The glyph as a text character."""
        return bytes([self.glyph]).decode("cp437")


class Console:
    """A fixed-size grid of cells."""

    def __init__(self, width: int = 80, height: int = 50) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("console dimensions must be positive")
        self.width = width
        self.height = height
        self._cells = [Cell()] * (width * height)

    def cls(self) -> None:
        """Clear every cell to a blank."""
        self._cells = [Cell()] * (self.width * self.height)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set(self, x: int, y: int, fg: RGB, bg: RGB, glyph: int) -> None:
        """Draw a glyph at (x, y); positions off the console are ignored."""
        if self._in_bounds(x, y):
            self._cells[y * self.width + x] = Cell(glyph, fg, bg)

    def cell_at(self, x: int, y: int) -> Cell:
        """Return the cell at (x, y)."""
        if not self._in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the console")
        return self._cells[y * self.width + x]

    def rows(self) -> list[str]:
        """Return the console contents as one string per row."""
        return list(self._iter_rows())

    def _iter_rows(self) -> Iterator[str]:
        for start in range(0, len(self._cells), self.width):
            yield "".join(cell.char for cell in self._cells[start : start + self.width])