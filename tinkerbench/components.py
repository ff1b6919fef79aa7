"""Entity components and the colour type they use."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RGB:
    """A colour with channels in the range 0.0 to 1.0."""

    r: float
    g: float
    b: float

    @classmethod
    def from_f32(cls, r: float, g: float, b: float) -> RGB:
        """Build a colour from floating-point channels."""
        return cls(float(r), float(g), float(b))

    def to_greyscale(self) -> RGB:
        """Return the grey of the same perceived brightness."""
        linear = self.r * 0.2126 + self.g * 0.7152 + self.b * 0.0722
        return RGB(linear, linear, linear)


YELLOW = RGB(1.0, 1.0, 0.0)
BLACK = RGB(0.0, 0.0, 0.0)
WHITE = RGB(1.0, 1.0, 1.0)


@dataclass
class Position:
    """Where an entity stands on the map."""

    x: int
    y: int


@dataclass
class Renderable:
    """How an entity is drawn."""

    glyph: int
    fg: RGB
    bg: RGB


@dataclass
class Player:
    """Marks the entity controlled by the player."""


@dataclass
class Viewshed:
    """What an entity can see, and whether that needs recomputing."""

    visible_tiles: list[tuple[int, int]] = field(default_factory=list)
    range: int = 8
    dirty: bool = True