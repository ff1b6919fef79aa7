"""The dungeon map: tiles, room generation and drawing."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field

from tinkerbench.components import BLACK, RGB
from tinkerbench.console import Console, to_cp437
from tinkerbench.rect import Rect

MAP_WIDTH = 80
MAP_HEIGHT = 50
MAX_ROOMS = 30
MIN_SIZE = 6
MAX_SIZE = 10


class TileType(enum.Enum):
    WALL = "wall"
    FLOOR = "floor"


class Dice:
    """A seedable random number source with dice-style helpers."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def range(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high)``."""
        if high <= low:
            raise ValueError(f"empty range {low}..{high}")
        return self._rng.randrange(low, high)

    def roll_dice(self, count: int, sides: int) -> int:
        """Return the total of ``count`` rolls of a ``sides``-sided die."""
        if sides < 1:
            raise ValueError("a die needs at least one side")
        if count < 0:
            raise ValueError("cannot roll a negative number of dice")
        return sum(self._rng.randint(1, sides) for _ in range(count))


@dataclass
class Map:
    """A rectangular grid of tiles with the rooms carved into it."""

    width: int
    height: int
    tiles: list[TileType] = field(default_factory=list)
    rooms: list[Rect] = field(default_factory=list)
    revealed_tiles: list[bool] = field(default_factory=list)
    visible_tiles: list[bool] = field(default_factory=list)

    @classmethod
    def blank(cls, width: int, height: int) -> Map:
        """Return a map filled entirely with walls."""
        size = width * height
        return cls(
            width=width,
            height=height,
            tiles=[TileType.WALL] * size,
            revealed_tiles=[False] * size,
            visible_tiles=[False] * size,
        )

    def xy_idx(self, x: int, y: int) -> int:
        """Return the tile index of (x, y)."""
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_opaque(self, idx: int) -> bool:
        return self.tiles[idx] is TileType.WALL

    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def apply_room(self, room: Rect) -> None:
        """Carve the interior of ``room`` into floor."""
        for y in range(room.y1 + 1, room.y2 + 1):
            for x in range(room.x1 + 1, room.x2 + 1):
                self.tiles[self.xy_idx(x, y)] = TileType.FLOOR

    def _carve(self, idx: int) -> None:
        if 0 < idx < self.width * self.height:
            self.tiles[idx] = TileType.FLOOR

    def apply_horizontal_tunnel(self, x1: int, x2: int, y: int) -> None:
        for x in range(min(x1, x2), max(x1, x2) + 1):
            self._carve(self.xy_idx(x, y))

    def apply_vertical_tunnel(self, y1: int, y2: int, x: int) -> None:
        for y in range(min(y1, y2), max(y1, y2) + 1):
            self._carve(self.xy_idx(x, y))

    @classmethod
    def new_map_rooms_and_corridors(cls, dice: Dice | None = None) -> Map:
        """Make a map of random non-overlapping rooms joined by corridors."""
        dice = dice if dice is not None else Dice()
        game_map = cls.blank(MAP_WIDTH, MAP_HEIGHT)

        for _ in range(MAX_ROOMS):
            w = dice.range(MIN_SIZE, MAX_SIZE)
            h = dice.range(MIN_SIZE, MAX_SIZE)
            x = dice.roll_dice(1, game_map.width - w - 1) - 1
            y = dice.roll_dice(1, game_map.height - h - 1) - 1
            new_room = Rect.from_size(x, y, w, h)
            if any(new_room.intersect(other) for other in game_map.rooms):
                continue

            game_map.apply_room(new_room)
            if game_map.rooms:
                new_x, new_y = new_room.center()
                prev_x, prev_y = game_map.rooms[-1].center()
                if dice.range(0, 2) == 1:
                    game_map.apply_horizontal_tunnel(prev_x, new_x, prev_y)
                    game_map.apply_vertical_tunnel(prev_y, new_y, new_x)
                else:
                    game_map.apply_vertical_tunnel(prev_y, new_y, prev_x)
                    game_map.apply_horizontal_tunnel(prev_x, new_x, new_y)
            game_map.rooms.append(new_room)

        return game_map


_FLOOR_FG = RGB.from_f32(0.0, 0.5, 0.5)
_WALL_FG = RGB.from_f32(0.0, 1.0, 0.0)


def draw_map(game_map: Map, console: Console) -> None:
    """Draw every revealed tile; tiles out of sight are drawn in grey."""
    cells = zip(game_map.tiles, game_map.revealed_tiles, game_map.visible_tiles)
    for idx, (tile, revealed, visible) in enumerate(cells):
        if not revealed:
            continue
        if tile is TileType.FLOOR:
            glyph, fg = to_cp437("."), _FLOOR_FG
        else:
            glyph, fg = to_cp437("#"), _WALL_FG
        if not visible:
            fg = fg.to_greyscale()
        y, x = divmod(idx, game_map.width)
        console.set(x, y, fg, BLACK, glyph)