"""Player movement and keyboard handling."""

from __future__ import annotations

import enum

from tinkerbench.components import Player, Position, Viewshed
from tinkerbench.map import TileType
from tinkerbench.world import World


class Key(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    NUMPAD2 = "numpad2"
    NUMPAD4 = "numpad4"
    NUMPAD6 = "numpad6"
    NUMPAD8 = "numpad8"
    H = "h"
    J = "j"
    K = "k"
    L = "l"


_MOVES: dict[Key, tuple[int, int]] = {
    Key.LEFT: (-1, 0),
    Key.NUMPAD4: (-1, 0),
    Key.H: (-1, 0),
    Key.RIGHT: (1, 0),
    Key.NUMPAD6: (1, 0),
    Key.L: (1, 0),
    Key.UP: (0, -1),
    Key.NUMPAD8: (0, -1),
    Key.K: (0, -1),
    Key.DOWN: (0, 1),
    Key.NUMPAD2: (0, 1),
    Key.J: (0, 1),
}


def try_move_player(delta_x: int, delta_y: int, world: World) -> None:
    """Step every player by the delta unless a wall or the map edge is in the way."""
    game_map = world.game_map
    if game_map is None:
        raise LookupError("the world has no map")

    for _, _player, pos, viewshed in world.query(Player, Position, Viewshed):
        dest_x, dest_y = pos.x + delta_x, pos.y + delta_y
        if not game_map.in_bounds(dest_x, dest_y):
            continue
        if game_map.tiles[game_map.xy_idx(dest_x, dest_y)] is TileType.WALL:
            continue
        pos.x = min(game_map.width - 1, max(0, dest_x))
        pos.y = min(game_map.height - 1, max(0, dest_y))
        viewshed.dirty = True


def player_input(world: World, key: Key | None) -> None:
    """Apply the movement bound to ``key``; other keys and None do nothing."""
    move = _MOVES.get(key) if key is not None else None
    if move is not None:
        try_move_player(*move, world)