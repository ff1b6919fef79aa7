"""Field of view and the system that keeps viewsheds up to date."""

from __future__ import annotations

import math
from collections.abc import Iterator

from tinkerbench.components import Player, Position, Viewshed
from tinkerbench.map import Map
from tinkerbench.world import World


def _line(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _perimeter(cx: int, cy: int, radius: int) -> set[tuple[int, int]]:
    points: set[tuple[int, int]] = set()
    for x in range(cx - radius, cx + radius + 1):
        points.add((x, cy - radius))
        points.add((x, cy + radius))
    for y in range(cy - radius, cy + radius + 1):
        points.add((cx - radius, y))
        points.add((cx + radius, y))
    return points


def field_of_view(
    origin: tuple[int, int], radius: int, game_map: Map
) -> list[tuple[int, int]]:
    """Return the tiles visible from ``origin`` within ``radius``, sorted."""
    if radius < 0:
        raise ValueError("radius must not be negative")
    ox, oy = origin
    visible: set[tuple[int, int]] = set()
    for tx, ty in _perimeter(ox, oy, radius):
        for x, y in _line(ox, oy, tx, ty):
            if not game_map.in_bounds(x, y):
                break
            if math.hypot(x - ox, y - oy) > radius:
                break
            visible.add((x, y))
            if game_map.is_opaque(game_map.xy_idx(x, y)):
                break
    return sorted(visible)


def update_visibility(world: World) -> None:
    """Recompute dirty viewsheds; the player's sight reveals map tiles."""
    game_map = world.game_map
    if game_map is None:
        raise LookupError("the world has no map")

    for entity, viewshed, pos in world.query(Viewshed, Position):
        if not viewshed.dirty:
            continue
        viewshed.dirty = False
        viewshed.visible_tiles = [
            (x, y)
            for x, y in field_of_view((pos.x, pos.y), viewshed.range, game_map)
            if game_map.in_bounds(x, y)
        ]

        if world.get(entity, Player) is not None:
            game_map.visible_tiles = [False] * len(game_map.visible_tiles)
            for x, y in viewshed.visible_tiles:
                idx = game_map.xy_idx(x, y)
                game_map.revealed_tiles[idx] = True
                game_map.visible_tiles[idx] = True