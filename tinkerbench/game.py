"""Game state, the per-frame tick and a text-mode main loop."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from tinkerbench.components import (
    BLACK,
    YELLOW,
    Player,
    Position,
    Renderable,
    Viewshed,
)
from tinkerbench.console import Console, to_cp437
from tinkerbench.map import MAP_HEIGHT, MAP_WIDTH, Dice, Map, draw_map
from tinkerbench.player import Key, player_input
from tinkerbench.visibility import update_visibility
from tinkerbench.world import World

TITLE = "Roguelike Tutorial"


@dataclass
class State:
    """Everything the game needs between frames."""

    world: World

    def run_systems(self) -> None:
        """Run every system once."""
        update_visibility(self.world)

    def tick(self, console: Console, key: Key | None) -> None:
        """Handle one frame: input, systems, then drawing into ``console``."""
        console.cls()
        player_input(self.world, key)
        self.run_systems()

        game_map = self.world.game_map
        if game_map is None:
            raise LookupError("the world has no map")
        draw_map(game_map, console)

        for _, pos, render in self.world.query(Position, Renderable):
            console.set(pos.x, pos.y, render.fg, render.bg, render.glyph)


def new_game(dice: Dice | None = None) -> State:
    """Generate a map and place the player in the centre of the first room."""
    game_map = Map.new_map_rooms_and_corridors(dice)
    player_x, player_y = game_map.rooms[0].center()
    world = World(game_map)
    world.spawn(
        Position(player_x, player_y),
        Renderable(glyph=to_cp437("@"), fg=YELLOW, bg=BLACK),
        Player(),
        Viewshed(visible_tiles=[], range=8, dirty=True),
    )
    return State(world)


def _parse_key(command: str) -> Key | None:
    try:
        return Key[command.upper()]
    except KeyError:
        return None


def _show(console: Console) -> None:
    print("\n".join(console.rows()))
    print()


def main(argv: list[str] | None = None) -> int:
    """Play in the terminal: one key name per input line, 'q' to quit."""
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument("--seed", type=int, default=None, help="map generator seed")
    args = parser.parse_args(argv)

    state = new_game(Dice(args.seed))
    console = Console(MAP_WIDTH, MAP_HEIGHT)
    state.tick(console, None)
    _show(console)

    for line in sys.stdin:
        command = line.strip().lower()
        if command in {"q", "quit"}:
            break
        state.tick(console, _parse_key(command))
        _show(console)
    return 0