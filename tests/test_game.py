import io

from tinkerbench.components import BLACK, YELLOW, Player, Position, Renderable, Viewshed
from tinkerbench.console import Console, to_cp437
from tinkerbench.game import State, main, new_game
from tinkerbench.map import Dice, Map, TileType
from tinkerbench.player import Key
from tinkerbench.world import World


def player_parts(state):
    (entity, _, pos), = state.world.query(Player, Position)
    return entity, pos


def small_state():
    game_map = Map.blank(5, 5)
    for y in range(1, 4):
        for x in range(1, 4):
            game_map.tiles[game_map.xy_idx(x, y)] = TileType.FLOOR
    world = World(game_map)
    pos = Position(2, 2)
    world.spawn(
        pos,
        Renderable(glyph=to_cp437("@"), fg=YELLOW, bg=BLACK),
        Player(),
        Viewshed(range=8),
    )
    return State(world), pos


def test_new_game_places_player_in_first_room():
    state = new_game(Dice(11))
    entity, pos = player_parts(state)
    assert (pos.x, pos.y) == state.world.game_map.rooms[0].center()
    viewshed = state.world.get(entity, Viewshed)
    assert viewshed.range == 8
    assert viewshed.dirty is True
    assert state.world.get(entity, Renderable).glyph == to_cp437("@")


def test_new_game_is_reproducible_with_seed():
    first = new_game(Dice(5)).world.game_map
    second = new_game(Dice(5)).world.game_map
    assert first.tiles == second.tiles
    assert first.rooms == second.rooms


def test_run_systems_reveals_player_tile():
    state = new_game(Dice(3))
    _, pos = player_parts(state)
    state.run_systems()
    game_map = state.world.game_map
    assert game_map.revealed_tiles[game_map.xy_idx(pos.x, pos.y)]


def test_tick_draws_player():
    state = new_game(Dice(3))
    console = Console(80, 50)
    state.tick(console, None)
    _, pos = player_parts(state)
    assert console.cell_at(pos.x, pos.y).char == "@"
    assert sum(row.count("@") for row in console.rows()) == 1


def test_tick_moves_player_and_redraws():
    state, pos = small_state()
    console = Console(5, 5)
    state.tick(console, Key.L)
    assert (pos.x, pos.y) == (3, 2)
    assert console.cell_at(3, 2).char == "@"
    assert console.cell_at(2, 2).char == "."
    assert console.cell_at(0, 0).char == "#"


def test_tick_into_wall_keeps_position():
    state, pos = small_state()
    console = Console(5, 5)
    state.tick(console, Key.L)
    state.tick(console, Key.L)
    assert (pos.x, pos.y) == (3, 2)


def test_main_reads_keys_until_quit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("l\nunknown\nq\nl\n"))
    assert main(["--seed", "7"]) == 0
    out = capsys.readouterr().out
    assert out.count("@") == 3