# tinkerbench

Three small projects in one package: a text-mode roguelike core, a
fixed-column table to CSV converter, and a many-threads sleeping exercise.
It needs nothing beyond the Python standard library (3.10 or later).

## The roguelike core

An 80×50 dungeon of rooms joined by corridors, a player who walks through
it, and a field of view that reveals the map as the player explores.

- `tinkerbench.rect.Rect` – rooms: `Rect.from_size(x, y, w, h)`,
  `intersect` (true when two rectangles overlap or touch) and `center`.
- `tinkerbench.map.Dice` – a seedable random source with `range(low, high)`
  (high excluded) and `roll_dice(count, sides)`.
- `tinkerbench.map.Map` – the tile grid of `TileType.WALL` and
  `TileType.FLOOR`. `Map.blank(width, height)` is all wall;
  `Map.new_map_rooms_and_corridors(dice)` tries 30 random rooms with sides of
  6 to 9 tiles, keeps those that touch no earlier room, and links each kept
  room to the one before it with an L-shaped corridor. Pass a `Dice` to make
  the result repeatable.
- `tinkerbench.map.draw_map(game_map, console)` paints revealed tiles (`.`
  for floor, `#` for wall), greying out those not currently in view.
- `tinkerbench.components` – `Position`, `Renderable`, `Player`, `Viewshed`
  and the `RGB` colour type.
- `tinkerbench.world.World` – a minimal entity store: `spawn(*components)`
  returns an entity id, `get(entity, component_type)` and
  `query(*component_types)` yield `(entity, component, ...)` tuples.
- `tinkerbench.visibility` – `field_of_view(origin, radius, game_map)` casts
  lines to the edge of a square around `origin`, stopping at walls and at the
  radius; `update_visibility(world)` recomputes each dirty viewshed and marks
  the tiles the player sees as visible and revealed.
- `tinkerbench.player` – `player_input(world, key)` moves the player for a
  `Key`: arrows, `NUMPAD2/4/6/8` and the vi keys `H/J/K/L`. Walls and the map
  edge block movement (`try_move_player(delta_x, delta_y, world)`).
- `tinkerbench.console.Console` – the character grid the game draws onto,
  with `cls`, `set`, `cell_at` and `rows`; `to_cp437(ch)` gives a glyph code.
- `tinkerbench.game` – `new_game(dice)` builds a map and puts the player in
  the centre of the first room; `State.tick(console, key)` handles one frame.

```python
from tinkerbench.console import Console
from tinkerbench.game import new_game
from tinkerbench.map import Dice
from tinkerbench.player import Key

state = new_game(Dice(42))
console = Console()
state.tick(console, Key.RIGHT)
print("\n".join(console.rows()))
```

Play it in a terminal with:

```
tinkerbench-rogue --seed 42
```

Type one key name per line (`left`, `right`, `up`, `down`, `h`, `j`, `k`,
`l`, `numpad4`, …) and press Enter; the whole map is printed again after
each move. `q` or `quit` ends the game.

### What it does not do

There is no graphical window and no live keyboard handling: the game is
driven one line of input at a time and drawn as plain text, so the colours
held in each console cell are not shown. There are no monsters, items,
saving or loading.

## Fixed-column table to CSV

`tinkerbench.tocsv.insert_comma(line)` puts a comma at character positions
6, 24, 30, 41, 52, 72, 82, 94, 100 and 106 of a line and ends it with a
newline; a line shorter than 107 characters raises `ValueError`.
`convert(text)` applies it to a whole table, keeping the header line and
dropping the line just beneath it.

```
tinkerbench-tocsv ELEMENTS.NUMBR bodiesorbit.csv
```

Both arguments are optional and default to the names shown.

`tinkerbench.fileops` holds the small file helpers it uses:
`read_file_to_string`, `write_string_to_file` (returns bytes written),
`read_line`, `read_record` (the last line of a stream), `write_record` and
`print_file`.

## Sleepers

`tinkerbench.sleepers.run_sleepers(count, rounds, tick, out)` starts `count`
threads. Each sleeps `bad_hash(i)` microseconds, then `rounds` times `tick`
seconds, then writes `i,0` to `out` (standard output by default). It returns
the indices in the order the threads finished.

```
tinkerbench-sleepers --count 100 --rounds 10 --tick 0.01
```

The defaults (10,000 threads, 1,000 rounds of 0.01 s) take well over ten
seconds.

## Tests

```
pip install -e ".[test]"
pytest
```