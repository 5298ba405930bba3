# Cardboard Pirates

Two pirate ships share one keyboard and fight until one of them sinks. A
round ends when a ship's health drops to zero, and the surviving ship scores
a point. The match ends after three rounds, or sooner when one player is two
points ahead.

## Installing and starting

```
pip install .
cardboard-pirates
```

The `cardboard-pirates` command opens a 1280×768 window and shows the menu.
It takes no options besides `--help`.

## Assets

The game reads its images, sounds, maps and fonts from an assets directory
laid out as `images/`, `sounds/`, `maps/` and `fonts/`. By default this is
`../assets`, relative to the working directory. Set the
`CARDBOARD_PIRATES_ASSETS` environment variable to use another location.
`cardboard_pirates.settings.asset_path(kind, name)` gives the full path of
each file. `kind` is an `AssetKind` member or one of `"images"`, `"sounds"`,
`"maps"` or `"fonts"`. Any other kind raises `ValueError`.

Images, fonts and sound effects are loaded once and then cached by
`cardboard_pirates.resources.resource_manager()`. A file that cannot be
loaded raises `cardboard_pirates.resources.ResourceError`, and so does a
missing map or music file.

## Controls

| Action        | Red ship | Blue ship   |
|---------------|----------|-------------|
| Thrust        | `W`      | `Up`        |
| Turn left     | `A`      | `Left`      |
| Turn right    | `D`      | `Right`     |
| Fire cannon   | `S`      | `Down`      |

In the menu, press `Enter` or click *Play* to start. `Escape` or *Quit*
closes the game. The two buttons in the lower-left corner turn the music and
the sound effects on and off. When a match ends, the winner is shown. Press
`Enter` or click *Restart* to play again, or press `Escape` or click *Quit*
to leave. Quitting ends the program with exit status 1.

## Rules

- A cannon ball that hits the other ship takes 10 health.
- When the ships ram each other, they are pushed apart. Both lose 1 health,
  at most once every 200 ms.
- Each ship can fire at most once every half second.
- Ships stay inside the window.
- Land tiles that border open water block the ships and stop cannon balls.
- Round *n* is played on `map<n>.txt`. The first round uses `map1.txt`.

## Maps

A map is a text file with one line per row of 64×64 tiles. The window holds
20 tiles across and 12 rows down. Every tile is two characters. `00` is
open water, and any other id draws the image `tile_<id>.png`. A tile that
has open water directly above, below, left or right of it becomes a solid
collider.

`cardboard_pirates.tilemap.parse_layout(lines)` reads a layout into
`TileSpec` entries. Each entry holds the tile's centre `x`, `y`, its
`tile_id` and whether it is `solid`, so you can check a map without opening
a window.

## Using the pieces

Some of the game logic works without a display:

- `cardboard_pirates.collider.Collider(x, y, w, h, angle)` is a rectangle
  rotated by `angle` degrees. `is_colliding` tests two colliders with the
  separating axis theorem. `resolve_against` pushes only the caller out of
  the other shape, and `resolve_mutual` pushes both apart by half the
  overlap each. `thrust_forward`, `rotate_left` and `rotate_right` move it
  the way a ship moves.
- `cardboard_pirates.game.Match` keeps the score of a best-of-three match.
  `record_round(red_alive)` returns the winning `ShipColor`, `is_over()`
  tells whether the match has ended, `restart()` resets the score, and
  `map_name` gives the map file for the current round.

## Running the tests

```
pip install ".[test]"
pytest
```