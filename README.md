# cubscene

`cubscene` reads the identifier header of a `.cub` scene file, the kind of
file a simple raycasting game uses to describe its wall textures and its
floor and ceiling colours. It checks that header and reports the texture
paths it found.

## Installing

```
pip install .
```

## The scene file

The file name must end in `.cub`. Its first non-blank lines must give the
six identifiers in exactly this order:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` are followed by a path to a texture file. The
  value is the first whitespace-free word after the identifier, and it must
  name a file that can be opened for reading.
- `F` (floor) and `C` (ceiling) are followed by colour text that must split
  on commas into exactly three non-empty pieces and must not end in a comma.
  Each piece is read as a leading decimal integer (text without digits reads
  as 0); the values are not range-checked.

Blank lines before and between identifiers are skipped. An identifier that is
missing or out of order, a texture file that cannot be opened, or malformed
colour text makes the file invalid. Reading stops after `C`; anything that
follows is not looked at.

## Command line

```
cubscene maps/level.cub
```

On success the four texture paths are printed:

```
texture path north: ./textures/north.xpm
texture path south: ./textures/south.xpm
texture path east: ./textures/east.xpm
texture path west: ./textures/west.xpm
```

On failure the command writes `Error!` followed by a one-line reason to
standard error and exits with status 1. It expects exactly one argument, the
scene file. The reasons it gives are:

- `Choose a map` / `Too many arguments, only enter map name!`
- `Wrong extension!`
- `File could not be opened`
- `Identifier not found or not in order`
- `Error reading file` (the file ended before all six identifiers)
- `Texture path invalid`
- `Invalid character on RGB` / `RGB error`

## From Python

```python
from cubscene.loader import parse_file

game = parse_file("maps/level.cub")
print(game.textures.north)
print(game.floor, game.ceiling)
```

- `cubscene.loader`: `parse_file(path)` returns a `cubscene.scene.Game`;
  `init_program(argv)` checks a full argument vector (program name first)
  with `check_arguments` and `check_extension`, then loads the file.
- `cubscene.scene`: the `Game`, `Textures` and `Color` dataclasses.
- `cubscene.identifiers`: `read_identifiers(lines, game)`, `parse_rgb`,
  `validate_rgb_string` and `validate_path`.
- `cubscene.linereader`: `read_lines(stream, buffer_size=50)` yields the
  lines of a text stream, each keeping its trailing newline.
- `cubscene.errors`: `CubError`, raised for every invalid input, and
  `report_error(message, stream=None)`, which writes the `Error!` report.
- `cubscene.cli`: `main(argv=None)`, the command above; it returns the exit
  status.

Smaller helpers used by the loader, or usable on their own:
`cubscene.chars` (character classes, `atoi`, `itoa`), `cubscene.strsearch`
and `cubscene.strtools` (C-style string search, comparison, trimming and
splitting on NUL-terminated text), `cubscene.memory` (byte-buffer fill,
search, compare and copy), `cubscene.linkedlist` (`LinkedList` and `Node`),
`cubscene.fdio` (writing to text streams) and `cubscene.printf` (`cformat`
and `printf` for `%c %s %d %i %u %x %X %p %%`).

## What it does not do

`cubscene` only reads and checks the six identifiers. It does not read the
map grid that follows them (`Game.map_grid` stays empty), does not check the
map's walls or the player's start, does not load the texture images, and
does not open a window or draw anything.

## Running the tests

```
pip install .[test]
pytest
```