"""Reading the texture and colour identifiers at the top of a scene file."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import takewhile

from cubscene.chars import atoi, is_space
from cubscene.errors import CubError
from cubscene.scene import Color, Game
from cubscene.strtools import split, strtrim

_SPACES = " \f\n\r\t\v"
_TEXTURE_FIELDS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}
IDENTIFIERS = ("NO", "SO", "WE", "EA", "F", "C")


def validate_rgb_string(text: str) -> str:
    """Check RGB text and return it unchanged.

    Text that ends in a comma is rejected.
    """
    if text.endswith(","):
        raise CubError("Invalid character on RGB")
    return text


def parse_rgb(text: str) -> Color:
    """Parse ``r,g,b`` text into a colour; exactly three values are required."""
    validate_rgb_string(text)
    parts = split(text, ",")
    if len(parts) != 3:
        raise CubError("RGB error")
    r, g, b = (atoi(part) for part in parts)
    return Color(r, g, b)


def validate_path(path: str) -> str:
    """Check that a texture file can be opened and return its trimmed path."""
    trimmed = strtrim(path, " \t\n")
    try:
        with open(path, "rb"):
            pass
    except OSError:
        raise CubError("Texture path invalid") from None
    return trimmed


def _assign(game: Game, identifier: str, value: str) -> None:
    if identifier == "F":
        game.floor = parse_rgb(value)
    elif identifier == "C":
        game.ceiling = parse_rgb(value)
    else:
        setattr(game.textures, _TEXTURE_FIELDS[identifier], validate_path(value))


def _read_identifier(lines: Iterator[str], identifier: str, game: Game) -> None:
    for line in lines:
        stripped = line.lstrip(_SPACES)
        if not stripped:
            continue
        if not stripped.startswith(identifier):
            raise CubError("Identifier not found or not in order")
        rest = stripped[len(identifier):].lstrip(_SPACES)
        value = "".join(takewhile(lambda ch: not is_space(ch), rest))
        _assign(game, identifier, value)
        return
    raise CubError("Error reading file")


def read_identifiers(lines: Iterable[str], game: Game) -> Game:
    """Read NO, SO, WE, EA, F and C, in that order, into ``game``.

    Blank lines between identifiers are skipped.  Only the lines needed are
    consumed from ``lines``.  Returns ``game``.
    """
    source = iter(lines)
    for identifier in IDENTIFIERS:
        _read_identifier(source, identifier, game)
    return game