"""Checking the command line and loading a scene file."""

from __future__ import annotations

from collections.abc import Sequence

from cubscene.errors import CubError
from cubscene.identifiers import read_identifiers
from cubscene.linereader import read_lines
from cubscene.scene import Game

EXTENSION = ".cub"


def check_extension(name: str) -> str:
    """Return ``name`` if it ends in ``.cub``."""
    if len(name) < len(EXTENSION) or name[-len(EXTENSION):] != EXTENSION:
        raise CubError("Wrong extension!")
    return name


def check_arguments(args: Sequence[str]) -> str:
    """Check a full argument vector (program name first) and return the map name."""
    if len(args) < 2:
        raise CubError("Choose a map")
    if len(args) > 2:
        raise CubError("Too many arguments, only enter map name!")
    return check_extension(args[1])


def parse_file(path: str) -> Game:
    """Read the identifiers of the scene file at ``path`` into a new game."""
    try:
        handle = open(path, encoding="utf-8", errors="surrogateescape")
    except OSError:
        raise CubError("File could not be opened") from None
    with handle:
        return read_identifiers(read_lines(handle), Game())


def init_program(argv: Sequence[str]) -> Game:
    """Check the argument vector and load the scene it names."""
    return parse_file(check_arguments(argv))