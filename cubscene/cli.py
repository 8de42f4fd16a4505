"""Command-line entry point: load a scene and report its texture paths."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from cubscene.errors import ERROR, SUCCESS, CubError, report_error
from cubscene.loader import init_program

PROGRAM = "cub3D"


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named on the command line and print its texture paths.

    ``argv`` holds the arguments after the program name.  Returns the exit
    status.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        game = init_program([PROGRAM, *args])
    except CubError as error:
        return report_error(error)
    textures = game.textures
    print(f"texture path north: {textures.north}")
    print(f"texture path south: {textures.south}")
    print(f"texture path east: {textures.east}")
    print(f"texture path west: {textures.west}")
    return SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())


__all__ = ["main", "ERROR", "SUCCESS"]