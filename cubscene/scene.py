"""The data describing a loaded scene and the window it is drawn in."""

from __future__ import annotations

from dataclasses import dataclass, field

WIDTH = 1920
HEIGHT = 1080
FOV = 60
HFOV = 30


@dataclass
class Color:
    """An RGB colour."""

    r: int = 0
    g: int = 0
    b: int = 0


@dataclass
class Textures:
    """Paths of the wall textures for each compass direction."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None

    def clear(self) -> None:
        """Forget every texture path."""
        self.north = self.south = self.west = self.east = None


@dataclass
class Game:
    """Everything read from a scene description."""

    direction: str = ""
    dir_x: int = 0
    dir_y: int = 0
    ceiling: Color = field(default_factory=Color)
    floor: Color = field(default_factory=Color)
    textures: Textures = field(default_factory=Textures)
    map_grid: list[str] = field(default_factory=list)