"""Reading and checking the identifier header of .cub raycaster scene files."""

__version__ = "0.1.0"
__all__ = ["__version__"]