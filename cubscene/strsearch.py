"""Length and search functions for NUL-terminated text."""

from __future__ import annotations


def _terminated(s: str) -> str:
    """Return the text before the first NUL character."""
    return s.split("\0", 1)[0]


def _char(c: str | int) -> str:
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: str | int) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator at index ``strlen(s)``.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator at index ``strlen(s)``.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> int | None:
    """Find ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` matches at index 0.  Returns None when not found.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    haystack = _terminated(big)
    needle = _terminated(little)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strstr(s: str, to_find: str) -> int | None:
    """Find the first occurrence of ``to_find`` that is followed by more text.

    An occurrence ending exactly at the end of ``s`` is not reported.  An
    empty ``to_find`` matches at index 0 of a non-empty ``s``.  Returns None
    when nothing qualifies.
    """
    text = _terminated(s)
    needle = _terminated(to_find)
    index = text.find(needle)
    if index < 0 or index + len(needle) >= len(text):
        return None
    return index