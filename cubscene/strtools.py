"""Comparison, copying, slicing, trimming, splitting and mapping of text.

Every function treats its text arguments as NUL-terminated: anything after
the first NUL character is ignored.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice

from cubscene.strsearch import strlen


def _text(s: str) -> str:
    """Return the text before the first NUL character."""
    return s[:strlen(s)]


def _check_count(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _compare(a: str, b: str, limit: int | None) -> int:
    pairs = zip(_text(a) + "\0", _text(b) + "\0")
    if limit is not None:
        pairs = islice(pairs, limit)
    for x, y in pairs:
        if x != y:
            return ord(x) - ord(y)
        if x == "\0":
            break
    return 0


def strcmp(a: str, b: str) -> int:
    """Compare two texts character by character.

    Returns 0 when they are equal, otherwise the code-point difference of the
    first differing pair, counting the terminator of the shorter text as 0.
    """
    return _compare(a, b, None)


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most the first ``n`` characters of two texts."""
    _check_count(n, "n")
    return _compare(a, b, n)


def strndup(s: str, n: int) -> str:
    """Return a copy of at most the first ``n`` characters of ``s``."""
    _check_count(n, "n")
    return _text(s)[:n]


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return _text(a) + _text(b)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text, which holds at most ``size - 1`` characters, and
    the full length of ``src``; a length not below ``size`` means the copy was
    truncated.
    """
    _check_count(size, "size")
    text = _text(src)
    if size == 0:
        return "", len(text)
    return text[:size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` inside a buffer of ``size`` characters.

    Returns the resulting text and the length the caller tried to create.
    When ``size`` does not exceed the length of ``dst`` nothing is appended
    and the reported length is ``size`` plus the length of ``src``.
    """
    _check_count(size, "size")
    head = _text(dst)
    tail = _text(src)
    if size <= len(head):
        return head, size + len(tail)
    return head + tail[:size - len(head) - 1], len(head) + len(tail)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` beginning at ``start``.

    A start beyond the end of the text yields an empty string.
    """
    _check_count(start, "start")
    _check_count(length, "length")
    text = _text(s)
    if start > len(text):
        return ""
    return text[start:start + length]


def strtrim(s: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``s``."""
    return _text(s).strip(_text(chars))


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces between separators."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in _text(s).split(sep) if piece]


def striteri(
    s: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` for each character of ``s`` up to a NUL.

    ``s`` is a mutable sequence of characters; where ``func`` returns a
    character, it replaces the one at that index.
    """
    for index in range(len(s)):
        ch = s[index]
        if ch == "\0":
            break
        replacement = func(index, ch)
        if replacement is not None:
            s[index] = replacement


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return the text built from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(_text(s)))