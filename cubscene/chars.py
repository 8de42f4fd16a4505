"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

_SPACE_CODES = frozenset(map(ord, " \f\n\r\t\v"))
_ATOI_SKIP = frozenset(range(ord("\t"), ord("\r") + 1)) | {ord(" ")}


def _code(c: str | int) -> int:
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: str | int) -> bool:
    """True for space, form feed, newline, carriage return, tab and vertical tab."""
    return _code(c) in _SPACE_CODES


def _shift_case(c: str | int, low: str, high: str, delta: int) -> str | int:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: str | int) -> str | int:
    """Map an ASCII upper-case letter to lower case; other values pass through."""
    return _shift_case(c, "A", "Z", 32)


def to_upper(c: str | int) -> str | int:
    """Map an ASCII lower-case letter to upper case; other values pass through."""
    return _shift_case(c, "a", "z", -32)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit.  Text without digits yields 0.
    """
    pos = 0
    while pos < len(text) and ord(text[pos]) in _ATOI_SKIP:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    end = pos
    while end < len(text) and is_digit(text[end]):
        end += 1
    return sign * int(text[pos:end]) if end > pos else 0


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    return str(n)