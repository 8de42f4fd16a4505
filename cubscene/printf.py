"""A small printf: %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TextIO

from cubscene.fdio import put_str

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int32(value: int) -> int:
    return ((value + 2**31) & _UINT_MASK) - 2**31


def hex_str(value: int, upper: bool = False) -> str:
    """Return the hexadecimal text of ``value`` taken as a 32-bit unsigned int."""
    return format(value & _UINT_MASK, "X" if upper else "x")


def pointer_str(value: int | None) -> str:
    """Return an address as ``0x`` followed by lower-case hex, or ``(nil)`` for 0."""
    address = 0 if value is None else value & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def unsigned_str(value: int) -> str:
    """Return the decimal text of ``value`` taken as a 32-bit unsigned int."""
    return str(value & _UINT_MASK)


def _char_str(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _char_str(_next_arg(args, spec))
    if spec == "s":
        text = _next_arg(args, spec)
        return "(null)" if text is None else str(text)
    if spec in ("d", "i"):
        return str(_as_int32(_next_arg(args, spec)))
    if spec == "p":
        return pointer_str(_next_arg(args, spec))
    if spec in ("x", "X"):
        return hex_str(_next_arg(args, spec), upper=spec == "X")
    if spec == "u":
        return unsigned_str(_next_arg(args, spec))
    # Unknown conversions, and a lone trailing '%', produce nothing.
    return ""


def cformat(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted arguments.

    Raises TypeError when a conversion has no argument left.
    """
    values = iter(args)
    chars = iter(fmt)
    pieces: list[str] = []
    for ch in chars:
        if ch == "%":
            pieces.append(_convert(next(chars, ""), values))
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = cformat(fmt, *args)
    put_str(text, stream)
    return len(text)