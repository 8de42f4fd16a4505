"""Operations on mutable byte buffers: fill, search, compare and copy."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_span(buf: Buffer, offset: int, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative, got {offset}")
    if offset + n > len(buf):
        raise IndexError(
            f"{name} holds {len(buf)} bytes but {offset + n} are needed"
        )


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_span(buf, 0, n, "buffer")
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes.

    A request for zero elements or zero-sized elements yields a one-byte
    buffer, so the result is always a usable allocation.
    """
    if nmemb < 0 or size < 0:
        raise ValueError(f"element count and size must not be negative: {nmemb}, {size}")
    if nmemb == 0 or size == 0:
        return bytearray(1)
    return bytearray(nmemb * size)


def memchr(buf: Buffer, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` among the first ``n``.

    ``c`` is reduced to its low eight bits.  Returns None when no byte matches.
    """
    _check_span(buf, 0, n, "buffer")
    index = bytes(memoryview(buf)[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers as unsigned values.

    Returns the difference of the first differing pair of bytes, or 0.
    """
    _check_span(a, 0, n, "first buffer")
    _check_span(b, 0, n, "second buffer")
    for x, y in zip(memoryview(a)[:n], memoryview(b)[:n]):
        if x != y:
            return x - y
    return 0


def _copy(
    dest: bytearray, src: Buffer, n: int, dest_offset: int, src_offset: int
) -> bytearray:
    _check_span(dest, dest_offset, n, "destination")
    _check_span(src, src_offset, n, "source")
    dest[dest_offset:dest_offset + n] = bytes(memoryview(src)[src_offset:src_offset + n])
    return dest


def memcpy(
    dest: bytearray,
    src: Buffer,
    n: int,
    dest_offset: int = 0,
    src_offset: int = 0,
) -> bytearray:
    """Copy ``n`` bytes from ``src`` into ``dest`` and return ``dest``.

    Overlapping regions of the same buffer are copied as if through a
    temporary, so the result is always the original source bytes.
    """
    return _copy(dest, src, n, dest_offset, src_offset)


def memmove(
    dest: bytearray,
    src: Buffer,
    n: int,
    dest_offset: int = 0,
    src_offset: int = 0,
) -> bytearray:
    """Copy ``n`` bytes from ``src`` into ``dest``, safe for overlapping regions."""
    return _copy(dest, src, n, dest_offset, src_offset)


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low eight bits of ``c``."""
    _check_span(buf, 0, n, "buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf