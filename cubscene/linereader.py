"""Reading a text stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

BUFFER_SIZE = 50


def read_lines(stream: TextIO, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield the lines of ``stream``, each with its trailing newline.

    The stream is read in chunks of ``buffer_size`` characters and only as far
    as needed for the next line.  A final line without a newline is yielded
    as it is; an empty stream yields nothing.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")
    pending = ""
    while True:
        newline = pending.find("\n")
        if newline >= 0:
            yield pending[:newline + 1]
            pending = pending[newline + 1:]
            continue
        chunk = stream.read(buffer_size)
        if not chunk:
            if pending:
                yield pending
            return
        pending += chunk