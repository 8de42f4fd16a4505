"""Error type and error reporting for scene loading."""

from __future__ import annotations

import sys
from typing import TextIO

SUCCESS = 0
ERROR = 1


class CubError(Exception):
    """Raised when a scene description or command line is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def report_error(message: str | CubError, stream: TextIO | None = None) -> int:
    """Write an error report to the stream (standard error by default).

    Returns the failure status code.
    """
    target = sys.stderr if stream is None else stream
    target.write(f"Error!\n{message}\n")
    return ERROR