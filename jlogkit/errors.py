"""Reporting of failures that happen inside handlers."""

from __future__ import annotations

import sys
import threading
import traceback
from enum import IntEnum
from typing import TextIO

__all__ = ["ErrorCode", "ErrorManager"]


class ErrorCode(IntEnum):
    """Kinds of failure a handler may report."""

    GENERIC_FAILURE = 0
    WRITE_FAILURE = 1
    FLUSH_FAILURE = 2
    CLOSE_FAILURE = 3
    OPEN_FAILURE = 4
    FORMAT_FAILURE = 5


class ErrorManager:
    """Writes the first reported error to a stream and ignores the rest."""

    PREFIX = "jlogkit.ErrorManager: "

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()
        self.reported = False

    @property
    def stream(self) -> TextIO:
        """The stream errors go to; standard error unless one was given."""
        return self._stream if self._stream is not None else sys.stderr

    def error(
        self,
        msg: str | None,
        exc: BaseException | None,
        code: int = ErrorCode.GENERIC_FAILURE,
    ) -> None:
        """Report a failure; only the first call writes anything."""
        with self._lock:
            if self.reported:
                return
            self.reported = True
            text = f"{self.PREFIX}{int(code)}"
            if msg is not None:
                text = f"{text}: {msg}"
            out = self.stream
            print(text, file=out)
            if exc is not None:
                traceback.print_exception(type(exc), exc, exc.__traceback__, file=out)