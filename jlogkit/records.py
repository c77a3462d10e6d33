"""The record passed from loggers to handlers."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

from .levels import Level

__all__ = ["LogRecord"]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_sequence = itertools.count()
_sequence_lock = threading.Lock()


def _next_sequence() -> int:
    with _sequence_lock:
        return next(_sequence)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class LogRecord:
    """One logging event together with its context."""

    level: Level
    message: str | None
    parameters: Sequence[Any] = ()
    thrown: BaseException | None = None
    logger_name: str | None = None
    resource_bundle: Mapping[str, str] | None = None
    resource_bundle_name: str | None = None
    source_class_name: str | None = None
    source_method_name: str | None = None
    thread_id: int = field(default_factory=threading.get_ident)
    instant: datetime = field(default_factory=_now)
    sequence_number: int = field(default_factory=_next_sequence)

    def __post_init__(self) -> None:
        if self.level is None:
            raise TypeError("record level must not be None")
        if self.parameters is None:
            self.parameters = ()

    @property
    def millis(self) -> int:
        """Event time as milliseconds since the epoch."""
        return (self.instant - _EPOCH) // timedelta(milliseconds=1)

    @millis.setter
    def millis(self, value: int) -> None:
        self.instant = _EPOCH + timedelta(milliseconds=value)