"""Logging levels and the registry of levels known by name and value."""

from __future__ import annotations

import re
import threading
from collections import defaultdict

__all__ = [
    "Level",
    "parse",
    "find_level",
    "OFF",
    "SEVERE",
    "WARNING",
    "INFO",
    "CONFIG",
    "FINE",
    "FINER",
    "FINEST",
    "ALL",
    "STANDARD_LEVELS",
    "DEFAULT_BUNDLE",
]

DEFAULT_BUNDLE = "sun.util.logging.resources.logging"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?\d+")


class _Registry:
    """Thread-safe index of every level created so far."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._by_name: dict[str, list[Level]] = defaultdict(list)
        self._by_value: dict[int, list[Level]] = defaultdict(list)

    def add(self, level: Level) -> None:
        with self._lock:
            self._by_name[level.name].append(level)
            self._by_value[level.value].append(level)

    def by_name(self, name: str) -> Level | None:
        with self._lock:
            found = self._by_name.get(name)
            return found[0] if found else None

    def by_value(self, value: int) -> Level | None:
        with self._lock:
            found = self._by_value.get(value)
            return found[0] if found else None

    def by_localized_name(self, name: str) -> Level | None:
        with self._lock:
            for levels in self._by_name.values():
                for level in levels:
                    if level.localized_name == name:
                        return level
            return None

    @property
    def lock(self) -> threading.RLock:
        return self._lock


_registry = _Registry()


class Level:
    """A named logging level with an integer value used for ordering."""

    def __init__(self, name: str, value: int, resource_bundle_name: str | None = None) -> None:
        if name is None:
            raise TypeError("level name must not be None")
        self.name = name
        self.value = int(value)
        self.resource_bundle_name = resource_bundle_name
        _registry.add(self)

    @property
    def localized_name(self) -> str:
        """The display name of the level; no message catalogues are loaded."""
        return self.name

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        return self.value

    def __lt__(self, other: Level) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: Level) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: Level) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: Level) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value >= other.value

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Level({self.name!r}, {self.value})"


def _parse_int32(text: str) -> int | None:
    if not _INTEGER.fullmatch(text):
        return None
    number = int(text)
    if number < _INT_MIN or number > _INT_MAX:
        return None
    return number


def _lookup(name: str) -> Level | None:
    if name is None:
        raise TypeError("level name must not be None")
    with _registry.lock:
        level = _registry.by_name(name)
        if level is not None:
            return level
        number = _parse_int32(name)
        if number is not None:
            level = _registry.by_value(number)
            if level is not None:
                return level
            Level(name, number)
            return _registry.by_value(number)
        return _registry.by_localized_name(name)


def parse(name: str) -> Level:
    """Return the level named ``name`` or with that integer value.

    An integer that matches no known level creates a new level.
    Raises ValueError when the name is neither.
    """
    level = _lookup(name)
    if level is None:
        raise ValueError(f'Bad level "{name}"')
    return level


def find_level(name: str) -> Level | None:
    """Like :func:`parse`, but return None for an unknown name."""
    return _lookup(name)


OFF = Level("OFF", _INT_MAX, DEFAULT_BUNDLE)
SEVERE = Level("SEVERE", 1000, DEFAULT_BUNDLE)
WARNING = Level("WARNING", 900, DEFAULT_BUNDLE)
INFO = Level("INFO", 800, DEFAULT_BUNDLE)
CONFIG = Level("CONFIG", 700, DEFAULT_BUNDLE)
FINE = Level("FINE", 500, DEFAULT_BUNDLE)
FINER = Level("FINER", 400, DEFAULT_BUNDLE)
FINEST = Level("FINEST", 300, DEFAULT_BUNDLE)
ALL = Level("ALL", _INT_MIN, DEFAULT_BUNDLE)

STANDARD_LEVELS = (OFF, SEVERE, WARNING, INFO, CONFIG, FINE, FINER, FINEST, ALL)

Level.OFF = OFF
Level.SEVERE = SEVERE
Level.WARNING = WARNING
Level.INFO = INFO
Level.CONFIG = CONFIG
Level.FINE = FINE
Level.FINER = FINER
Level.FINEST = FINEST
Level.ALL = ALL