"""Expansion of log file name patterns into concrete paths."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

__all__ = ["generate"]


def _is_setuid() -> bool:
    getuid = getattr(os, "getuid", None)
    geteuid = getattr(os, "geteuid", None)
    if getuid is None or geteuid is None:
        return False
    return getuid() != geteuid()


def _temp_dir() -> Path:
    try:
        return Path(tempfile.gettempdir())
    except OSError:
        return Path.home()


def _join(result: Path | None, piece: Path) -> Path:
    return piece if result is None else result / piece


def generate(pattern: str, count: int = 1, generation: int = 0, unique: int = 0) -> Path:
    """Turn a file name pattern into a path.

    The pattern may contain ``%t`` (temporary directory), ``%h`` (home
    directory), ``%g`` (generation number), ``%u`` (unique number) and
    ``%%`` (a literal percent sign); the letters are case-insensitive.
    When ``count`` is above one and there is no ``%g``, ``.<generation>``
    is appended; when ``unique`` is above zero and there is no ``%u``,
    ``.<unique>`` is appended.  Raises OSError if ``%h`` is used while
    the real and effective user ids differ.
    """
    path = Path(pattern)
    anchor = path.anchor
    names = path.parts[1:] if anchor else path.parts

    result: Path | None = None
    word: list[str] = []
    saw_generation = False
    saw_unique = False
    have_previous = False

    for elem in names:
        if have_previous:
            result = _join(result, Path("".join(word)))
        word = []
        ix = 0
        length = len(elem)
        while ix < length:
            ch = elem[ix]
            ix += 1
            ch2 = elem[ix].lower() if ix < length else ""
            if ch == "%":
                if ch2 == "t":
                    result = _temp_dir()
                    ix += 1
                    word = []
                    continue
                if ch2 == "h":
                    result = Path.home()
                    if _is_setuid():
                        raise OSError("can't use %h in set UID program")
                    ix += 1
                    word = []
                    continue
                if ch2 == "g":
                    word.append(str(generation))
                    saw_generation = True
                    ix += 1
                    continue
                if ch2 == "u":
                    word.append(str(unique))
                    saw_unique = True
                    ix += 1
                    continue
                if ch2 == "%":
                    word.append("%")
                    ix += 1
                    continue
            word.append(ch)
        have_previous = True

    if count > 1 and not saw_generation:
        word.append(f".{generation}")
    if unique > 0 and not saw_unique:
        word.append(f".{unique}")

    name = "".join(word)
    if name:
        result = _join(result, Path(name))
    elif result is None:
        result = Path("")

    if anchor:
        return Path(anchor) / result
    return result