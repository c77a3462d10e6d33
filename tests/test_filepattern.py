import os
import tempfile
from pathlib import Path

import pytest

from jlogkit.filepattern import generate


def test_plain_name_is_unchanged():
    assert generate("app.log", 1, 0, 0) == Path("app.log")


def test_generation_placeholder():
    assert generate("app%g.log", 3, 2, 0) == Path("app2.log")


def test_generation_appended_when_missing():
    assert generate("app.log", 3, 2, 0) == Path("app.log.2")


def test_generation_not_appended_for_single_file():
    assert generate("app.log", 1, 5, 0) == Path("app.log")


def test_unique_placeholder_and_suffix():
    assert generate("app%u.log", 1, 0, 4) == Path(f"app{4}.log")
    assert generate("app.log", 1, 0, 4) == Path(f"app.log.{4}")


def test_unique_zero_adds_nothing():
    assert generate("app.log", 1, 0, 0) == generate("app%u.log", 1, 0, 0).with_name("app.log")


def test_generation_then_unique_suffix_order():
    result = generate("app.log", 2, 1, 3)
    assert result.name == f"app.log.{1}.{3}"


def test_percent_escape():
    assert generate("a%%b.log", 1, 0, 0) == Path("a%b.log")


def test_unknown_escape_kept_literally():
    assert generate("a%xb.log", 1, 0, 0) == Path("a%xb.log")


def test_placeholders_are_case_insensitive():
    assert generate("app%G.log", 3, 1, 0) == generate("app%g.log", 3, 1, 0)
    assert generate("app%U.log", 1, 0, 2) == generate("app%u.log", 1, 0, 2)


def test_directories_are_kept():
    assert generate(os.path.join("logs", "app%g.log"), 2, 1, 0) == Path("logs") / f"app{1}.log"


def test_tmp_dir_placeholder():
    result = generate("%t/app.log", 1, 0, 0)
    assert result == Path(tempfile.gettempdir()) / "app.log"


def test_home_placeholder(monkeypatch):
    monkeypatch.setattr(os, "getuid", lambda: 1000, raising=False)
    monkeypatch.setattr(os, "geteuid", lambda: 1000, raising=False)
    result = generate("%h/java%u.log", 1, 0, 0)
    assert result == Path.home() / f"java{0}.log"


def test_home_in_setuid_program_raises(monkeypatch):
    monkeypatch.setattr(os, "getuid", lambda: 1000, raising=False)
    monkeypatch.setattr(os, "geteuid", lambda: 0, raising=False)
    with pytest.raises(OSError, match="set UID"):
        generate("%h/app.log", 1, 0, 0)


def test_absolute_pattern_keeps_root(tmp_path):
    pattern = str(tmp_path / "app%g.log")
    result = generate(pattern, 2, 1, 0)
    assert result.is_absolute()
    assert result == tmp_path / f"app{1}.log"


def test_distinct_generations_give_distinct_paths():
    paths = {generate("app%g.log", 5, g, 0) for g in range(5)}
    assert len(paths) == 5


def test_distinct_unique_numbers_give_distinct_paths():
    paths = {generate("app.log", 1, 0, u) for u in range(1, 6)}
    assert len(paths) == 5


def test_empty_pattern():
    assert generate("", 1, 0, 0) == Path("")