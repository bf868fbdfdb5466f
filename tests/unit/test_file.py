"""Tests for ConfigFile."""

from pathlib import Path

import pytest

from pyflatcfg import Config, ConfigFile, InvalidKey

CONTENTS = """
# This is a comment

# An integer value
answer = 42

# A float value
pi = 3.14
# A boolean value
is_active = true

# A string value
quotes = Alea iacta est\\nEt tu, Brute?"""


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "cfg-test.cfg"
    path.write_text(CONTENTS, encoding="utf-8")
    return path


def test_load(config_path: Path) -> None:
    config = ConfigFile.load(config_path, "utf-8")
    assert isinstance(config, Config)
    assert config.path == str(config_path)
    assert config.get_int("answer") == 42
    assert config.get_float("pi") == 3.14
    assert config.get_bool("is_active") is True
    assert config.get_string("quotes") == "Alea iacta est\nEt tu, Brute?"
    assert config.comments == (
        "This is a comment",
        "An integer value",
        "A float value",
        "A boolean value",
        "A string value",
    )


def test_persist(config_path: Path) -> None:
    config = ConfigFile.load(config_path, "utf-8")
    config.set_int("answer", 314)
    config.persist()

    assert config_path.read_text(encoding="utf-8") == CONTENTS.replace(
        "answer = 42", "answer = 314"
    )
    again = ConfigFile.load(config_path, "utf-8")
    assert again.get_int("answer") == 314
    assert again.comments == config.comments


def test_new_file(tmp_path: Path) -> None:
    path = tmp_path / "new.cfg"
    config = ConfigFile(path, "utf-8")
    assert len(config) == 0
    config.set_bool("enabled", False)
    config.persist()
    assert path.read_text(encoding="utf-8") == "enabled = false"


def test_carriage_return_survives_reload(tmp_path: Path) -> None:
    path = tmp_path / "cr.cfg"
    config = ConfigFile(path, "utf-8")
    config.set_string("k", "a\r\nb")
    config.set_string("tail", "x\ry")
    config.persist()
    assert path.read_bytes() == b"k = a\r\\nb\ntail = x\ry"

    again = ConfigFile.load(path, "utf-8")
    assert again.lines == config.lines
    assert again.get_string("k") == "a\r\nb"
    assert again.get_string("tail") == "x\ry"


def test_carriage_return_in_key_rejected(tmp_path: Path) -> None:
    config = ConfigFile(tmp_path / "cr.cfg", "utf-8")
    with pytest.raises(InvalidKey):
        config.set_string("x\ry", "value")
    assert config.lines == ()


def test_load_missing(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        ConfigFile.load(tmp_path / "nope.cfg")


def test_repr(config_path: Path) -> None:
    config = ConfigFile.load(config_path, "utf-8")
    assert repr(config).startswith(f'<ConfigFile "{config_path}" {{ .lines = ')
