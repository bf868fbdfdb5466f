"""Shared fixtures for pyflatcfg tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from pyflatcfg import CfgParser, Config

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def testdata() -> Path:
    """Directory of the sample config files."""
    return TESTDATA


@pytest.fixture
def load_config() -> Callable[[str], Config]:
    """Parse `testdata/<name>.cfg`."""

    def _load(name: str) -> Config:
        return CfgParser(TESTDATA / f"{name}.cfg", "utf-8").read()

    return _load


@pytest.fixture
def golden() -> Callable[[str], str]:
    """Read `testdata/<name>.golden` without its final line ending."""

    def _golden(name: str) -> str:
        return (TESTDATA / f"{name}.golden").read_text(encoding="utf-8").rstrip("\n")

    return _golden
