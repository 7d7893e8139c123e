"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from codefence.config import Config


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Iterator[Path]:
    """Point config discovery at an empty location, reset the singleton, keep output plain."""

    config_file = tmp_path_factory.mktemp("config") / "config.toml"
    monkeypatch.setenv("CODEFENCE_CONFIG", str(config_file))
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
    Config.reset()
    yield config_file
    Config.reset()


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Return a canonical temporary working directory."""

    return tmp_path.resolve()
