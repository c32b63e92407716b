"""Shared test fixtures — configs, isolated working directories."""

from __future__ import annotations

from pathlib import Path

import pytest

from comelint.config.schema import ValidationConfig


@pytest.fixture
def default_config() -> ValidationConfig:
    return ValidationConfig()


@pytest.fixture
def strict_config() -> ValidationConfig:
    """Every prohibition switched on, conventional-ish length bounds."""
    return ValidationConfig(
        prohibit_merge=True,
        prohibit_revert=True,
        prohibit_wip=True,
        prohibit_multiline=True,
        min_length=5,
        max_length=72,
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep COMELINT_* from the developer's shell out of the tests."""
    for name in ("COMELINT_MIN_LENGTH", "COMELINT_MAX_LENGTH", "COMELINT_REGEXP", "COMELINT_FORMAT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """An empty working directory with no .comelint.toml."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
