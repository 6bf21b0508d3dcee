"""
Pytest configuration and fixtures for walkpwd tests.
"""

import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from walkpwd.config import clear_config_cache
from walkpwd.vault import VaultLifecycle


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def walkpwd_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point WALKPWD_HOME at a fresh, not yet created, directory."""
    for key in list(os.environ):
        if key.startswith("WALKPWD_"):
            monkeypatch.delenv(key)

    home = temp_dir / "walkpwd"
    monkeypatch.setenv("WALKPWD_HOME", str(home))
    clear_config_cache()

    yield home.resolve()

    clear_config_cache()


@pytest.fixture
def initialized_vault(walkpwd_home: Path) -> VaultLifecycle:
    """Provide an initialized, empty vault in the mock home."""
    lifecycle = VaultLifecycle(walkpwd_home)
    lifecycle.init()
    return lifecycle

