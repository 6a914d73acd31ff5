"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker in ("unit", "uri", "config", "log", "open", "handler", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def qmpo_home(tmp_path: Path, monkeypatch) -> Path:
    """Point QMPO_HOME at an empty directory under tmp_path.

    Returns:
        Path to the qmpo home directory
    """
    home = tmp_path / ".qmpo"
    monkeypatch.setenv("QMPO_HOME", str(home))
    return home


@pytest.fixture
def write_config(qmpo_home: Path):
    """Return a function writing a config dict to <qmpo_home>/config.json."""

    def _write(data) -> Path:
        qmpo_home.mkdir(parents=True, exist_ok=True)
        config_path = qmpo_home / "config.json"
        config_path.write_text(json.dumps(data), encoding="utf-8")
        return config_path

    return _write


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
