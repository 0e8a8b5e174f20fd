"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external processes")
    config.addinivalue_line("markers", "integration: tests that exercise the CLI end to end")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid unitgen configuration dict for testing.

    Uses the noop backend so no test ever talks to a real service manager.
    """
    return {
        "control": {
            "type": "noop",
            "data": {
                "unit_dir": "units",
            },
        },
        "log": {
            "level": "INFO",
        },
    }


def definition_dict() -> dict:
    """A service definition exercising every section."""
    return {
        "name": "app",
        "unit": {
            "description": "My App",
            "after": "network.target",
        },
        "service": {
            "type": "simple",
            "exec_start": "/usr/bin/app --serve",
            "restart": "on-failure",
            "restart_sec": "5",
            "user": "app",
        },
        "install": {
            "wanted_by": "multi-user.target",
        },
    }


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a copy of the minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def unitgen_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up UNITGEN_HOME with a minimal config file.

    Returns:
        Path to the unitgen home directory (tmp_path)
    """
    monkeypatch.setenv("UNITGEN_HOME", str(tmp_path))
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(minimal_config_dict))
    return tmp_path.resolve()


@pytest.fixture
def empty_home(tmp_path: Path, monkeypatch) -> Path:
    """UNITGEN_HOME pointing at a directory without a config file."""
    home = tmp_path / "empty"
    home.mkdir()
    monkeypatch.setenv("UNITGEN_HOME", str(home))
    return home


@pytest.fixture
def definition_file(tmp_path: Path) -> Path:
    """JSON service definition on disk."""
    path = tmp_path / "app.json"
    path.write_text(json.dumps(definition_dict()))
    return path
