"""Unit tests for unitgen.api.control commands (noop backend)."""

import pytest

from tests.conftest import run_cmd
from unitgen.api.control.cmd_enable import cmd_enable
from unitgen.api.control.cmd_install import cmd_install
from unitgen.api.control.cmd_start import cmd_start
from unitgen.api.control.cmd_stop import cmd_stop
from unitgen.api.validate_output import validate_output


def test_cmd_install_success(unitgen_home, definition_file):
    result = run_cmd(cmd_install, definition_file)
    assert result.success is True
    assert result.output["installed"] is True
    assert result.output["type"] == "noop"
    assert result.output["unit_name"] == "app.service"
    unit_path = unitgen_home / "units" / "app.service"
    assert result.output["unit_path"] == str(unit_path)
    assert unit_path.read_text().startswith("[Unit]\nDescription=My App\n")
    assert validate_output(cmd_install, result.output) == result.output


def test_cmd_install_bad_definition(unitgen_home, tmp_path):
    result = run_cmd(cmd_install, tmp_path / "missing.json")
    assert result.success is False
    assert result.output["installed"] is False
    assert result.output["type"] == "noop"
    assert "not found" in result.output["message"]


def test_cmd_install_unreadable_definition(unitgen_home, tmp_path):
    directory = tmp_path / "dir.yaml"
    directory.mkdir()
    result = run_cmd(cmd_install, directory)
    assert result.success is False
    assert result.output["installed"] is False
    assert "Cannot read service definition" in result.output["errors"][0]


def test_cmd_install_without_config(empty_home, definition_file):
    result = run_cmd(cmd_install, definition_file)
    assert result.success is False
    assert result.output["type"] == ""
    assert "Configuration file not found" in result.output["errors"][0]


@pytest.mark.parametrize(
    ("cmd", "status_field", "verb"),
    [
        (cmd_start, "running", "Started"),
        (cmd_stop, "stopped", "Stopped"),
        (cmd_enable, "enabled", "Enabled"),
    ],
)
def test_lifecycle_commands(unitgen_home, cmd, status_field, verb):
    result = run_cmd(cmd, "app")
    assert result.success is True
    assert result.result == f"{verb} app.service"
    assert result.output[status_field] is True
    assert result.output["unit_name"] == "app.service"
    assert validate_output(cmd, result.output) == result.output


@pytest.mark.parametrize(
    ("cmd", "status_field"),
    [(cmd_start, "running"), (cmd_stop, "stopped"), (cmd_enable, "enabled")],
)
def test_lifecycle_commands_without_config(empty_home, cmd, status_field):
    result = run_cmd(cmd, "app")
    assert result.success is False
    assert result.output[status_field] is False
    assert result.result.startswith("Error:")


def test_lifecycle_command_empty_name(unitgen_home):
    result = run_cmd(cmd_start, "")
    assert result.success is False
    assert "unit name is required" in result.output["errors"][0]


def test_backend_failure_is_reported(unitgen_home, monkeypatch):
    from unitgen.api.control._noop._Impl import _Impl

    def boom(self, name):
        raise RuntimeError("manager unavailable")

    monkeypatch.setattr(_Impl, "start", boom)
    result = run_cmd(cmd_start, "app")
    assert result.success is False
    assert result.output["type"] == "noop"
    assert result.output["message"] == "Failed to start app.service: manager unavailable"
