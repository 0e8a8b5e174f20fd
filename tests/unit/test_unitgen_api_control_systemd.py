"""Unit tests for the systemd control backend.

Nothing here talks to a real systemd; subprocess.run is patched.
"""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from unitgen.api.control._systemd._Impl import SYSTEM_UNIT_DIR, _Impl
from unitgen.api.control.ControlConfig import ControlConfig
from unitgen.api.unit.new_default_service import new_default_service
from unitgen.api.unit.serialize import serialize


def _impl(tmp_path: Path, user: bool = True) -> _Impl:
    return _Impl(ControlConfig(type="systemd", data={"user": user, "unit_dir": str(tmp_path)}))


def test_rejects_foreign_data():
    with pytest.raises(ValueError, match="systemd control config data is required"):
        _Impl(ControlConfig(type="noop", data={"unit_dir": "units"}))


def test_default_unit_dirs(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    user_impl = _Impl(ControlConfig(type="systemd", data={"user": True}))
    assert user_impl.unit_dir() == tmp_path / ".config" / "systemd" / "user"
    system_impl = _Impl(ControlConfig(type="systemd", data={"user": False}))
    assert system_impl.unit_dir() == SYSTEM_UNIT_DIR


@patch("unitgen.api.control._systemd._Impl.subprocess.run")
def test_install_writes_unit_and_reloads(mock_run, tmp_path):
    service = new_default_service("app", "My App", "/usr/bin/app")
    result = _impl(tmp_path).install(service)

    unit_path = tmp_path / "app.service"
    assert unit_path.read_text() == serialize(service)
    assert result == {
        "success": True,
        "type": "systemd",
        "unit_name": "app.service",
        "unit_path": str(unit_path),
    }
    mock_run.assert_called_once_with(
        ["systemctl", "--user", "daemon-reload"],
        check=True,
        capture_output=True,
        text=True,
    )


@patch("unitgen.api.control._systemd._Impl.subprocess.run")
def test_system_manager_has_no_user_flag(mock_run, tmp_path):
    (tmp_path / "app.service").write_text("[Unit]\n")
    _impl(tmp_path, user=False).start("app")
    assert mock_run.call_args.args[0] == ["systemctl", "start", "app.service"]


@patch("unitgen.api.control._systemd._Impl.subprocess.run")
def test_start_stop_enable(mock_run, tmp_path):
    (tmp_path / "app.service").write_text("[Unit]\n")
    impl = _impl(tmp_path)

    assert impl.start("app")["unit_name"] == "app.service"
    assert impl.stop("app.service")["success"] is True
    assert impl.enable("app")["type"] == "systemd"

    commands = [call.args[0] for call in mock_run.call_args_list]
    assert commands == [
        ["systemctl", "--user", "start", "app.service"],
        ["systemctl", "--user", "stop", "app.service"],
        ["systemctl", "--user", "enable", "app.service"],
    ]


@patch("unitgen.api.control._systemd._Impl.subprocess.run")
def test_start_requires_installed_unit(mock_run, tmp_path):
    with pytest.raises(RuntimeError, match="Install the unit first"):
        _impl(tmp_path).start("app")
    with pytest.raises(RuntimeError, match="Install the unit first"):
        _impl(tmp_path).enable("app")
    mock_run.assert_not_called()


@patch("unitgen.api.control._systemd._Impl.subprocess.run")
def test_systemctl_failure_raises(mock_run, tmp_path):
    mock_run.side_effect = subprocess.CalledProcessError(5, ["systemctl"], stderr="Unit app.service not loaded.\n")
    with pytest.raises(RuntimeError, match="systemctl stop app.service failed: Unit app.service not loaded."):
        _impl(tmp_path).stop("app")


@patch("unitgen.api.control._systemd._Impl.subprocess.run")
def test_missing_systemctl_raises(mock_run, tmp_path):
    mock_run.side_effect = FileNotFoundError("systemctl")
    with pytest.raises(RuntimeError, match="systemctl command not found"):
        _impl(tmp_path).install(new_default_service("app", "My App", "/usr/bin/app"))


def test_is_installed(tmp_path):
    impl = _impl(tmp_path)
    assert impl.is_installed("app") is False
    (tmp_path / "app.service").write_text("[Unit]\n")
    assert impl.is_installed("app") is True
    assert impl.is_installed("app.service") is True
