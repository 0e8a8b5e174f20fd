"""systemd control plane - writes unit files and drives systemctl."""

import subprocess
from pathlib import Path
from typing import Any

from ....logging_config import get_logger
from ...unit.Service import Service
from ...unit.serialize import serialize
from ..ControlConfig import ControlConfig
from ..ServiceController import ServiceController
from ..unit_file_name import unit_file_name
from ._Data import _Data

logger = get_logger("control.systemd")

SYSTEM_UNIT_DIR = Path("/etc/systemd/system")


class _Impl(ServiceController):
    """systemd implementation using systemctl (system or --user manager)."""

    def __init__(self, control_config: ControlConfig):
        if not isinstance(control_config.data, _Data):
            raise ValueError("systemd control config data is required")
        self.config = control_config
        self._data: _Data = control_config.data

    def unit_dir(self) -> Path:
        if self._data.unit_dir:
            return Path(self._data.unit_dir).expanduser()
        if self._data.user:
            return Path.home() / ".config" / "systemd" / "user"
        return SYSTEM_UNIT_DIR

    def _systemctl(self, *args: str) -> subprocess.CompletedProcess:
        command = ["systemctl"]
        if self._data.user:
            command.append("--user")
        command.extend(args)
        logger.debug("Running %s", " ".join(command))
        try:
            return subprocess.run(
                command,
                check=True,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise RuntimeError("systemctl command not found in PATH") from e
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else "Unknown error"
            raise RuntimeError(f"systemctl {' '.join(args)} failed: {error_msg}") from e

    def _require_installed(self, name: str) -> str:
        unit_name = unit_file_name(name)
        unit_path = self.unit_path(name)
        if not unit_path.exists():
            raise RuntimeError(f"Unit file not found at {unit_path}. Install the unit first.")
        return unit_name

    def install(self, service: Service) -> dict[str, Any]:
        unit_path = self.unit_path(service.name)
        unit_path.parent.mkdir(parents=True, exist_ok=True)
        unit_path.write_text(serialize(service), encoding="utf-8")
        logger.info("Wrote %s", unit_path)

        # Reload so systemd picks up the new or changed unit
        self._systemctl("daemon-reload")

        return {
            "success": True,
            "type": "systemd",
            "unit_name": service.file_name,
            "unit_path": str(unit_path),
        }

    def start(self, name: str) -> dict[str, Any]:
        unit_name = self._require_installed(name)
        self._systemctl("start", unit_name)
        logger.info("Started %s", unit_name)
        return {"success": True, "type": "systemd", "unit_name": unit_name}

    def stop(self, name: str) -> dict[str, Any]:
        unit_name = unit_file_name(name)
        self._systemctl("stop", unit_name)
        logger.info("Stopped %s", unit_name)
        return {"success": True, "type": "systemd", "unit_name": unit_name}

    def enable(self, name: str) -> dict[str, Any]:
        unit_name = self._require_installed(name)
        self._systemctl("enable", unit_name)
        logger.info("Enabled %s", unit_name)
        return {"success": True, "type": "systemd", "unit_name": unit_name}
