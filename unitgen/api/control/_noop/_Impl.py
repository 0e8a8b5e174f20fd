"""No-op control plane - writes unit files, leaves the service manager alone."""

from pathlib import Path
from typing import Any

from ....logging_config import get_logger
from ...config.get_home_dir import get_home_dir
from ...unit.Service import Service
from ...unit.serialize import serialize
from ..ControlConfig import ControlConfig
from ..ServiceController import ServiceController
from ..unit_file_name import unit_file_name
from ._Data import _Data

logger = get_logger("control.noop")


class _Impl(ServiceController):
    """Dry-run implementation: start, stop and enable are accepted and ignored."""

    def __init__(self, control_config: ControlConfig):
        if not isinstance(control_config.data, _Data):
            raise ValueError("noop control config data is required")
        self.config = control_config
        self._data: _Data = control_config.data

    def unit_dir(self) -> Path:
        return get_home_dir(self._data.unit_dir)

    def install(self, service: Service) -> dict[str, Any]:
        unit_path = self.unit_path(service.name)
        unit_path.parent.mkdir(parents=True, exist_ok=True)
        unit_path.write_text(serialize(service), encoding="utf-8")
        logger.info("Wrote %s (no service manager reload)", unit_path)
        return {
            "success": True,
            "type": "noop",
            "unit_name": service.file_name,
            "unit_path": str(unit_path),
        }

    def _ignore(self, action: str, name: str) -> dict[str, Any]:
        unit_name = unit_file_name(name)
        logger.info("Ignoring %s request for %s", action, unit_name)
        return {"success": True, "type": "noop", "unit_name": unit_name}

    def start(self, name: str) -> dict[str, Any]:
        return self._ignore("start", name)

    def stop(self, name: str) -> dict[str, Any]:
        return self._ignore("stop", name)

    def enable(self, name: str) -> dict[str, Any]:
        return self._ignore("enable", name)
