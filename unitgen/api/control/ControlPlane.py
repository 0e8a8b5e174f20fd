"""Control plane public API - dispatches to the configured backend."""

from importlib import import_module
from pathlib import Path
from typing import Any

from ..unit.Service import Service
from .ControlConfig import ControlConfig, _BACKEND_REGISTRY
from .ServiceController import ServiceController


class ControlPlane:
    """Public API for control plane operations.

    Use as a context manager; the backend is loaded on enter.
    """

    def __init__(self, control_config: ControlConfig):
        self.control_config = control_config
        self._impl: ServiceController | None = None

    def __enter__(self):
        backend_type = self.control_config.type

        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        module = import_module(f"unitgen.api.control._{backend_type}._Impl")
        self._impl = module._Impl(self.control_config)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def _require_impl(self) -> ServiceController:
        if not self._impl:
            raise RuntimeError("ControlPlane not initialized. Use as context manager first.")
        return self._impl

    def unit_path(self, name: str) -> Path:
        return self._require_impl().unit_path(name)

    def is_installed(self, name: str) -> bool:
        return self._require_impl().is_installed(name)

    def install(self, service: Service) -> dict[str, Any]:
        """Write the unit file and reload the service manager."""
        return self._require_impl().install(service)

    def start(self, name: str) -> dict[str, Any]:
        return self._require_impl().start(name)

    def stop(self, name: str) -> dict[str, Any]:
        return self._require_impl().stop(name)

    def enable(self, name: str) -> dict[str, Any]:
        return self._require_impl().enable(name)
