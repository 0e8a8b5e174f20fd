"""Interface implemented by every service manager backend."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from ..unit.Service import Service
from .unit_file_name import unit_file_name


class ServiceController(ABC):
    """Abstract base class for platform-specific control planes.

    A controller writes serialized unit text where its service manager looks
    for units and asks the manager to reload, start, stop or enable them.
    Failures raise RuntimeError.
    """

    @abstractmethod
    def unit_dir(self) -> Path:
        """Directory unit files are written to."""
        pass

    @abstractmethod
    def install(self, service: Service) -> dict[str, Any]:
        """Write the unit file for ``service`` and make the manager pick it up.

        Returns:
            Dictionary with installation result (success, unit_name, unit_path)
        """
        pass

    @abstractmethod
    def start(self, name: str) -> dict[str, Any]:
        """Start the unit.

        Returns:
            Dictionary with start result
        """
        pass

    @abstractmethod
    def stop(self, name: str) -> dict[str, Any]:
        """Stop the unit.

        Returns:
            Dictionary with stop result
        """
        pass

    @abstractmethod
    def enable(self, name: str) -> dict[str, Any]:
        """Enable the unit so its [Install] section takes effect.

        Returns:
            Dictionary with enable result
        """
        pass

    def unit_path(self, name: str) -> Path:
        """Path of the unit file for ``name``."""
        return self.unit_dir() / unit_file_name(name)

    def is_installed(self, name: str) -> bool:
        """Whether the unit file for ``name`` exists."""
        return self.unit_path(name).exists()
