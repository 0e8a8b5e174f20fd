"""Output schemas for control plane commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class _ControlOutput(BaseOutputSchema):
    type: str = Field(..., description="Control backend type (e.g., 'systemd'), empty string if config failed to load")
    unit_name: str = Field(..., description="Unit file name, empty string if not applicable")
    message: str = Field(..., description="Human readable outcome")


class ControlInstallOutput(_ControlOutput):
    """Output schema for control install command."""
    unit_path: str = Field(..., description="Path the unit file was written to, empty string if not written")
    installed: bool = Field(..., description="Whether the unit file was written and the manager reloaded")


class ControlStartOutput(_ControlOutput):
    """Output schema for control start command."""
    running: bool = Field(..., description="Whether the start request succeeded")


class ControlStopOutput(_ControlOutput):
    """Output schema for control stop command."""
    stopped: bool = Field(..., description="Whether the stop request succeeded")


class ControlEnableOutput(_ControlOutput):
    """Output schema for control enable command."""
    enabled: bool = Field(..., description="Whether the enable request succeeded")


schema_registry.register_output_schema("control", "install", ControlInstallOutput)
schema_registry.register_output_schema("control", "start", ControlStartOutput)
schema_registry.register_output_schema("control", "stop", ControlStopOutput)
schema_registry.register_output_schema("control", "enable", ControlEnableOutput)
