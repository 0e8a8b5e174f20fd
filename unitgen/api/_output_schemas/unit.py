"""Output schemas for unit commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class UnitRenderOutput(BaseOutputSchema):
    """Output schema for unit render command.

    All fields must always be present for consistency.
    """
    name: str = Field(..., description="Service name, empty string if the definition could not be loaded")
    file_name: str = Field(..., description="Unit file name (e.g., 'app.service'), empty string if not applicable")
    text: str = Field(..., description="Serialized unit file text, empty string on error")
    definition: dict[str, Any] = Field(..., description="Set fields of the service definition, empty dict on error")


class UnitDefaultOutput(UnitRenderOutput):
    """Output schema for unit default command."""


schema_registry.register_output_schema("unit", "render", UnitRenderOutput)
schema_registry.register_output_schema("unit", "default", UnitDefaultOutput)
