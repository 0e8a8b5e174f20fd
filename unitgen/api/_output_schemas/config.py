"""Output schemas for config commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""
    version: str = Field(..., description="Installed package version")
    git_sha: str = Field(..., description="Short git SHA, empty string if unavailable")
    full_version: str = Field(..., description="Version with git SHA when available")


schema_registry.register_output_schema("config", "version", ConfigVersionOutput)
