"""No-op control configuration data."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    """Writes unit files below UNITGEN_HOME and never calls a service manager."""

    model_config = ConfigDict(extra="forbid")

    unit_dir: str = Field(..., description="Unit file directory (relative to UNITGEN_HOME)")

    @field_validator("unit_dir")
    @classmethod
    def validate_unit_dir(cls, v: str) -> str:
        if not v:
            raise ValueError("control.data.unit_dir is required when control.type is 'noop'")
        if Path(v).is_absolute():
            raise ValueError(f"control.data.unit_dir must be relative to UNITGEN_HOME, got absolute path: {v!r}")
        return v
