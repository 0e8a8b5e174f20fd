"""systemd specific control configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    """systemd control plane configuration data."""

    model_config = ConfigDict(extra="forbid")

    user: bool = Field(..., description="Manage user units via 'systemctl --user' instead of system units")
    unit_dir: str | None = Field(None, description="Override of the unit file directory")

    @field_validator("unit_dir")
    @classmethod
    def validate_unit_dir(cls, v: str | None) -> str | None:
        if v is not None and not v:
            raise ValueError("control.data.unit_dir cannot be empty (omit it to use the default)")
        return v
