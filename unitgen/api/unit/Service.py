"""Service aggregate: a name plus one record per unit-file section."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import UNIT_FILE_SUFFIX
from ._Section import _Section
from .InstallSection import InstallSection
from .ServiceSection import ServiceSection
from .UnitSection import UnitSection


class Service(BaseModel):
    """A systemd service unit ready to be serialized."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Unit name without the .service suffix")
    unit: UnitSection = Field(default_factory=UnitSection, description="[Unit] section")
    service: ServiceSection = Field(default_factory=ServiceSection, description="[Service] section")
    install: InstallSection = Field(default_factory=InstallSection, description="[Install] section")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or "\n" in v or "\r" in v or "/" in v:
            raise ValueError(f"service name must be a single path component, got: {v!r}")
        return v

    @property
    def file_name(self) -> str:
        """Unit file name, e.g. ``app.service``."""
        return f"{self.name}{UNIT_FILE_SUFFIX}"

    def sections(self) -> tuple[_Section, _Section, _Section]:
        """Section records in emission order."""
        return (self.unit, self.service, self.install)
