"""[Install] section record."""

from pydantic import Field

from ._Section import _Section
from .FieldSpec import FieldSpec
from .Target import Target


class InstallSection(_Section):
    """Settings used by ``systemctl enable``."""

    HEADER = "Install"
    FIELDS = (
        FieldSpec("WantedBy", "wanted_by"),
        FieldSpec("Alias", "alias"),
    )

    wanted_by: Target | None = Field(None, description="Target that pulls this unit in when enabled")
    alias: str | None = Field(None, description="Additional name the unit is installed under")
