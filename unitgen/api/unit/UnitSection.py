"""[Unit] section record."""

from pydantic import Field

from ._Section import _Section
from .FieldSpec import FieldSpec
from .Target import Target


class UnitSection(_Section):
    """Generic unit metadata, ordering and dependencies."""

    HEADER = "Unit"
    FIELDS = (
        FieldSpec("Description", "description"),
        FieldSpec("Documentation", "documentation"),
        FieldSpec("Before", "before"),
        FieldSpec("After", "after"),
        FieldSpec("Wants", "wants"),
        FieldSpec("ConditionPathExists", "condition_path_exists"),
        FieldSpec("Conflicts", "conflicts"),
    )

    description: str | None = Field(None, description="Human readable unit description")
    documentation: str | None = Field(None, description="Documentation URIs")
    before: Target | None = Field(None, description="Start this unit before the target")
    after: Target | None = Field(None, description="Start this unit after the target")
    wants: Target | None = Field(None, description="Weak requirement on the target")
    condition_path_exists: str | None = Field(None, description="Only start if this path exists")
    conflicts: str | None = Field(None, description="Units that cannot run alongside this one")
