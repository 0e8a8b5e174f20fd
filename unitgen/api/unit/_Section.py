"""Common base for the three unit-file section records."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from .FieldSpec import FieldSpec


class _Section(BaseModel):
    """Frozen record whose ``FIELDS`` catalog fixes the output key order."""

    model_config = ConfigDict(extra="forbid", frozen=True, coerce_numbers_to_str=True)

    HEADER: ClassVar[str] = ""
    FIELDS: ClassVar[tuple[FieldSpec, ...]] = ()

    @field_validator("*")
    @classmethod
    def reject_line_breaks(cls, v: Any) -> Any:
        # A line break would start a new Key=Value line in the output
        if isinstance(v, str) and ("\n" in v or "\r" in v):
            raise ValueError(f"value must be a single line, got: {v!r}")
        return v
