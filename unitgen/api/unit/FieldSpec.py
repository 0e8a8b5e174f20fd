"""One entry of a section's field catalog."""

from typing import Any, NamedTuple


class FieldSpec(NamedTuple):
    """Output key paired with the model attribute it reads."""

    key: str
    attribute: str

    def read(self, record: Any) -> Any:
        return getattr(record, self.attribute)
