"""Convert a section field value to its unit-file text."""

from enum import Enum
from typing import Any


def render_value(value: Any) -> str:
    """Render a field value as unit-file text.

    ``None`` means unset and renders as an empty string. Enumerations render
    their systemd spelling, integers render as decimal text (``0`` included)
    and strings are returned verbatim.
    """
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
