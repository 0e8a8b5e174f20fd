"""Normalize a service name to its unit file name."""

from ...constants import UNIT_FILE_SUFFIX


def unit_file_name(name: str) -> str:
    """Return ``name`` with the .service suffix, adding it when missing."""
    if not name:
        raise ValueError("unit name is required")
    return name if name.endswith(UNIT_FILE_SUFFIX) else f"{name}{UNIT_FILE_SUFFIX}"
