"""Get unitgen home directory path or path under it."""

import os
from pathlib import Path

from ...constants import UNITGEN_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get unitgen home directory path or path under it.

    Checks UNITGEN_HOME environment variable first, defaults to ~/.unitgen if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json", "units")

    Returns:
        Absolute path to unitgen home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/home/user/.unitgen")
        >>> get_home_dir("config.json")
        Path("/home/user/.unitgen/config.json")
    """
    home_env = os.environ.get("UNITGEN_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / UNITGEN_HOME_EXT

    return home / Path(*parts) if parts else home
