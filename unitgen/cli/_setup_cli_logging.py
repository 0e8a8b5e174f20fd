"""Configure logging for a CLI invocation."""

import logging

from unitgen.api.config.UnitgenConfig import UnitgenConfig
from unitgen.api.config.get_config_path import get_config_path
from unitgen.logging_config import level_from_name, setup_logging


def _setup_cli_logging() -> None:
    """Use the configured log level, or WARNING when no config file exists."""
    level = logging.WARNING
    if get_config_path().exists():
        try:
            level = level_from_name(UnitgenConfig.load().log.level)
        except ValueError:
            # Commands that need the config report the error themselves
            level = logging.WARNING
    setup_logging(level=level)
