"""Shared constants for unitgen dot-directories and artefact locations."""

UNITGEN_HOME_EXT = ".unitgen"  # user-level state/config directory suffix

UNIT_FILE_SUFFIX = ".service"
