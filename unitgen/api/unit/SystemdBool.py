"""Boolean rendered the way systemd spells it."""

from enum import Enum


class SystemdBool(str, Enum):
    TRUE = "yes"
    FALSE = "no"

    @classmethod
    def from_bool(cls, value: bool) -> "SystemdBool":
        return cls.TRUE if value else cls.FALSE
