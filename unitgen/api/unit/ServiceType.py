"""Process start-up types for the [Service] Type= key."""

from enum import Enum


class ServiceType(str, Enum):
    SIMPLE = "simple"
    NOTIFY = "notify"  # service signals readiness itself
    FORKING = "forking"  # active while a forked child runs after the parent exits
    DBUS = "dbus"
    ONESHOT = "oneshot"  # active only after the start action has finished
    EXEC = "exec"
