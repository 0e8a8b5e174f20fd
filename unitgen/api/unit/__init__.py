"""Unit module - service unit data model and serializer."""

from .InstallSection import InstallSection
from .Restart import Restart
from .Service import Service
from .ServiceSection import ServiceSection
from .ServiceType import ServiceType
from .SystemdBool import SystemdBool
from .Target import Target
from .UnitSection import UnitSection
from .new_default_service import new_default_service
from .new_service import new_service
from .serialize import serialize

__all__ = [
    "InstallSection",
    "Restart",
    "Service",
    "ServiceSection",
    "ServiceType",
    "SystemdBool",
    "Target",
    "UnitSection",
    "new_default_service",
    "new_service",
    "serialize",
]
