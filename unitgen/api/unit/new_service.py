"""Assemble a Service from pre-built section records."""

from .InstallSection import InstallSection
from .Service import Service
from .ServiceSection import ServiceSection
from .UnitSection import UnitSection


def new_service(name: str, unit: UnitSection, service: ServiceSection, install: InstallSection) -> Service:
    """Create a service from fully formed sections, unchanged."""
    return Service(name=name, unit=unit, service=service, install=install)
