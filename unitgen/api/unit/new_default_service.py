"""Build a Service with the canonical defaults."""

from .InstallSection import InstallSection
from .Service import Service
from .ServiceSection import ServiceSection
from .ServiceType import ServiceType
from .Target import Target
from .UnitSection import UnitSection


def new_default_service(name: str, description: str, exec_start: str) -> Service:
    """Create a simple service started after the network and wanted by multi-user.

    Sets Description, ExecStart, After=network.target, Type=simple and
    WantedBy=multi-user.target. Every other field is unset.
    """
    return Service(
        name=name,
        unit=UnitSection(description=description, after=Target.NETWORK),
        service=ServiceSection(type=ServiceType.SIMPLE, exec_start=exec_start),
        install=InstallSection(wanted_by=Target.MULTI_USER),
    )
