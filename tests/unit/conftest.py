"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
"""

from enum import Enum
from typing import get_args

import pytest

from unitgen.api.unit.InstallSection import InstallSection
from unitgen.api.unit.Service import Service
from unitgen.api.unit.ServiceSection import ServiceSection
from unitgen.api.unit.UnitSection import UnitSection


def _filled(section_cls):
    """Build a section with a value in every field."""
    values = {}
    for name, info in section_cls.model_fields.items():
        value_type = next(arg for arg in get_args(info.annotation) if arg is not type(None))
        if issubclass(value_type, Enum):
            values[name] = list(value_type)[-1]
        elif value_type is int:
            values[name] = 30
        else:
            values[name] = f"/value/{name}"
    return section_cls(**values)


@pytest.fixture
def full_service() -> Service:
    """Service with every field of every section set."""
    return Service(
        name="full",
        unit=_filled(UnitSection),
        service=_filled(ServiceSection),
        install=_filled(InstallSection),
    )
