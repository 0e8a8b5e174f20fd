"""Dump the set fields of a Service as a plain mapping."""

from typing import Any

from .Service import Service


def dump_service_definition(service: Service) -> dict[str, Any]:
    """Return the definition document for a service with unset fields dropped."""
    return service.model_dump(mode="json", exclude_none=True)
