"""Load a Service definition from a JSON or YAML file."""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ...logging_config import get_logger
from .Service import Service

logger = get_logger("unit.load_service_definition")

_YAML_SUFFIXES = {".yaml", ".yml"}


def _read_document(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValueError(f"Cannot read service definition {path}: {e}") from e
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in service definition {path}: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in service definition {path}: {e}") from e


def load_service_definition(path: Path) -> Service:
    """Load and validate a service definition.

    The document mirrors the model: ``name`` plus optional ``unit``,
    ``service`` and ``install`` mappings keyed by attribute name.

    Raises:
        ValueError: If the file is missing or unreadable, does not parse, or fails validation
    """
    path = Path(path).expanduser()
    if not path.exists():
        raise ValueError(f"Service definition not found at {path}")

    raw = _read_document(path)
    if not isinstance(raw, dict):
        raise ValueError(f"Service definition {path} must be a mapping, got {type(raw).__name__}")

    try:
        service = Service(**raw)
    except ValidationError as e:
        first = e.errors()[0]
        loc = first.get("loc", ())
        field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
        detail = f"{field}: {first.get('msg', str(e))}" if field else first.get("msg", str(e))
        raise ValueError(f"Service definition validation error: {detail}") from e

    logger.info("Loaded service definition %s from %s", service.name, path)
    return service
