"""Shared progress generator for start, stop and enable commands."""

from collections.abc import Iterator

from pydantic import BaseModel

from ..StageResult import StageResult
from ._set_error import _set_error
from .ControlPlane import ControlPlane
from .unit_file_name import unit_file_name


def _run_action(
    result_obj: StageResult,
    action: str,
    name: str,
    output_class: type[BaseModel],
    status_field: str,
    past_tense: str,
) -> Iterator[tuple[float, str]]:
    """Load config, call ``ControlPlane.<action>(name)`` and fill ``result_obj``."""
    from ..config.UnitgenConfig import UnitgenConfig

    yield (0.2, "Loading configuration...")
    try:
        unit_name = unit_file_name(name)
        config = UnitgenConfig.load()
    except ValueError as e:
        yield (1.0, "Complete")
        _set_error(result_obj, output_class, status_field, str(e))
        return
    backend_type = config.control.type

    yield (0.6, f"Requesting {action} of {unit_name}...")
    try:
        with ControlPlane(config.control) as control:
            getattr(control, action)(name)
    except (RuntimeError, ValueError, OSError) as e:
        yield (1.0, "Complete")
        _set_error(result_obj, output_class, status_field, f"Failed to {action} {unit_name}: {e}", backend_type, unit_name)
        return

    yield (1.0, "Complete")
    message = f"{past_tense} {unit_name}"
    result_obj.result = message
    result_obj.output = output_class(
        errors=[],
        warnings=[],
        type=backend_type,
        unit_name=unit_name,
        message=message,
        **{status_field: True},
    ).model_dump(mode="python")
    result_obj.success = True
