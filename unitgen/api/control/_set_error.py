"""Fill a StageResult with a control command failure."""

from pydantic import BaseModel

from ..StageResult import StageResult


def _set_error(
    result_obj: StageResult,
    output_class: type[BaseModel],
    status_field: str,
    error_msg: str,
    backend_type: str = "",
    unit_name: str = "",
    **extra: object,
) -> None:
    """Mark ``result_obj`` failed with ``error_msg`` in the command's output schema.

    Args:
        result_obj: StageResult to update
        output_class: Output schema class to instantiate
        status_field: Name of the status flag in the output (e.g., "running", "enabled")
        error_msg: Message reported in errors and message
        backend_type: Control backend type, empty if unknown
        unit_name: Unit file name, empty if unknown
        **extra: Additional schema fields (e.g., unit_path)
    """
    result_obj.result = f"Error: {error_msg}"
    result_obj.output = output_class(
        errors=[error_msg],
        warnings=[],
        type=backend_type,
        unit_name=unit_name,
        message=error_msg,
        **{status_field: False},
        **extra,
    ).model_dump(mode="python")
    result_obj.success = False
