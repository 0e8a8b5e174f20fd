"""Unit default command - renders a service built with the canonical defaults."""

from collections.abc import Iterator

from pydantic import ValidationError

from ..StageResult import StageResult
from .._output_schemas.unit import UnitDefaultOutput
from .dump_service_definition import dump_service_definition
from .new_default_service import new_default_service
from .serialize import serialize


def cmd_default(name: str, description: str, exec_start: str) -> StageResult:
    """Render a simple service wanted by multi-user.target and started after the network."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Building default service...")
        try:
            service = new_default_service(name, description, exec_start)
        except ValidationError as e:
            yield (1.0, "Complete")
            error_msg = e.errors()[0].get("msg", str(e))
            result_obj.result = f"Error: {error_msg}"
            result_obj.output = UnitDefaultOutput(
                errors=[error_msg],
                warnings=[],
                name="",
                file_name="",
                text="",
                definition={},
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.7, "Serializing unit...")
        text = serialize(service)

        yield (1.0, "Complete")
        result_obj.result = f"Rendered {service.file_name}"
        result_obj.output = UnitDefaultOutput(
            errors=[],
            warnings=[],
            name=service.name,
            file_name=service.file_name,
            text=text,
            definition=dump_service_definition(service),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Rendering default unit for {name}...",
        progress_callback=do_work,
    )
