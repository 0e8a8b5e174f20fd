"""Unit render command - serializes a service definition file."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .._output_schemas.unit import UnitRenderOutput
from .dump_service_definition import dump_service_definition
from .load_service_definition import load_service_definition
from .serialize import serialize


def cmd_render(definition: Path) -> StageResult:
    """Render a JSON/YAML service definition as .service unit-file text."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading service definition...")
        try:
            service = load_service_definition(definition)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = UnitRenderOutput(
                errors=[str(e)],
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
        result_obj.output = UnitRenderOutput(
            errors=[],
            warnings=[],
            name=service.name,
            file_name=service.file_name,
            text=text,
            definition=dump_service_definition(service),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Rendering unit from {definition}...",
        progress_callback=do_work,
    )
