"""Control install command - writes a unit file and reloads the service manager."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .._output_schemas.control import ControlInstallOutput
from ..unit.load_service_definition import load_service_definition
from ._set_error import _set_error
from .ControlPlane import ControlPlane


def cmd_install(definition: Path) -> StageResult:
    """Install the unit described by a JSON/YAML service definition.

    The definition is serialized, written to the backend's unit directory and
    the service manager is reloaded. Installing over an existing unit file
    replaces it.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.UnitgenConfig import UnitgenConfig

        yield (0.1, "Loading configuration...")
        try:
            config = UnitgenConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            _set_error(result_obj, ControlInstallOutput, "installed", str(e), unit_path="")
            return
        backend_type = config.control.type

        yield (0.3, "Loading service definition...")
        try:
            service = load_service_definition(definition)
        except ValueError as e:
            yield (1.0, "Complete")
            _set_error(result_obj, ControlInstallOutput, "installed", str(e), backend_type, unit_path="")
            return

        yield (0.6, "Installing unit...")
        try:
            with ControlPlane(config.control) as control:
                install_result = control.install(service)
        except (RuntimeError, ValueError, OSError) as e:
            yield (1.0, "Complete")
            _set_error(
                result_obj,
                ControlInstallOutput,
                "installed",
                f"Failed to install {service.file_name}: {e}",
                backend_type,
                service.file_name,
                unit_path="",
            )
            return

        yield (1.0, "Complete")
        message = f"Installed {install_result['unit_name']} at {install_result['unit_path']}"
        result_obj.result = message
        result_obj.output = ControlInstallOutput(
            errors=[],
            warnings=[],
            type=backend_type,
            unit_name=install_result["unit_name"],
            message=message,
            unit_path=install_result["unit_path"],
            installed=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Installing unit from {definition}...",
        progress_callback=do_work,
    )
