"""Control enable command - asks the service manager to enable a unit."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.control import ControlEnableOutput
from ._run_action import _run_action


def cmd_enable(name: str) -> StageResult:
    """Enable the unit so it is started by its WantedBy target.

    Args:
        name: Unit name, with or without the .service suffix
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from _run_action(result_obj, "enable", name, ControlEnableOutput, "enabled", "Enabled")

    return StageResult(
        announce=f"Enabling {name}...",
        progress_callback=do_work,
    )
