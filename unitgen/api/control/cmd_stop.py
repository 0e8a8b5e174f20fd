"""Control stop command - asks the service manager to stop a unit."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.control import ControlStopOutput
from ._run_action import _run_action


def cmd_stop(name: str) -> StageResult:
    """Stop the unit via the configured service manager.

    Args:
        name: Unit name, with or without the .service suffix
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from _run_action(result_obj, "stop", name, ControlStopOutput, "stopped", "Stopped")

    return StageResult(
        announce=f"Stopping {name}...",
        progress_callback=do_work,
    )
