"""Control start command - asks the service manager to start a unit."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.control import ControlStartOutput
from ._run_action import _run_action


def cmd_start(name: str) -> StageResult:
    """Start the unit via the configured service manager.

    Args:
        name: Unit name, with or without the .service suffix
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from _run_action(result_obj, "start", name, ControlStartOutput, "running", "Started")

    return StageResult(
        announce=f"Starting {name}...",
        progress_callback=do_work,
    )
