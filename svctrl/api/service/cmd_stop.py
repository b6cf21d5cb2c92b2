"""Service stop command - brings services down and waits for confirmation."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .._output_schemas.service import ServiceStopOutput
from ._run_batch import _run_batch
from .stop import stop


def cmd_stop(names: list[str], config_path: Path | None = None) -> StageResult:
    """Stop each named service, leaving it enabled."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from _run_batch(result_obj, names, stop, "Stopping", "stopped", ServiceStopOutput, config_path)

    return StageResult(announce="Stopping services...", progress_callback=do_work)
