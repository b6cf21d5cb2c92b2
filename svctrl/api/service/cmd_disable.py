"""Service disable command - stops services and removes their activation links."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .._output_schemas.service import ServiceDisableOutput
from ._run_batch import _run_batch
from .disable import disable


def cmd_disable(names: list[str], config_path: Path | None = None) -> StageResult:
    """Disable each named service.

    Each service is stopped first; its link is only removed once the supervisor
    reports it down. This may take up to the retry budget per service.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from _run_batch(result_obj, names, disable, "Disabling", "disabled", ServiceDisableOutput, config_path)

    return StageResult(announce="Disabling services...", progress_callback=do_work)
