"""Service enable command - links service definitions into the active directory."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .._output_schemas.service import ServiceEnableOutput
from ._run_batch import _run_batch
from .enable import enable


def cmd_enable(names: list[str], config_path: Path | None = None) -> StageResult:
    """Enable each named service."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from _run_batch(result_obj, names, enable, "Enabling", "enabled", ServiceEnableOutput, config_path)

    return StageResult(announce="Enabling services...", progress_callback=do_work)
