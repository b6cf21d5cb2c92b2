"""Version command - returns svctrl version information."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.config import ConfigVersionOutput
from ...utils.get_package_version import get_package_version


def cmd_version() -> StageResult:
    """Get svctrl version information."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Getting package version...")
        version = get_package_version()
        yield (1.0, "Complete")
        result_obj.result = f"svctrl version: {version}"
        result_obj.output = ConfigVersionOutput(errors=[], warnings=[], version=version).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Getting version information...", progress_callback=do_work)
