"""Show configuration command."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .._output_schemas.config import ConfigShowOutput
from .SvctrlConfig import SvctrlConfig


def cmd_show(config_path: Path | None = None) -> StageResult:
    """Show where the configuration was found and its values."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config = SvctrlConfig.load(config_path)
        except ValueError as e:
            yield (1.0, "Complete")
            found = SvctrlConfig.find_config_path(config_path)
            result_obj.result = f"Error: {e}"
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                config_path=str(found) if found else "",
                content={},
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.7, "Checking directories...")
        warnings = [f"{key} ({value}) is not a directory" for key, value in config.to_dict().items() if not Path(value).is_dir()]

        yield (1.0, "Complete")
        result_obj.result = f"Configuration loaded from {config.path}"
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=warnings,
            config_path=str(config.path),
            content=config.to_dict(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Showing configuration...", progress_callback=do_work)
