"""Service show command - lists available and active services."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .._output_schemas.service import ServiceShowOutput
from ..config.SvctrlConfig import SvctrlConfig
from .list_services import list_services


def cmd_show(config_path: Path | None = None) -> StageResult:
    """List service definitions in svdir and active services in lndir."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = SvctrlConfig.load(config_path)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = ServiceShowOutput(
                errors=[str(e)], warnings=[], svdir="", lndir="", available=[], active=[]
            ).model_dump(mode="python")
            result_obj.success = False
            return

        errors: list[str] = []

        yield (0.5, "Listing service definitions...")
        available = list_services(config.svdir)
        if available is None:
            errors.append(f"svdir ({config.svdir}) is not a directory")

        yield (0.8, "Listing active services...")
        active = list_services(config.lndir)
        if active is None:
            errors.append(f"lndir ({config.lndir}) is not a directory")

        yield (1.0, "Complete")
        available = available or []
        active = active or []
        result_obj.result = f"Found {len(available)} service(s), {len(active)} active"
        result_obj.output = ServiceShowOutput(
            errors=errors,
            warnings=[],
            svdir=str(config.svdir),
            lndir=str(config.lndir),
            available=available,
            active=active,
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(announce="Listing services...", progress_callback=do_work)
