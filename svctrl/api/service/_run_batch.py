"""Run one lifecycle operation over several service names."""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from ..StageResult import StageResult
from ..config.SvctrlConfig import SvctrlConfig
from .Service import Service
from .ServiceError import ConfigDirMissing, ServiceError

logger = logging.getLogger(__name__)


def _entry(name: str, error: ServiceError | None, message: str) -> dict[str, Any]:
    return {
        "name": name,
        "success": error is None,
        "kind": error.kind if error else "",
        "message": message,
    }


def _run_batch(
    result_obj: StageResult,
    names: list[str],
    action: Callable[[Service], dict[str, Any] | None],
    verb: str,
    done: str,
    output_class: type[BaseModel],
    config_path: Path | None = None,
    **extra_output: Any,
) -> Iterator[tuple[float, str]]:
    """Apply ``action`` to each name in order, recording every outcome.

    A failing service is reported and the next one is attempted. Only a
    configuration problem (unloadable file or missing directory) ends the batch.

    Yields: (progress_percent: float, message: str) tuples
    Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
    """
    yield (0.1, "Loading configuration...")
    try:
        config = SvctrlConfig.load(config_path)
    except ValueError as e:
        yield (1.0, "Complete")
        result_obj.result = f"Error: {e}"
        result_obj.output = output_class(
            errors=[str(e)],
            warnings=[],
            svdir="",
            lndir="",
            services=[],
            **extra_output,
        ).model_dump(mode="python")
        result_obj.success = False
        return

    errors: list[str] = []
    entries: list[dict[str, Any]] = []

    if not names:
        errors.append("No service names given")

    for index, name in enumerate(names):
        yield (0.1 + 0.9 * index / len(names), f"{verb} {name}...")
        try:
            service = Service.resolve(config.svdir, config.lndir, name)
        except ConfigDirMissing as e:
            logger.error("%s", e)
            errors.append(str(e))
            entries.append(_entry(name, e, str(e)))
            break

        try:
            details = action(service) or {}
        except ServiceError as e:
            logger.warning("%s %s failed: %s", verb, name, e)
            errors.append(str(e))
            entries.append(_entry(name, e, str(e)))
            continue

        entries.append({**_entry(name, None, f"service '{name}' {done}"), **details})

    yield (1.0, "Complete")
    succeeded = sum(1 for entry in entries if entry["success"])
    if errors and not succeeded:
        result_obj.result = f"Error: {errors[0]}" if len(errors) == 1 else f"Error: {len(errors)} service(s) failed"
    else:
        result_obj.result = f"{done.capitalize()} {succeeded} of {len(names)} service(s)"
    result_obj.output = output_class(
        errors=errors,
        warnings=[],
        svdir=str(config.svdir),
        lndir=str(config.lndir),
        services=entries,
        **extra_output,
    ).model_dump(mode="python")
    result_obj.success = not errors
