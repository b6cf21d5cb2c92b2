"""Service status command - reports run state of services and their log services."""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..StageResult import StageResult
from .._output_schemas.service import ServiceStatusOutput
from .Service import Service
from .ServiceError import ServiceError
from ._run_batch import _run_batch
from .status import has_log_service, status

logger = logging.getLogger(__name__)


def _log_details(service: Service) -> dict[str, Any] | None:
    """Status of the log sub-service; a failure here does not fail the main entry."""
    if not has_log_service(service):
        return None
    try:
        return {**status(service, want_log=True).to_dict(), "success": True, "kind": "", "message": ""}
    except ServiceError as e:
        logger.warning("Log service of %s: %s", service.name, e)
        return {"success": False, "kind": e.kind, "message": str(e)}


def _status_details(service: Service) -> dict[str, Any]:
    details = status(service).to_dict()
    details["log"] = _log_details(service)
    return details


def cmd_status(names: list[str], config_path: Path | None = None) -> StageResult:
    """Get run status of each named service."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield from _run_batch(result_obj, names, _status_details, "Reading status of", "read", ServiceStatusOutput, config_path)

    return StageResult(announce="Checking service status...", progress_callback=do_work)
