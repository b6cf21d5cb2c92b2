"""Service signal command - forwards a control character to each service."""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from .._output_schemas.service import ServiceSignalOutput
from .CONTROL_COMMANDS import CONTROL_COMMANDS
from .Service import Service
from ._run_batch import _run_batch
from .signal import signal


def resolve_command(command: str) -> str:
    """Map a command name to its control character; single characters pass through.

    Raises:
        ValueError: If ``command`` is neither a known name nor a single character
    """
    if command in CONTROL_COMMANDS:
        return CONTROL_COMMANDS[command]
    if len(command) == 1:
        return command
    raise ValueError(f"Unknown command {command!r} (known: {', '.join(CONTROL_COMMANDS)})")


def cmd_signal(command: str, names: list[str], config_path: Path | None = None) -> StageResult:
    """Send ``command`` to each named service's supervisor."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.05, "Resolving command...")
        try:
            character = resolve_command(command)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = ServiceSignalOutput(
                errors=[str(e)],
                warnings=[],
                svdir="",
                lndir="",
                services=[],
                command="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        def action(service: Service) -> None:
            signal(service, character)

        yield from _run_batch(
            result_obj,
            names,
            action,
            "Signalling",
            f"sent {character!r}",
            ServiceSignalOutput,
            config_path,
            command=character,
        )

    return StageResult(announce=f"Sending '{command}' to services...", progress_callback=do_work)
