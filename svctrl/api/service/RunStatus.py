"""Run status DTO."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class RunStatus:
    """Status of a supervised service, read fresh for every query."""

    name: str
    """Service name (the directory basename)."""

    running: bool
    """Whether supervise/pid held a pid."""

    pid: int
    """Process ID of the main process, 0 if down."""

    elapsed_seconds: int
    """Seconds since supervise/pid was last modified (start or down time)."""

    def describe(self) -> str:
        """Render like runit's ``sv status``."""
        if not self.running:
            return f"down: {self.name}: {self.elapsed_seconds}s, normally up"
        return f"run: {self.name}: (pid {self.pid}) {self.elapsed_seconds}s"

    def to_dict(self) -> dict[str, Any]:
        return {**asdict(self), "line": self.describe()}
