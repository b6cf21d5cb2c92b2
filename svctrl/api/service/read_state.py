"""Read a small supervisor state file."""

from pathlib import Path

from .ServiceError import ReadFailed


def read_state(path: Path) -> str:
    """Return the full text of ``path``; an empty string is a valid result.

    Raises:
        ReadFailed: If the file cannot be opened or read
    """
    try:
        return Path(path).read_text(errors="replace")
    except OSError as e:
        raise ReadFailed(Path(path), e) from e
