"""List service directories."""

from pathlib import Path


def list_services(directory: Path) -> list[str] | None:
    """Return the sorted names of directories (or links to directories) in ``directory``.

    Returns None if ``directory`` is not a directory.
    """
    directory = Path(directory)
    if not directory.is_dir():
        return None
    return sorted(entry.name for entry in directory.iterdir() if entry.is_dir())
