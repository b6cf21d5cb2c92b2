"""Activation state of a service, derived from its target path."""

from enum import Enum


class ActivationState(str, Enum):
    """Relationship between ``lndir/name`` and ``svdir/name``.

    Never stored; read fresh from the filesystem each time.
    """

    DISABLED = "disabled"
    """Target path does not exist."""

    ENABLED_HERE = "enabled"
    """Target path is a symlink resolving to this service's source path."""

    MISMATCH = "mismatch"
    """Target path is a symlink resolving somewhere else."""

    BLOCKED = "blocked"
    """Target path exists as a plain directory or file."""
