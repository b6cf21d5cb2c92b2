"""Output schemas for all API domains (importing registers them)."""

from . import config, service  # noqa: F401
