"""Top-level svctrl configuration."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Searched in order; /run is usually a tmpfs for temporary system configuration
SYSTEM_CONFIG_PATHS: tuple[Path, ...] = (
    Path("/run/svctrl/config.json"),
    Path("/etc/svctrl/config.json"),
)


class SvctrlConfig(BaseModel):
    """Locations of the service definitions and of the active service links."""

    model_config = ConfigDict(extra="forbid")

    svdir: Path = Field(default=Path("/etc/sv"), description="Directory holding service definitions")
    lndir: Path = Field(default=Path("/var/service"), description="Directory the supervisor scans for active services")
    path: Path | None = Field(default=None, exclude=True, description="File this configuration was loaded from")

    @field_validator("svdir", "lndir")
    @classmethod
    def _expand(cls, value: Path) -> Path:
        return value.expanduser()

    @classmethod
    def find_config_path(cls, override: Path | None = None) -> Path | None:
        """Return the configuration file to load, or None if there is none.

        Order: ``override``, ``$SVCTRL_CONFIG``, then :data:`SYSTEM_CONFIG_PATHS`.
        """
        if override is not None:
            return Path(override).expanduser()

        env_path = os.environ.get("SVCTRL_CONFIG")
        if env_path:
            return Path(env_path).expanduser()

        for candidate in SYSTEM_CONFIG_PATHS:
            if candidate.is_file():
                return candidate
        return None

    @classmethod
    def load(cls, override: Path | None = None) -> "SvctrlConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If no config file is found, it is not valid JSON, or validation fails
        """
        path = cls.find_config_path(override)
        if path is None:
            searched = ", ".join(str(p) for p in SYSTEM_CONFIG_PATHS)
            raise ValueError(f"Couldn't find a valid configuration (searched $SVCTRL_CONFIG, {searched})")

        if not path.is_file():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object, got {type(raw).__name__}")

        try:
            return cls.model_validate({**raw, "path": path})
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc)
            detail = f"{field}: {first.get('msg', str(e))}" if field else first.get("msg", str(e))
            raise ValueError(f"Configuration validation error in {path}: {detail}") from e

    def to_dict(self) -> dict[str, str]:
        """Convert to a dictionary for display."""
        return {"svdir": str(self.svdir), "lndir": str(self.lndir)}
