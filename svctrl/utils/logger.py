import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def get_svctrl_home() -> Path:
    """Get svctrl home directory based on SVCTRL_HOME or default to ~/.svctrl."""
    env_home = os.environ.get("SVCTRL_HOME")
    return Path(env_home).expanduser().resolve() if env_home else Path.home() / ".svctrl"


def configure_logging(svctrl_home: Path | None = None) -> None:
    """Configure unified svctrl logging.

    Args:
        svctrl_home: Path to svctrl home directory. If None, derived from environment.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if svctrl_home is None:
        svctrl_home = get_svctrl_home()

    # Ensure directory exists
    svctrl_home.mkdir(parents=True, exist_ok=True)
    log_file = svctrl_home / "svctrl.log"

    root_logger = logging.getLogger("svctrl")
    root_logger.setLevel(logging.INFO)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
