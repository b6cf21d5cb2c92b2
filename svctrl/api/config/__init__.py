"""Config module - locating and loading the svctrl configuration."""

from .SvctrlConfig import SvctrlConfig

__all__ = ["SvctrlConfig"]
