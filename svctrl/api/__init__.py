"""svctrl API layer."""
