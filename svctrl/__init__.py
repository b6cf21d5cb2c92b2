"""svctrl - control runit service directories."""
