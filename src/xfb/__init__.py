"""XFB radio automation player: startup and session bootstrap."""

__version__ = "0.1.0"
