"""Run a shell on a pseudo-terminal, with colour palettes, soft keys, settings and SSH proxy helpers."""

__version__ = "0.1.0"
__all__ = ["app", "colors", "keys", "ptypair", "settings", "sshproxy"]