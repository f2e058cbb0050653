"""Interactive command-line recipe manager."""

__version__ = "0.1.0"
