"""CLI commands for fitlog."""

from .show import show

__all__ = [
    "show",
]
