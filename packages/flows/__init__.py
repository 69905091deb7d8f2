"""Flow scripts invoked from Maestro flows."""

from .console import Console
from .discover_items import discover_items

__all__ = [
    "Console",
    "discover_items",
]
