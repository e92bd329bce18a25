"""Alert rendering."""

from .renderer import AlertRenderer

__all__ = ["AlertRenderer"]
