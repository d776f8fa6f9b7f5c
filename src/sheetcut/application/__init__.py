"""Application layer - use cases and job configuration."""

from .commands import CalculateLayoutCommand, pack

__all__ = [
    "CalculateLayoutCommand",
    "pack",
]
