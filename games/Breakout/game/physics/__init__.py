"""Breakout physics and collision resolution."""

from .collision import resolve_collision

__all__ = [
    'resolve_collision',
]
