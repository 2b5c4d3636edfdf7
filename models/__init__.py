"""
Shared models library for the Breakout project.

This package provides the Pydantic data models used across the system:
- Primitives: geometry (Point2D, Vector2D, Rectangle) and the skins' Color

Usage:
    >>> from models import Color, Rectangle, Vector2D
    >>> Color.parse("0, 121, 241").as_rgb_tuple
    (0, 121, 241)
"""

from .primitives import (
    Point2D,
    Vector2D,
    Color,
    Rectangle,
    sign,
)

__all__ = [
    'Point2D',
    'Vector2D',
    'Color',
    'Rectangle',
    'sign',
]
