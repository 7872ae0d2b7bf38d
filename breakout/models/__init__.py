"""
Data models for the breakout game.

Usage:
    >>> from breakout.models import Vector2D, Rectangle, Color
"""

from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Color,
    Rectangle,
)

__all__ = [
    'Point2D',
    'Vector2D',
    'Color',
    'Rectangle',
]
