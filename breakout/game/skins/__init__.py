"""Breakout skins for rendering."""

from .base import BreakoutSkin
from .classic import ClassicSkin

__all__ = [
    'BreakoutSkin',
    'ClassicSkin',
]
