"""
Input source implementations.
"""

from breakout.input.sources.base import InputSource
from breakout.input.sources.keyboard import KeyboardInputSource

__all__ = ['InputSource', 'KeyboardInputSource']
