"""
Input abstraction layer for the breakout game.

The game only sees a KeyState per frame; where it comes from (the pygame
keyboard, a test script) is up to the input source.
"""

from breakout.input.key_state import KeyState
from breakout.input.sources import InputSource, KeyboardInputSource

__all__ = ['KeyState', 'InputSource', 'KeyboardInputSource']
