"""
Keyboard Input Source - Held arrow/WASD keys via pygame.
"""
from typing import Sequence

import pygame

from breakout.input.key_state import KeyState
from breakout.input.sources.base import InputSource


class KeyboardInputSource(InputSource):
    """Reads held keys from pygame's keyboard state.

    Left is the left arrow or A, right is the right arrow or D. The
    display must be initialized before polling.
    """

    LEFT_KEYS: Sequence[int] = (pygame.K_LEFT, pygame.K_a)
    RIGHT_KEYS: Sequence[int] = (pygame.K_RIGHT, pygame.K_d)

    def poll(self) -> KeyState:
        """Read the currently held keys."""
        pressed = pygame.key.get_pressed()
        return KeyState(
            left=any(pressed[key] for key in self.LEFT_KEYS),
            right=any(pressed[key] for key in self.RIGHT_KEYS),
        )
