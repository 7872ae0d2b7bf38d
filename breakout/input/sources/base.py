"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod

from breakout.input.key_state import KeyState


class InputSource(ABC):
    """Abstract base class for input sources.

    Sources are polled once per frame; there is no debouncing or event
    queue, only the state of the keys at poll time.
    """

    @abstractmethod
    def poll(self) -> KeyState:
        """Read the currently held keys.

        Returns:
            KeyState for this frame.
        """
        pass
