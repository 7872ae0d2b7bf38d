"""
Key State - Held directional keys for a single frame.

Uses Pydantic for validation and immutability.
"""
from pydantic import BaseModel, ConfigDict


class KeyState(BaseModel):
    """Immutable snapshot of the directional keys held this frame.

    Attributes:
        left: A move-left key is held
        right: A move-right key is held
    """
    left: bool = False
    right: bool = False

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"KeyState(left={self.left}, right={self.right})"
