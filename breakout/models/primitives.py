"""
Shared primitive data types for the game.

This module provides the basic geometric and color types used by the
entities, the collision code and the skins.
"""

from pydantic import BaseModel, field_validator, computed_field, ConfigDict
from typing import Tuple


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions, velocities and accelerations.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical, grows downward)

    Examples:
        >>> pos = Point2D(x=640.0, y=360.0)
        >>> vel = Point2D(x=2.0, y=2.0)  # Moving right and down
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


# Velocities and accelerations read better as vectors
Vector2D = Point2D


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)
        a: Alpha/opacity component (0-255), where 255 is fully opaque

    Examples:
        >>> raywhite = Color(r=245, g=245, b=245)
        >>> raywhite.as_rgb_tuple
        (245, 245, 245)
    """
    r: int
    g: int
    b: int
    a: int = 255  # Default to fully opaque

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @computed_field
    @property
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return color as RGBA tuple for pygame compatibility."""
        return (self.r, self.g, self.b, self.a)

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple (without alpha)."""
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"


class Rectangle(BaseModel):
    """Immutable axis-aligned rectangle defined by position and dimensions.

    Used for entity bounds, the screen boundaries and every collision
    test in the game. Position is the top-left corner (pygame convention).

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> top = Rectangle(x=0.0, y=0.0, width=1280.0, height=1.0)
        >>> top.bottom
        1.0
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @computed_field
    @property
    def center(self) -> Point2D:
        """Center point of the rectangle."""
        return Point2D(
            x=self.x + self.width / 2,
            y=self.y + self.height / 2
        )

    @computed_field
    @property
    def left(self) -> float:
        """Get left edge x coordinate."""
        return self.x

    @computed_field
    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.x + self.width

    @computed_field
    @property
    def top(self) -> float:
        """Get top edge y coordinate."""
        return self.y

    @computed_field
    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    def intersects(self, other: 'Rectangle') -> bool:
        """Check if this rectangle overlaps another rectangle.

        Both axes must overlap; rectangles that only share an edge
        count as intersecting.

        Args:
            other: Another rectangle to check intersection with

        Returns:
            True if rectangles overlap or touch

        Examples:
            >>> left_wall = Rectangle(x=0.0, y=0.0, width=1.0, height=720.0)
            >>> ball = Rectangle(x=1.0, y=100.0, width=10.0, height=10.0)
            >>> ball.intersects(left_wall)
            True
        """
        return not (self.right < other.left or
                   self.left > other.right or
                   self.bottom < other.top or
                   self.top > other.bottom)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        """Return (x, y, width, height) for pygame draw calls."""
        return (self.x, self.y, self.width, self.height)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
