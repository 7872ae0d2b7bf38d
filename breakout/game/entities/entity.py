"""Positioned, sized, colored rectangle moving at constant velocity.

The ball and every brick are plain entities. Ball behavior (its start
velocity, respawning on a miss) lives in the game mode, not in a type.
"""

from typing import Optional

import pygame

from breakout.config import (
    BALL_SIZE, BALL_START_VX, BALL_START_VY, ENTITY_COLOR,
)
from breakout.models import Color, Rectangle, Vector2D


class Entity:
    """Axis-aligned rectangle with a center position and velocity.

    The rectangle is derived from the position and recomputed whenever
    the position changes. Its origin sits at ``position + size / 2``,
    which puts the box right of and below the center point. Collision
    tests everywhere use this box, so gameplay depends on the offset.
    """

    def __init__(
        self,
        position: Vector2D,
        width: float,
        height: float,
        color: Optional[Color] = None,
    ):
        """Initialize entity.

        Args:
            position: Center position
            width: Rectangle width
            height: Rectangle height
            color: Fill color (defaults to ENTITY_COLOR)
        """
        self._width = width
        self._height = height
        self._color = color or ENTITY_COLOR
        self._velocity = Vector2D(x=0.0, y=0.0)
        self._position = position
        self._rectangle = self._compute_rectangle()

    @property
    def position(self) -> Vector2D:
        """Get center position."""
        return self._position

    @position.setter
    def position(self, value: Vector2D) -> None:
        """Set center position and recompute the rectangle."""
        self._position = value
        self._update_rectangle()

    @property
    def velocity(self) -> Vector2D:
        """Get velocity in pixels per frame."""
        return self._velocity

    @velocity.setter
    def velocity(self, value: Vector2D) -> None:
        self._velocity = value

    @property
    def rectangle(self) -> Rectangle:
        """Get bounding rectangle."""
        return self._rectangle

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def color(self) -> Color:
        return self._color

    def set_color(self, color: Color) -> None:
        """Change fill color."""
        self._color = color

    def check_collision(self, other: Rectangle) -> bool:
        """Check if this entity's rectangle overlaps ``other``.

        Args:
            other: Rectangle to test against

        Returns:
            True if rectangles overlap or touch
        """
        return self._rectangle.intersects(other)

    def update(self) -> None:
        """Advance one frame: move by velocity, then refresh the rectangle."""
        self._update_position()
        self._update_rectangle()

    def draw(self, screen: pygame.Surface) -> None:
        """Draw as a filled rectangle.

        Args:
            screen: Pygame surface to draw on
        """
        pygame.draw.rect(screen, self._color.as_rgb_tuple, self._rectangle.to_tuple())

    def _compute_rectangle(self) -> Rectangle:
        return Rectangle(
            x=self._position.x + self._width / 2,
            y=self._position.y + self._height / 2,
            width=self._width,
            height=self._height,
        )

    def _update_rectangle(self) -> None:
        self._rectangle = self._compute_rectangle()

    def _update_position(self) -> None:
        self._position = Vector2D(
            x=self._position.x + self._velocity.x,
            y=self._position.y + self._velocity.y,
        )

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(position={self._position}, "
                f"velocity={self._velocity}, size={self._width}x{self._height})")


def create_ball(screen_width: int, screen_height: int) -> Entity:
    """Create a ball at the screen center with the start velocity.

    Args:
        screen_width: Screen width in pixels
        screen_height: Screen height in pixels

    Returns:
        New ball entity
    """
    ball = Entity(
        Vector2D(x=float(screen_width // 2), y=float(screen_height // 2)),
        BALL_SIZE,
        BALL_SIZE,
    )
    ball.velocity = Vector2D(x=BALL_START_VX, y=BALL_START_VY)
    return ball
