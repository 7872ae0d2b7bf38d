"""Player paddle with keyboard-driven acceleration.

Holding a direction builds up horizontal acceleration, which feeds the
velocity one frame later. Releasing the keys drops acceleration to zero
and friction bleeds the velocity off until the paddle stops dead.
"""

from dataclasses import dataclass
from typing import Optional

from breakout.config import (
    PADDLE_ACCELERATION_STEP, PADDLE_MAX_ACCELERATION, PADDLE_FRICTION,
    PADDLE_STOP_THRESHOLD, PADDLE_WALL_BOUNCE,
    PADDLE_WIDTH, PADDLE_HEIGHT, PADDLE_BOTTOM_OFFSET,
)
from breakout.input import KeyState
from breakout.logging import get_logger
from breakout.models import Vector2D

from .entity import Entity

log = get_logger('player')


@dataclass
class PlayerConfig:
    """Paddle handling parameters."""

    acceleration_step: float = PADDLE_ACCELERATION_STEP
    max_acceleration: float = PADDLE_MAX_ACCELERATION
    friction: float = PADDLE_FRICTION
    stop_threshold: float = PADDLE_STOP_THRESHOLD
    wall_bounce: float = PADDLE_WALL_BOUNCE


class Player(Entity):
    """Paddle entity with an acceleration vector."""

    def __init__(
        self,
        position: Vector2D,
        width: float,
        height: float,
        config: Optional[PlayerConfig] = None,
    ):
        """Initialize paddle at rest.

        Args:
            position: Center position
            width: Paddle width
            height: Paddle height
            config: Handling parameters (defaults from config module)
        """
        super().__init__(position, width, height)
        self._config = config or PlayerConfig()
        self._acceleration = Vector2D(x=0.0, y=0.0)
        self.init()

    @property
    def acceleration(self) -> Vector2D:
        """Get current acceleration."""
        return self._acceleration

    @acceleration.setter
    def acceleration(self, value: Vector2D) -> None:
        self._acceleration = value

    @property
    def config(self) -> PlayerConfig:
        return self._config

    def init(self) -> None:
        """Zero acceleration and velocity."""
        self._acceleration = Vector2D(x=0.0, y=0.0)
        self.velocity = Vector2D(x=0.0, y=0.0)

    def check_input(self, keys: KeyState) -> None:
        """Apply one frame of keyboard input.

        Left takes precedence when both directions are held. With no
        direction held, acceleration snaps to zero and friction slows
        the paddle; once slower than the stop threshold it halts.

        Args:
            keys: Held-key state for this frame
        """
        cfg = self._config
        ax = self._acceleration.x

        if keys.left:
            ax -= cfg.acceleration_step
            if ax < -cfg.max_acceleration:
                ax = -cfg.max_acceleration
        elif keys.right:
            ax += cfg.acceleration_step
            if ax > cfg.max_acceleration:
                ax = cfg.max_acceleration
        else:
            ax = 0.0

        self._acceleration = Vector2D(x=ax, y=self._acceleration.y)

        vx = self.velocity.x
        if ax == 0 and vx != 0:
            if vx > 0:
                vx -= cfg.friction
            elif vx < 0:
                vx += cfg.friction

        if ax == 0 and abs(vx) < cfg.stop_threshold:
            vx = 0.0

        self.velocity = Vector2D(x=vx, y=self.velocity.y)

    def update(self) -> None:
        """Move by the current velocity, then accelerate for the next frame."""
        self._update_position()
        self._update_rectangle()
        self._update_velocity()

    def prevent_left(self) -> None:
        """Push the paddle back off the left boundary."""
        if self.velocity.x < 0:
            log.trace("Paddle hit left wall at vx=%.2f", self.velocity.x)
            self.velocity = Vector2D(
                x=self.velocity.x * self._config.wall_bounce,
                y=self.velocity.y,
            )

    def prevent_right(self) -> None:
        """Push the paddle back off the right boundary."""
        if self.velocity.x > 0:
            log.trace("Paddle hit right wall at vx=%.2f", self.velocity.x)
            self.velocity = Vector2D(
                x=self.velocity.x * self._config.wall_bounce,
                y=self.velocity.y,
            )

    def _update_velocity(self) -> None:
        self.velocity = Vector2D(
            x=self.velocity.x + self._acceleration.x,
            y=self.velocity.y + self._acceleration.y,
        )


def create_player(screen_width: int, screen_height: int) -> Player:
    """Create the paddle centered horizontally near the bottom edge.

    Args:
        screen_width: Screen width in pixels
        screen_height: Screen height in pixels

    Returns:
        New paddle at rest
    """
    player = Player(
        Vector2D(x=screen_width / 2.0, y=float(screen_height - PADDLE_BOTTOM_OFFSET)),
        PADDLE_WIDTH,
        PADDLE_HEIGHT,
    )
    player.init()
    return player
