"""Breakout - frame controller.

Owns the ball, the paddle, the bricks and the window boundaries and
advances them one fixed step per frame:

1. Keyboard input drives the paddle's acceleration
2. Paddle and ball move
3. The ball resolves at most one of: miss (bottom), top, left, right
   or paddle, in that priority order
4. The paddle is pushed back off the side walls
5. The first brick the ball overlaps is knocked out
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import pygame

from .config import SCREEN_WIDTH, SCREEN_HEIGHT, STARTING_LIVES
from .game.entities import Entity, Player, create_ball, create_player
from .game.layout import create_bricks
from .game.physics import (
    BounceDirection,
    Boundaries,
    ball_bounce,
    check_boundary_collision,
    check_collision_recs,
    create_boundaries,
    get_brick_bounce_directions,
)
from .game.skins import BreakoutSkin, ClassicSkin
from .game_state import GameState
from .input import KeyState
from .logging import get_logger

log = get_logger('game_mode')

_WALL_BOUNCES = {
    'top': BounceDirection.TOP,
    'left': BounceDirection.LEFT,
    'right': BounceDirection.RIGHT,
}


@dataclass
class GameSession:
    """Mutable state of one run from start to window close.

    :ivar lives: Remaining lives, never below zero
    :ivar score: Bricks knocked out
    :ivar ball: Ball entity, replaced on every miss
    :ivar player: Paddle entity
    :ivar bricks: Remaining bricks in scan order
    :ivar boundaries: Window edge strips
    """

    lives: int
    score: int
    ball: Entity
    player: Player
    boundaries: Boundaries
    bricks: List[Entity] = field(default_factory=list)

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        lives: int = STARTING_LIVES,
    ) -> 'GameSession':
        """Create a fresh session for a window size."""
        return cls(
            lives=lives,
            score=0,
            ball=create_ball(width, height),
            player=create_player(width, height),
            boundaries=create_boundaries(width, height),
            bricks=create_bricks(),
        )


class BreakoutMode:
    """Breakout game mode.

    The simulation steps once per rendered frame with no delta-time
    scaling; the caller paces frames (60 per second by default).
    """

    NAME = "Breakout"
    DESCRIPTION = "Keep the ball in play and knock out the brick wall."

    def __init__(
        self,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        lives: int = STARTING_LIVES,
        skin: Optional[BreakoutSkin] = None,
    ):
        """Initialize a new session.

        Args:
            width: Screen width
            height: Screen height
            lives: Starting lives
            skin: Renderer (defaults to ClassicSkin)
        """
        self._screen_width = width
        self._screen_height = height
        self._session = GameSession.new(width, height, lives)
        self._skin = skin or ClassicSkin()

        log.info(
            "New session: %dx%d, %d lives, %d bricks",
            width, height, lives, len(self._session.bricks),
        )

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def state(self) -> GameState:
        """Get current game state."""
        if self._session.lives > 0:
            return GameState.PLAYING
        return GameState.GAME_OVER

    @property
    def lives(self) -> int:
        return self._session.lives

    @property
    def score(self) -> int:
        return self._session.score

    @property
    def ball(self) -> Entity:
        return self._session.ball

    @property
    def player(self) -> Player:
        return self._session.player

    @property
    def bricks(self) -> List[Entity]:
        return self._session.bricks

    @property
    def boundaries(self) -> Boundaries:
        return self._session.boundaries

    def handle_input(self, keys: KeyState) -> None:
        """Feed this frame's held keys to the paddle.

        Input is accepted after game over as well; only drawing changes.

        Args:
            keys: Held-key state for this frame
        """
        self._session.player.check_input(keys)

    def update(self) -> None:
        """Advance the simulation by one frame."""
        session = self._session

        session.player.update()
        session.ball.update()

        self._handle_ball_collisions()
        self._handle_paddle_walls()
        self._handle_brick_collisions()

    def step(self, keys: KeyState) -> None:
        """Run input and simulation for one frame."""
        self.handle_input(keys)
        self.update()

    def _handle_ball_collisions(self) -> None:
        """Resolve the ball against boundaries and paddle, first match only."""
        session = self._session
        ball = session.ball

        hit = check_boundary_collision(ball, session.boundaries)
        if hit == 'bottom':
            self._lose_life()
        elif hit is not None:
            ball_bounce(ball, _WALL_BOUNCES[hit])
        elif check_collision_recs(ball.rectangle, session.player.rectangle):
            ball_bounce(ball, BounceDirection.UP)

    def _handle_paddle_walls(self) -> None:
        """Keep the paddle from sliding through the side walls."""
        player = self._session.player
        boundaries = self._session.boundaries

        if check_collision_recs(player.rectangle, boundaries.left):
            player.prevent_left()
        elif player.check_collision(boundaries.right):
            player.prevent_right()

    def _handle_brick_collisions(self) -> None:
        """Knock out the first brick the ball overlaps."""
        session = self._session
        ball = session.ball

        for i, brick in enumerate(session.bricks):
            if not check_collision_recs(ball.rectangle, brick.rectangle):
                continue

            for direction in get_brick_bounce_directions(ball, brick):
                ball_bounce(ball, direction)

            # The last brick stays on the board
            if len(session.bricks) > 1:
                del session.bricks[i]
            session.score += 1

            log.debug(
                "Brick hit at %s, score %d, %d bricks left",
                brick.position, session.score, len(session.bricks),
            )

            # Only handle one brick collision per frame
            break

    def _lose_life(self) -> None:
        """Handle the ball leaving through the bottom."""
        session = self._session
        was_playing = session.lives > 0
        session.lives = max(0, session.lives - 1)
        session.ball = create_ball(self._screen_width, self._screen_height)

        if was_playing:
            log.info("Life lost, %d remaining", session.lives)
            if session.lives == 0:
                log.info("Game over, final score %d", session.score)

    def hud_text(self, fps: int) -> Tuple[str, str, str]:
        """Build the HUD lines.

        Args:
            fps: Measured frames per second

        Returns:
            Tuple of (fps, lives, score) display strings
        """
        return (
            f"FPS: {fps}",
            f"Lives: {self._session.lives}",
            f"Score: {self._session.score}",
        )

    def render(self, screen: pygame.Surface, fps: int = 0) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
            fps: Measured frames per second for the HUD
        """
        session = self._session
        self._skin.clear(screen)

        for brick in session.bricks:
            self._skin.render_entity(brick, screen)

        if self.state == GameState.PLAYING:
            self._skin.render_entity(session.ball, screen)
            self._skin.render_entity(session.player, screen)
        else:
            self._skin.render_game_over(screen)

        self._skin.render_hud(screen, *self.hud_text(fps))
