"""Collision detection and bounce resolution for Breakout.

Handles ball-boundary, ball-paddle and ball-brick collisions. Bounces
are instant sign changes on one velocity component; there is no
reflection geometry.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, TYPE_CHECKING

from breakout.config import BOUNDARY_THICKNESS
from breakout.models import Rectangle, Vector2D

if TYPE_CHECKING:
    from ..entities.entity import Entity


class BounceDirection(Enum):
    """Which way the ball is knocked on a hit."""

    TOP = 't'      # Flip vertical velocity
    LEFT = 'l'     # Flip horizontal velocity
    RIGHT = 'r'    # Flip horizontal velocity
    UP = 'u'       # Force vertical velocity upward


@dataclass(frozen=True)
class Boundaries:
    """One-pixel strips along the four window edges."""

    top: Rectangle
    bottom: Rectangle
    left: Rectangle
    right: Rectangle


def create_boundaries(screen_width: float, screen_height: float) -> Boundaries:
    """Build the boundary strips for a window size.

    Args:
        screen_width: Screen width in pixels
        screen_height: Screen height in pixels

    Returns:
        Boundaries hugging each edge of the window
    """
    t = BOUNDARY_THICKNESS
    return Boundaries(
        top=Rectangle(x=0, y=0, width=screen_width, height=t),
        bottom=Rectangle(x=0, y=screen_height - t, width=screen_width, height=t),
        left=Rectangle(x=0, y=0, width=t, height=screen_height),
        right=Rectangle(x=screen_width - t, y=0, width=t, height=screen_height),
    )


def check_collision_recs(a: Rectangle, b: Rectangle) -> bool:
    """Check if two rectangles overlap (touching edges count).

    Args:
        a: First rectangle
        b: Second rectangle

    Returns:
        True if rectangles overlap
    """
    return a.intersects(b)


def check_boundary_collision(ball: 'Entity', boundaries: Boundaries) -> Optional[str]:
    """Find the boundary the ball is touching.

    Boundaries are tested in priority order bottom, top, left, right and
    only the first match is reported, even in a corner where two overlap.

    Args:
        ball: Ball to check
        boundaries: Window boundaries

    Returns:
        "bottom", "top", "left", "right", or None if no boundary is touched
    """
    for name in ('bottom', 'top', 'left', 'right'):
        if check_collision_recs(ball.rectangle, getattr(boundaries, name)):
            return name
    return None


def ball_bounce(ball: 'Entity', direction: BounceDirection) -> None:
    """Apply a bounce to the ball's velocity in place.

    Args:
        ball: Ball to bounce
        direction: Bounce tag
    """
    vx, vy = ball.velocity.x, ball.velocity.y

    if direction is BounceDirection.TOP:
        vy *= -1
    elif direction is BounceDirection.LEFT:
        vx *= -1
    elif direction is BounceDirection.RIGHT:
        vx *= -1
    else:
        vy = -abs(vy)

    ball.velocity = Vector2D(x=vx, y=vy)


def get_brick_bounce_directions(
    ball: 'Entity',
    brick: 'Entity',
) -> List[BounceDirection]:
    """Work out how a brick hit knocks the ball.

    Compares the ball center against the brick center plus or minus half
    the brick size, independently on each side. A corner hit can match
    on both axes; a hit inside the brick's center band matches nothing.

    Args:
        ball: Ball that overlaps the brick
        brick: Brick that was hit

    Returns:
        Bounces to apply, in order below, above, left, right
    """
    directions: List[BounceDirection] = []
    half_w = brick.width / 2
    half_h = brick.height / 2

    # Ball below the brick
    if ball.position.y > brick.position.y + half_h:
        directions.append(BounceDirection.TOP)
    # Ball above the brick
    if ball.position.y < brick.position.y - half_h:
        directions.append(BounceDirection.UP)
    # Ball left of the brick
    if ball.position.x < brick.position.x - half_w:
        directions.append(BounceDirection.LEFT)
    # Ball right of the brick
    if ball.position.x > brick.position.x + half_w:
        directions.append(BounceDirection.RIGHT)

    return directions
