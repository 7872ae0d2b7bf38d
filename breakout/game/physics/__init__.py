"""Breakout physics and collision detection."""

from .collision import (
    BounceDirection,
    Boundaries,
    ball_bounce,
    check_boundary_collision,
    check_collision_recs,
    create_boundaries,
    get_brick_bounce_directions,
)

__all__ = [
    'BounceDirection',
    'Boundaries',
    'ball_bounce',
    'check_boundary_collision',
    'check_collision_recs',
    'create_boundaries',
    'get_brick_bounce_directions',
]
