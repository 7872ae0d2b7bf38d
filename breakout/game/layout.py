"""Brick grid layout."""

from typing import List

from breakout.config import (
    BRICK_WIDTH, BRICK_HEIGHT, BRICKS_PER_ROW, BRICK_ROWS,
    BRICK_START_X, BRICK_STEP_X, BRICK_START_Y, BRICK_STEP_Y,
)
from breakout.models import Vector2D

from .entities.entity import Entity


def create_bricks(
    rows: int = BRICK_ROWS,
    per_row: int = BRICKS_PER_ROW,
) -> List[Entity]:
    """Create the brick wall, row by row from the top.

    Args:
        rows: Number of rows
        per_row: Bricks in each row

    Returns:
        Bricks in row-major order
    """
    bricks = []
    for row in range(rows):
        y = BRICK_START_Y + BRICK_STEP_Y * row
        for col in range(per_row):
            x = BRICK_START_X + BRICK_STEP_X * col
            bricks.append(Entity(Vector2D(x=x, y=y), BRICK_WIDTH, BRICK_HEIGHT))
    return bricks
