"""Session states for the breakout game.

The game has no menus or pause; a session is either being played or
over. GAME_OVER is absorbing: the loop keeps running but the game never
returns to PLAYING.
"""
from enum import Enum


class GameState(Enum):
    """Game session states.

    States:
        PLAYING: Lives remain, ball and paddle are drawn
        GAME_OVER: No lives left, "Game Over" banner is drawn instead
    """
    PLAYING = "playing"
    GAME_OVER = "game_over"
