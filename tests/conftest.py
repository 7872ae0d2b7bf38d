"""Pytest fixtures for breakout tests."""
import os

# Headless pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from breakout import logging as game_logging
from breakout.game_mode import BreakoutMode
from breakout.input import KeyState
from breakout.models import Vector2D


@pytest.fixture
def game():
    """Fresh 1280x720 session with 3 lives."""
    return BreakoutMode(width=1280, height=720, lives=3)


@pytest.fixture
def screen():
    """Offscreen surface the size of the default window."""
    pygame.font.init()
    surface = pygame.Surface((1280, 720))
    yield surface
    pygame.font.quit()


@pytest.fixture
def no_keys():
    return KeyState()


@pytest.fixture
def restore_logging():
    """Restore logging configuration after a test."""
    saved_default = game_logging._config['default_level']
    saved_modules = dict(game_logging._config['module_levels'])
    yield
    game_logging._config['default_level'] = saved_default
    game_logging._config['module_levels'] = saved_modules


@pytest.fixture
def place_ball():
    """Put the ball so that the next update() lands it at (x, y)."""
    def _place(game, x, y, vx=2.0, vy=2.0):
        game.ball.velocity = Vector2D(x=vx, y=vy)
        game.ball.position = Vector2D(x=x - vx, y=y - vy)
    return _place
