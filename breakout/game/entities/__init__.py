"""Breakout game entities."""

from .entity import Entity, create_ball
from .player import Player, PlayerConfig, create_player

__all__ = [
    'Entity', 'create_ball',
    'Player', 'PlayerConfig', 'create_player',
]
