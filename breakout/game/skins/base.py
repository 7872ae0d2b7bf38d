"""Base class for Breakout game skins.

Skins handle ALL rendering - the game only manages state.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from ..entities.entity import Entity


class BreakoutSkin(ABC):
    """Base class for game skins.

    The game mode decides what is visible each frame; the skin decides
    how it looks.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def clear(self, screen: pygame.Surface) -> None:
        """Clear the frame.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_entity(self, entity: 'Entity', screen: pygame.Surface) -> None:
        """Render a ball, paddle or brick.

        Args:
            entity: Entity to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_hud(
        self,
        screen: pygame.Surface,
        fps_text: str,
        lives_text: str,
        score_text: str,
    ) -> None:
        """Render the heads-up display.

        Args:
            screen: Pygame surface to draw on
            fps_text: Frame rate line
            lives_text: Remaining lives line
            score_text: Score line
        """
        pass

    @abstractmethod
    def render_game_over(self, screen: pygame.Surface) -> None:
        """Render the game over banner.

        Args:
            screen: Pygame surface to draw on
        """
        pass
