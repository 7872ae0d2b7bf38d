"""Classic skin - white rectangles and gray text on black."""

from typing import Dict, TYPE_CHECKING

import pygame

from .base import BreakoutSkin
from ...config import (
    BACKGROUND_COLOR, HUD_COLOR,
    HUD_FONT_SIZE, HUD_MARGIN, HUD_LIVES_OFFSET,
    GAME_OVER_FONT_SIZE, GAME_OVER_OFFSET_X,
)

if TYPE_CHECKING:
    from ..entities.entity import Entity


class ClassicSkin(BreakoutSkin):
    """Renders the game as flat filled rectangles.

    - Entities: filled rectangle in the entity's own color
    - HUD: FPS top left, score top center, lives top right
    - Game over: large banner just left of the screen center
    """

    NAME = "classic"
    DESCRIPTION = "Flat rectangles on black"

    GAME_OVER_TEXT = "Game Over"

    def __init__(self):
        """Initialize classic skin."""
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _get_font(self, size: int) -> pygame.font.Font:
        """Get the default font at a size, loading it on first use."""
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _draw_text(
        self,
        screen: pygame.Surface,
        text: str,
        x: int,
        y: int,
        size: int,
    ) -> None:
        surface = self._get_font(size).render(text, True, HUD_COLOR.as_rgb_tuple)
        screen.blit(surface, (x, y))

    def clear(self, screen: pygame.Surface) -> None:
        """Fill the frame with the background color."""
        screen.fill(BACKGROUND_COLOR.as_rgb_tuple)

    def render_entity(self, entity: 'Entity', screen: pygame.Surface) -> None:
        """Render entity as a filled rectangle."""
        entity.draw(screen)

    def render_hud(
        self,
        screen: pygame.Surface,
        fps_text: str,
        lives_text: str,
        score_text: str,
    ) -> None:
        """Render FPS, score and lives along the top edge."""
        width = screen.get_width()
        self._draw_text(screen, fps_text, HUD_MARGIN, HUD_MARGIN, HUD_FONT_SIZE)
        self._draw_text(screen, lives_text, width - HUD_LIVES_OFFSET, HUD_MARGIN, HUD_FONT_SIZE)
        self._draw_text(screen, score_text, width // 2, HUD_MARGIN, HUD_FONT_SIZE)

    def render_game_over(self, screen: pygame.Surface) -> None:
        """Render the game over banner."""
        self._draw_text(
            screen,
            self.GAME_OVER_TEXT,
            screen.get_width() // 2 - GAME_OVER_OFFSET_X,
            screen.get_height() // 2,
            GAME_OVER_FONT_SIZE,
        )
