"""Breakout - Standalone Entry Point.

Usage:
    breakout
    python -m breakout

Controls:
    Left / A     accelerate paddle left
    Right / D    accelerate paddle right
    ESC          quit

Window size, frame rate and starting lives come from the environment
(or a .env file), see breakout.config.
"""

import pygame

from breakout.config import SCREEN_WIDTH, SCREEN_HEIGHT, TARGET_FPS, WINDOW_TITLE
from breakout.game_mode import BreakoutMode
from breakout.input import KeyboardInputSource
from breakout.logging import get_logger

log = get_logger('main')


def _should_close() -> bool:
    """Drain the event queue and report a close request (window X or ESC)."""
    close = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            close = True
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            close = True
    return close


def main() -> int:
    """Run Breakout until the window is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        game = BreakoutMode(width=SCREEN_WIDTH, height=SCREEN_HEIGHT)
        keyboard = KeyboardInputSource()
        clock = pygame.time.Clock()

        log.info("Starting %s at %d FPS", WINDOW_TITLE, TARGET_FPS)

        while not _should_close():
            game.step(keyboard.poll())
            game.render(screen, int(clock.get_fps()))
            pygame.display.flip()
            clock.tick(TARGET_FPS)

        log.info("Window closed, final score %d", game.score)
    except Exception:
        log.exception("Breakout crashed")
        raise
    finally:
        pygame.quit()
    return 0

