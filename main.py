import logging
import os

import pygame

from pong import config
from pong.game_engine import GameEngine


def configure_logging():
    level = os.environ.get("PONG_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    configure_logging()

    # Initialize pygame/Start application
    pygame.init()
    screen = pygame.display.set_mode((config.WINDOW_SIZE, config.WINDOW_SIZE))
    pygame.display.set_caption("Pong")
    clock = pygame.time.Clock()

    engine = GameEngine(config.WINDOW_SIZE)

    running = True
    while running:
        dt = clock.tick(config.FPS) / 1000.0  # seconds since last frame
        events = pygame.event.get()

        # Handle input & update game state
        engine.handle_input(events)
        engine.update(dt)

        # Render
        screen.fill(config.BACKGROUND)
        engine.render(screen)
        pygame.display.flip()

        if engine.request_quit:
            running = False

    pygame.quit()


if __name__ == "__main__":
    main()
