import os

# Headless pygame: must be set before the display/mixer are touched
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from pong.world import World


@pytest.fixture
def world():
    return World()


@pytest.fixture
def pygame_display():
    pygame.init()
    surface = pygame.display.set_mode((200, 200))
    yield surface
    pygame.quit()
