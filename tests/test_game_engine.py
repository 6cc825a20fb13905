from collections import defaultdict

import pygame
import pytest

from pong import config
from pong.components import Ball, BallState, Paddle, Side, Transform
from pong.game_engine import GameEngine
from pong.sound import SoundManager


@pytest.fixture
def engine(pygame_display, tmp_path):
    return GameEngine(200, sound=SoundManager(str(tmp_path)))


def keys_down(*pressed):
    keys = defaultdict(bool)
    for key in pressed:
        keys[key] = True
    return keys


def ball_of(engine):
    return engine.world.get_component(engine.ball, Ball)


def test_engine_spawns_paddles_and_waiting_ball(engine):
    sides = {paddle.side for _, (paddle,) in engine.world.query(Paddle)}
    assert sides == {Side.LEFT, Side.RIGHT}
    assert ball_of(engine).state is BallState.WAITING
    transform = engine.world.get_component(engine.ball, Transform)
    assert (transform.x, transform.y) == (config.HALF_WIDTH, config.HALF_HEIGHT)


def test_keys_drive_paddles(engine):
    engine.handle_input([], keys=keys_down(pygame.K_w, pygame.K_DOWN))
    engine.update(0.1)
    left = engine.world.get_component(engine.left_paddle, Transform)
    right = engine.world.get_component(engine.right_paddle, Transform)
    assert left.y > config.PADDLE_INITIAL_Y
    assert right.y < config.PADDLE_INITIAL_Y


def test_quit_requests(engine):
    engine.handle_input([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)], keys=keys_down())
    assert not engine.request_quit
    engine.handle_input([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q)], keys=keys_down())
    assert engine.request_quit


def test_ball_serves_after_waiting(engine):
    for _ in range(30):
        engine.update(0.1)
    assert ball_of(engine).state is BallState.MOVING


def test_to_screen_flips_y(engine):
    assert engine.to_screen(0.0, 0.0) == (0.0, 200.0)
    assert engine.to_screen(100.0, 100.0) == (200.0, 0.0)


def test_render_draws_a_frame(engine, pygame_display):
    engine.update(0.1)
    pygame_display.fill(config.BACKGROUND)
    engine.render(pygame_display)
    # Left paddle is white near the left edge at mid height
    assert pygame_display.get_at((2, 100))[:3] == (255, 255, 255)
