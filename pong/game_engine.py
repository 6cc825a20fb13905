import logging
import os

import pygame

from . import config
from .components import (
    Ball,
    CyclingColor,
    Paddle,
    ScoreBoard,
    ScoreText,
    Side,
    Tint,
    Transform,
)
from .sound import SoundManager
from .systems import (
    BounceSystem,
    CyclingColorSystem,
    Dispatcher,
    MoveBallsSystem,
    PaddleSystem,
    WinnerSystem,
)
from .world import World

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255)
GREY = (200, 200, 200)

# (up, down) keys per side
PADDLE_KEYS = {
    Side.LEFT: (pygame.K_w, pygame.K_s),
    Side.RIGHT: (pygame.K_UP, pygame.K_DOWN),
}
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def initialise_paddles(world):
    """One paddle on the left edge, one on the right, both centred."""
    left = world.create_entity(
        Paddle(Side.LEFT),
        Transform(config.PADDLE_LEFT_X, config.PADDLE_INITIAL_Y),
    )
    right = world.create_entity(
        Paddle(Side.RIGHT),
        Transform(config.PADDLE_RIGHT_X, config.PADDLE_INITIAL_Y),
    )
    return left, right


def initialise_ball(world):
    cycling = CyclingColor(config.BALL_COLOR, config.BALL_CYCLE_PERIOD)
    cycling.start()
    return world.create_entity(
        Ball(
            serve_velocity=(config.BALL_VELOCITY_X, config.BALL_VELOCITY_Y),
            radius=config.BALL_RADIUS,
            acceleration=config.BALL_ACCELERATION,
            max_velocity=(config.BALL_MAX_VELOCITY_X, config.BALL_MAX_VELOCITY_Y),
            serve_time=config.BALL_WAITING_TIME,
        ),
        Transform(config.HALF_WIDTH, config.HALF_HEIGHT),
        Tint(config.WHITE),
        cycling,
    )


class GameEngine:
    def __init__(self, screen_size=config.WINDOW_SIZE, sound=None):
        self.screen_size = screen_size
        self.scale = screen_size / config.ARENA_WIDTH

        if sound is None:
            sound = SoundManager(base_dir=os.path.dirname(os.path.abspath(__file__)))
        self.sfx = sound

        # Entities
        self.world = World()
        self.left_paddle, self.right_paddle = initialise_paddles(self.world)
        self.ball = initialise_ball(self.world)

        # Scores
        self.scores = ScoreBoard()
        self.score_text = ScoreText()

        # Systems, in frame order: input, motion, collision, scoring, effects
        self.paddles = PaddleSystem()
        self.dispatcher = Dispatcher([
            self.paddles,
            MoveBallsSystem(),
            BounceSystem(on_bounce=self.sfx.play_bounce),
            WinnerSystem(self.scores, self.score_text, on_score=self.sfx.play_score),
            CyclingColorSystem(),
        ])

        self.font = pygame.font.SysFont("Arial", 48)
        self.request_quit = False
        logger.info("Arena %gx%g ready, ball serves in %gs",
                    config.ARENA_WIDTH, config.ARENA_HEIGHT, config.BALL_WAITING_TIME)

    # ---------- Input ----------
    def handle_input(self, events, keys=None):
        for event in events:
            if event.type == pygame.QUIT:
                self.request_quit = True
            elif event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
                self.request_quit = True

        if keys is None:
            keys = pygame.key.get_pressed()
        # Arena y grows upwards, so "up" is a positive axis
        for side, (up, down) in PADDLE_KEYS.items():
            self.paddles.set_axis(side, (1.0 if keys[up] else 0.0) - (1.0 if keys[down] else 0.0))

    # ---------- Update ----------
    def update(self, dt: float):
        self.dispatcher.dispatch(self.world, dt)

    # ---------- Render ----------
    def to_screen(self, x, y):
        return x * self.scale, (config.ARENA_HEIGHT - y) * self.scale

    def render(self, screen):
        mid_x = self.screen_size // 2
        pygame.draw.aaline(screen, GREY, (mid_x, 0), (mid_x, self.screen_size))

        for _, (paddle, transform) in self.world.query(Paddle, Transform):
            sx, sy = self.to_screen(transform.x - paddle.width * 0.5,
                                    transform.y + paddle.height * 0.5)
            rect = pygame.Rect(int(sx), int(sy),
                               int(paddle.width * self.scale), int(paddle.height * self.scale))
            pygame.draw.rect(screen, WHITE, rect)

        for _, (ball, transform, tint) in self.world.query(Ball, Transform, Tint):
            sx, sy = self.to_screen(transform.x, transform.y)
            pygame.draw.circle(screen, tint.color.to_rgba255()[:3], (int(sx), int(sy)),
                               max(1, int(ball.radius * self.scale)))

        left = self.font.render(self.score_text.left, True, WHITE)
        right = self.font.render(self.score_text.right, True, WHITE)
        screen.blit(left, left.get_rect(midtop=(self.screen_size // 4, 20)))
        screen.blit(right, right.get_rect(midtop=(self.screen_size * 3 // 4, 20)))
