from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import pygame

from . import config


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


class Color(NamedTuple):
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def to_rgba255(self):
        """Convert to the 0..255 integer tuple pygame draws with."""
        return tuple(int(round(max(0.0, min(1.0, c)) * 255)) for c in self)


class Paddle:
    def __init__(self, side: Side, width=config.PADDLE_WIDTH, height=config.PADDLE_HEIGHT):
        self.side = side
        self.width = width
        self.height = height


class BallState(Enum):
    WAITING = "waiting"
    MOVING = "moving"


class Ball:
    def __init__(self, velocity=None, radius=config.BALL_RADIUS,
                 acceleration=config.BALL_ACCELERATION, max_velocity=None,
                 waiting_time=config.BALL_WAITING_TIME,
                 serve_velocity=(config.BALL_VELOCITY_X, config.BALL_VELOCITY_Y),
                 serve_time=config.BALL_WAITING_TIME):
        # wait() always re-arms with the serve values, whatever the ball started with
        self.base_velocity = pygame.math.Vector2(serve_velocity)
        self.serve_time = serve_time
        self.velocity = pygame.math.Vector2(serve_velocity if velocity is None else velocity)
        if max_velocity is None:
            max_velocity = (abs(self.base_velocity.x) * 2.0, abs(self.base_velocity.y) * 2.0)
        self.max_velocity = pygame.math.Vector2(max_velocity)
        self.radius = radius
        self.acceleration = acceleration

        # Freshly spawned balls sit still until the timer runs out
        self.state = BallState.WAITING
        self.waiting_time = waiting_time

    @property
    def is_moving(self) -> bool:
        return self.state is BallState.MOVING

    def wait(self):
        """Re-arm the ball: back to the spawn velocity and a full wait."""
        self.velocity = pygame.math.Vector2(self.base_velocity)
        self.waiting_time = self.serve_time
        self.state = BallState.WAITING

    def accelerate(self):
        # Grows magnitude only; direction flips are up to the caller
        for axis in (0, 1):
            limit = self.max_velocity[axis]
            grown = self.velocity[axis] + self.velocity[axis] * self.acceleration
            self.velocity[axis] = max(-limit, min(grown, limit))


class CyclingState(Enum):
    STOPPED = "stopped"
    CYCLING = "cycling"


class CyclingColor:
    """
    Tint oscillator. Swings between an idle color and ``color``, one
    half-cycle at a time, while in the CYCLING state.
    """

    def __init__(self, color, period: float, idle=config.WHITE):
        self.color = Color(*color)
        self.idle = Color(*idle)
        self.cycle_time = period / 2.0
        self.current_cycle = self.cycle_time
        self.from_ = self.idle
        self.to = self.color
        self.state = CyclingState.STOPPED

    def start(self):
        self.from_ = self.idle
        self.to = self.color
        self.current_cycle = self.cycle_time
        self.state = CyclingState.CYCLING

    def stop(self):
        self.from_ = self.idle
        self.to = self.color
        self.state = CyclingState.STOPPED

    def swap(self):
        self.from_, self.to = self.to, self.from_
        self.current_cycle = self.cycle_time


class Transform:
    def __init__(self, x=0.0, y=0.0):
        self.translation = pygame.math.Vector2(x, y)

    @property
    def x(self) -> float:
        return self.translation.x

    @property
    def y(self) -> float:
        return self.translation.y

    def set_translation(self, x: float, y: float):
        self.translation.update(x, y)

    def translate(self, dx: float, dy: float):
        # Relative, so several writers in one frame add up
        self.translation.x += dx
        self.translation.y += dy


class Tint:
    def __init__(self, color=config.WHITE):
        self.color = Color(*color)


@dataclass
class ScoreBoard:
    left: int = 0
    right: int = 0

    def score(self, side: Side) -> int:
        if side is Side.LEFT:
            self.left = min(self.left + 1, config.SCORE_LIMIT)
            return self.left
        self.right = min(self.right + 1, config.SCORE_LIMIT)
        return self.right


@dataclass
class ScoreText:
    left: str = "0"
    right: str = "0"

    def refresh(self, board: ScoreBoard):
        self.left = str(board.left)
        self.right = str(board.right)
