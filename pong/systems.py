import logging

from . import config
from .components import (
    Ball,
    BallState,
    CyclingColor,
    CyclingState,
    Color,
    Paddle,
    ScoreBoard,
    ScoreText,
    Side,
    Tint,
    Transform,
)

logger = logging.getLogger(__name__)


def _elapsed(dt: float) -> float:
    return dt if dt > 0.0 else 0.0


def point_in_rect(x, y, left, bottom, right, top) -> bool:
    return left <= x <= right and bottom <= y <= top


class PaddleSystem:
    """Moves paddles along y from per-side input axes in [-1, 1]."""

    def __init__(self, speed=config.PADDLE_SPEED, arena_height=config.ARENA_HEIGHT):
        self.speed = speed
        self.arena_height = arena_height
        self.axes = {Side.LEFT: 0.0, Side.RIGHT: 0.0}

    def set_axis(self, side: Side, value: float):
        self.axes[side] = max(-1.0, min(1.0, value))

    def update(self, world, dt: float):
        dt = _elapsed(dt)
        for _, (paddle, transform) in world.query(Paddle, Transform):
            amount = self.axes.get(paddle.side, 0.0)
            if amount == 0.0:
                continue
            half = paddle.height * 0.5
            y = transform.y + amount * self.speed * dt
            y = max(half, min(y, self.arena_height - half))
            transform.set_translation(transform.x, y)


class MoveBallsSystem:
    def update(self, world, dt: float):
        dt = _elapsed(dt)
        for entity, (ball, transform) in world.query(Ball, Transform):
            if ball.state is BallState.WAITING:
                if ball.waiting_time > 0.0:
                    ball.waiting_time = max(ball.waiting_time - dt, 0.0)
                else:
                    ball.state = BallState.MOVING
                    cycling = world.get_component(entity, CyclingColor)
                    if cycling is not None:
                        cycling.stop()
                    logger.debug("Ball %d served with velocity %s", entity, tuple(ball.velocity))
            else:
                transform.translate(ball.velocity.x * dt, ball.velocity.y * dt)


class BounceSystem:
    """
    Flips the ball off the top/bottom walls and off paddles. Paddle hits
    also speed the ball up. ``on_bounce`` fires once per bounce.
    """

    def __init__(self, arena_height=config.ARENA_HEIGHT, on_bounce=None):
        self.arena_height = arena_height
        self.on_bounce = on_bounce

    def _bounced(self):
        if self.on_bounce is not None:
            self.on_bounce()

    def update(self, world, dt: float):
        paddles = list(world.query(Paddle, Transform))
        for _, (ball, transform) in world.query(Ball, Transform):
            if not ball.is_moving:
                continue
            x, y = transform.x, transform.y

            # Top / bottom walls; only while heading into the wall
            if (y <= ball.radius and ball.velocity.y < 0.0) or (
                y >= self.arena_height - ball.radius and ball.velocity.y > 0.0
            ):
                ball.velocity.y = -ball.velocity.y
                self._bounced()

            for _, (paddle, paddle_transform) in paddles:
                left = paddle_transform.x - paddle.width * 0.5
                bottom = paddle_transform.y - paddle.height * 0.5
                if not point_in_rect(
                    x, y,
                    left - ball.radius, bottom - ball.radius,
                    left + paddle.width + ball.radius, bottom + paddle.height + ball.radius,
                ):
                    continue
                if (paddle.side is Side.LEFT and ball.velocity.x < 0.0) or (
                    paddle.side is Side.RIGHT and ball.velocity.x > 0.0
                ):
                    ball.velocity.x = -ball.velocity.x
                    ball.accelerate()
                    logger.debug("Paddle %s hit, velocity now %s", paddle.side.value, tuple(ball.velocity))
                    self._bounced()


class WinnerSystem:
    """
    Scores a point when the ball reaches either side of the arena, then
    re-arms the ball in the centre.
    """

    def __init__(self, scores: ScoreBoard, score_text: ScoreText,
                 arena_width=config.ARENA_WIDTH, arena_height=config.ARENA_HEIGHT,
                 on_score=None):
        self.scores = scores
        self.score_text = score_text
        self.arena_width = arena_width
        self.arena_height = arena_height
        self.on_score = on_score

    def update(self, world, dt: float):
        for entity, (ball, transform) in world.query(Ball, Transform):
            x = transform.x
            if x <= ball.radius:
                scorer = Side.RIGHT
            elif x >= self.arena_width - ball.radius:
                scorer = Side.LEFT
            else:
                continue

            self.scores.score(scorer)
            self.score_text.refresh(self.scores)

            transform.set_translation(self.arena_width * 0.5, self.arena_height * 0.5)
            ball.wait()
            cycling = world.get_component(entity, CyclingColor)
            if cycling is not None:
                cycling.start()

            logger.info("Score: | %d | %d |", self.scores.left, self.scores.right)
            if self.on_score is not None:
                self.on_score(scorer)


class CyclingColorSystem:
    def update(self, world, dt: float):
        dt = _elapsed(dt)
        for _, (tint, cycling) in world.query(Tint, CyclingColor):
            if cycling.state is CyclingState.STOPPED:
                tint.color = cycling.from_
                continue

            cycling.current_cycle = max(cycling.current_cycle - dt, 0.0)
            if cycling.current_cycle == 0.0:
                # Snaps to the next half-cycle; the leftover dt is dropped
                cycling.swap()
                continue

            t = cycling.current_cycle / cycling.cycle_time
            tint.color = Color(*(
                start + (end - start) * t
                for start, end in zip(cycling.from_, cycling.to)
            ))


class Dispatcher:
    """Runs systems once per frame, in the order they were given."""

    def __init__(self, systems):
        self.systems = list(systems)

    def dispatch(self, world, dt: float):
        dt = _elapsed(dt)
        for system in self.systems:
            system.update(world, dt)
