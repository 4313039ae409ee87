# pong/entities.py
# Paddle and ball as plain data with the per-tick behavior that mutates them.
# Positions use the top-left corner, like pygame.Rect.

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from pong.config import PongConfig

LEFT = "left"
RIGHT = "right"


@dataclass
class Court:
    width: int
    height: int

    @property
    def center(self):
        return (self.width / 2, self.height / 2)


@dataclass
class Paddle:
    x: float
    y: float
    width: int
    height: int
    speed: float
    court_height: int

    def move(self, direction: float):
        """Move by direction * speed and clamp into the court.

        direction is not clamped: callers pass normalized values.
        """
        self.y += direction * self.speed
        self.y = max(0.0, min(self.y, float(self.court_height - self.height)))

    @property
    def top(self):
        return self.y

    @property
    def bottom(self):
        return self.y + self.height

    def rect(self):
        return (self.x, self.y, self.width, self.height)


@dataclass
class BallTick:
    scored: Optional[str] = None  # side that won the point
    hit: Optional[str] = None  # paddle the ball bounced off


@dataclass
class Ball:
    x: float
    y: float
    size: int
    speed_x: float = 0.0
    speed_y: float = 0.0

    def reset(self, court: Court, rng: random.Random, config: PongConfig):
        self.x, self.y = court.center
        self.speed_x = rng.choice(config.serve_speeds_x)
        self.speed_y = rng.uniform(-config.serve_speed_y, config.serve_speed_y)

    # ---------------- per-tick ----------------
    def update(self, court: Court, left: Paddle, right: Paddle,
               rng: random.Random, config: PongConfig) -> BallTick:
        result = BallTick()
        self.x += self.speed_x
        self.y += self.speed_y

        # top/bottom: sign flip only, the ball may overshoot for a frame
        if self.y < 0 or self.y > court.height - self.size:
            self.speed_y *= -1

        # scoring runs before the paddle checks so a reset ball is never hit
        if self.x < 0:
            result.scored = RIGHT
            self.reset(court, rng, config)
        elif self.x > court.width:
            result.scored = LEFT
            self.reset(court, rng, config)

        if (
            self.x <= left.x + left.width
            and self.y + self.size >= left.top
            and self.y <= left.bottom
            and self.x >= left.x
        ):
            self._deflect(left, config)
            self.x = left.x + left.width
            result.hit = LEFT

        if (
            self.x + self.size >= right.x
            and self.y + self.size >= right.top
            and self.y <= right.bottom
            and self.x + self.size <= right.x + right.width
        ):
            self._deflect(right, config)
            self.x = right.x - self.size
            result.hit = RIGHT

        return result

    def _deflect(self, paddle: Paddle, config: PongConfig):
        self.speed_x *= -config.hit_speedup
        self.speed_y = contact_speed(self.y - paddle.y, paddle.height, config.deflect_speed_y)


def contact_speed(offset: float, paddle_height: float, limit: float) -> float:
    """Map a contact offset along the paddle (0 = top edge) onto [-limit, limit]."""
    mapped = -limit + (offset / paddle_height) * (2 * limit)
    # corner clips land above or below the paddle; keep them inside [-limit, limit]
    return max(-limit, min(limit, mapped))


def build_paddles(config: PongConfig):
    start_y = config.height / 2 - config.paddle_height / 2
    left = Paddle(
        x=float(config.paddle_margin),
        y=start_y,
        width=config.paddle_width,
        height=config.paddle_height,
        speed=config.paddle_speed,
        court_height=config.height,
    )
    right = Paddle(
        x=float(config.width - config.paddle_margin - config.paddle_width),
        y=start_y,
        width=config.paddle_width,
        height=config.paddle_height,
        speed=config.paddle_speed,
        court_height=config.height,
    )
    return left, right
