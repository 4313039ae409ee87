"""Score pair, win condition and restart for one match."""

from __future__ import annotations

import logging
import random
from typing import Optional

from pong.config import PongConfig
from pong.entities import LEFT, RIGHT, Ball, Court, build_paddles

log = logging.getLogger(__name__)


class MatchState:
    def __init__(self, config: PongConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.court = Court(config.width, config.height)
        self.winning_score = config.winning_score
        self.left_paddle, self.right_paddle = build_paddles(config)
        self.ball = Ball(0.0, 0.0, config.ball_size)
        self.ball.reset(self.court, self.rng, config)
        self.left_score = 0
        self.right_score = 0

    def check_win(self) -> bool:
        return self.left_score >= self.winning_score or self.right_score >= self.winning_score

    def award(self, side: str):
        if side == LEFT:
            self.left_score += 1
        elif side == RIGHT:
            self.right_score += 1
        else:
            raise ValueError(f"unknown side {side!r}")
        log.info("Point %s -> %d : %d", side, self.left_score, self.right_score)

    def winner(self) -> Optional[str]:
        if not self.check_win():
            return None
        return LEFT if self.left_score > self.right_score else RIGHT

    def reset(self):
        self.left_score = 0
        self.right_score = 0
        self.ball.reset(self.court, self.rng, self.config)

    def restart(self) -> bool:
        """Reset only once the match is over; ignored mid-rally."""
        if not self.check_win():
            return False
        log.info("Restarting match")
        self.reset()
        return True

    def __repr__(self):
        return (
            f"<MatchState {self.left_score}:{self.right_score} "
            f"ball=({self.ball.x:.1f}, {self.ball.y:.1f})>"
        )
