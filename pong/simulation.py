"""One simulation tick per rendered frame."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from pong.entities import LEFT, RIGHT
from pong.input import GamepadSnapshot, InputResolver
from pong.match import MatchState

log = logging.getLogger(__name__)


@dataclass
class TickResult:
    scored: Optional[str] = None
    hit: Optional[str] = None
    game_over: bool = False
    rally: int = 0


class SimulationLoop:
    def __init__(self, match: MatchState, resolver: InputResolver):
        self.match = match
        self.resolver = resolver
        self.rally = 0
        self.halted = match.check_win()

    def tick(self, keys, pad: Optional[GamepadSnapshot] = None) -> TickResult:
        if self.halted:
            return TickResult(game_over=True)

        m = self.match
        intents = self.resolver.resolve(keys, pad)
        paddles = {LEFT: m.left_paddle, RIGHT: m.right_paddle}
        for side, intent in intents.items():
            # keyboard and gamepad move the paddle separately, clamped each time
            for direction in (intent.keyboard, intent.gamepad):
                if direction:
                    paddles[side].move(direction)

        step = m.ball.update(m.court, m.left_paddle, m.right_paddle, m.rng, m.config)
        result = TickResult(scored=step.scored, hit=step.hit)
        if step.hit:
            self.rally += 1
        if step.scored:
            m.award(step.scored)
            result.rally = self.rally
            self.rally = 0

        if m.check_win():
            self.halted = True
            result.game_over = True
            log.info("Game over: %s player wins %d : %d",
                     m.winner(), m.left_score, m.right_score)
        return result

    def restart(self) -> bool:
        if not self.match.restart():
            return False
        self.halted = False
        self.rally = 0
        return True
