"""
game_context.py
---------------
Session state for one Pong window.
Owns the match, the background manager and in-memory session stats
(games played, wins per side, longest rally, paddle hits). Nothing is saved.
"""

import random

from pong.backgrounds import BackgroundManager
from pong.config import PongConfig
from pong.match import MatchState


class GameContext:
    def __init__(self, config=None):
        self.config = (config or PongConfig()).validate()
        self.rng = random.Random(self.config.seed)
        self.match = MatchState(self.config, self.rng)
        self.background = BackgroundManager(
            (self.config.width, self.config.height),
            style=self.config.background,
            palette=self.config.palette,
            alpha=self.config.background_alpha,
            rng=self.rng,
        )
        self.stats = {
            "games_played": 0,
            "wins": {"left": 0, "right": 0},
            "longest_rally": 0,
            "paddle_hits": 0,
            "total_time": 0.0,  # seconds the window has been open
        }
        self.flags = {}

    # -----------------------------------------------------
    #   Core logic
    # -----------------------------------------------------
    def record_tick(self, result):
        """Fold one TickResult into the session stats."""
        if result.hit:
            self.stats["paddle_hits"] += 1
        if result.scored:
            self.stats["longest_rally"] = max(self.stats["longest_rally"], result.rally)
        if result.game_over and result.scored:
            winner = self.match.winner()
            self.stats["games_played"] += 1
            self.stats["wins"][winner] += 1

    def add_playtime(self, dt):
        """Add delta-time (in seconds) to total runtime."""
        self.stats["total_time"] += dt

    def summary(self):
        return {
            "stats": self.stats,
            "flags": self.flags,
            "score": (self.match.left_score, self.match.right_score),
        }

    def __repr__(self):
        return (
            f"<GameContext games={self.stats['games_played']} "
            f"left={self.stats['wins']['left']} right={self.stats['wins']['right']} "
            f"time={self.stats['total_time']:.1f}s>"
        )
