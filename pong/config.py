"""Tunable constants for a Pong session."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

BACKGROUND_SIMPLE = "simple"
BACKGROUND_DYNAMIC = "dynamic"
BACKGROUND_STYLES = (BACKGROUND_SIMPLE, BACKGROUND_DYNAMIC)


@dataclass
class PongConfig:
    # Court
    width: int = 800
    height: int = 500

    # Paddles
    paddle_width: int = 15
    paddle_height: int = 80
    paddle_speed: float = 6.0
    paddle_margin: int = 30

    # Ball
    ball_size: int = 15
    serve_speeds_x: tuple = (-4, -3, 3, 4)
    serve_speed_y: float = 3.0
    deflect_speed_y: float = 4.0
    hit_speedup: float = 1.1

    # Match
    winning_score: int = 7

    # Input
    deadzone: float = 0.2
    trigger_threshold: float = 0.1

    # Presentation
    fps: int = 60
    background: str = BACKGROUND_DYNAMIC
    palette: Optional[str] = None  # None -> random scheme at start
    background_alpha: float = 0.3
    rumble: bool = True
    seed: Optional[int] = None

    def validate(self) -> "PongConfig":
        """Raise ValueError when the values cannot describe a playable court."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"court size must be positive, got {self.width}x{self.height}")
        if self.paddle_height <= 0 or self.paddle_height > self.height:
            raise ValueError(
                f"paddle height {self.paddle_height} does not fit a court {self.height} tall"
            )
        if self.paddle_margin + self.paddle_width >= self.width // 2:
            raise ValueError("paddles overlap the center line")
        if self.ball_size <= 0:
            raise ValueError("ball size must be positive")
        if self.winning_score < 1:
            raise ValueError("winning score must be at least 1")
        if not 0.0 <= self.deadzone < 1.0:
            raise ValueError(f"deadzone must be in [0, 1), got {self.deadzone}")
        if self.fps <= 0:
            raise ValueError("fps must be positive")
        if self.background not in BACKGROUND_STYLES:
            raise ValueError(
                f"unknown background {self.background!r}; choose from {', '.join(BACKGROUND_STYLES)}"
            )
        if self.palette is not None:
            from content_registry import scheme_index

            scheme_index(self.palette)
        return self

    def summary(self) -> Dict[str, Any]:
        return asdict(self)
