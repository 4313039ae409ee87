"""Shared pytest fixtures for Pong tests."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random
from types import SimpleNamespace

import pygame
import pytest

from pong.config import PongConfig
from pong.input import BUTTON_SLOTS, DEFAULT_BUTTONS, ButtonState, GamepadSnapshot
from pong.match import MatchState

pygame.init()


class Keys:
    """Stand-in for pygame.key.get_pressed(): indexable by key code."""

    def __init__(self, *down):
        self.down = set(down)

    def __getitem__(self, code):
        return code in self.down


def make_pad(axes=(0.0, 0.0, 0.0, 0.0), pressed=(), values=None, connected=True):
    """Standard-layout snapshot with the named buttons held down."""
    values = values or {}
    slots = [ButtonState()] * BUTTON_SLOTS
    for name in pressed:
        slots[DEFAULT_BUTTONS[name]] = ButtonState(True, 1.0)
    for name, value in values.items():
        slots[DEFAULT_BUTTONS[name]] = ButtonState(value > 0.5, value)
    return GamepadSnapshot(connected, tuple(axes), tuple(slots), "Test Pad")


class FakeGamepad:
    def __init__(self, snapshot=None):
        self.snapshot = snapshot or GamepadSnapshot()
        self.rumbles = []

    @property
    def has_gamepad(self):
        return self.snapshot.connected

    def handle_event(self, event):
        return False

    def update(self):
        return self.snapshot

    def vibrate(self, duration_ms=200, strong=0.5, weak=0.5):
        self.rumbles.append(duration_ms)
        return True


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def config():
    return PongConfig(seed=1234)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def match(config, rng):
    return MatchState(config, rng)


@pytest.fixture
def still_ball(match):
    """Match with the ball parked mid-court and motionless."""
    ball = match.ball
    ball.x, ball.y = 400.0, 250.0
    ball.speed_x = ball.speed_y = 0.0
    return match


@pytest.fixture
def fake_manager():
    size = (800, 500)
    return SimpleNamespace(screen=pygame.Surface(size), size=size, running=True)
