"""Tests for the Pong scene, session context and renderer."""

import pygame
import pytest

from conftest import FakeGamepad, Keys, make_pad
from content_registry import load_game_fonts
from game_context import GameContext
from pong import graphics
from pong.config import PongConfig
from pong.game import PongScene, launch


def _key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


@pytest.fixture
def context():
    return GameContext(PongConfig(seed=7, palette="Klein", background="simple"))


@pytest.fixture
def pad():
    return FakeGamepad()


@pytest.fixture
def scene(fake_manager, context, pad):
    return launch(fake_manager, context, gamepad=pad)


def test_b_and_c_change_background(scene, context):
    scene.handle_event(_key(pygame.K_b))
    assert context.background.style_name() == "Dynamic"
    scene.handle_event(_key(pygame.K_c))
    assert context.background.scheme_name() == "Haru"


def test_space_ignored_mid_rally(scene, context):
    context.match.left_score = 3
    scene.handle_event(_key(pygame.K_SPACE))
    assert context.match.left_score == 3


def test_space_restarts_after_game_over(scene, context):
    context.match.right_score = 7
    scene.handle_event(_key(pygame.K_SPACE))
    assert (context.match.left_score, context.match.right_score) == (0, 0)


def test_escape_stops_manager(scene, fake_manager):
    scene.handle_event(_key(pygame.K_ESCAPE))
    assert fake_manager.running is False


def test_start_button_restarts(scene, context, pad):
    context.match.left_score = 7
    pad.snapshot = make_pad(pressed=("START",))
    scene.update(1 / 60, keys=Keys())
    assert context.match.left_score == 0


def test_select_toggles_once_per_press(scene, context, pad):
    pad.snapshot = make_pad(pressed=("SELECT",))
    scene.update(1 / 60, keys=Keys())
    scene.update(1 / 60, keys=Keys())
    assert context.background.style_name() == "Dynamic"


def test_update_moves_paddle_and_tracks_time(scene, context):
    start = context.match.left_paddle.y
    scene.update(0.5, keys=Keys(pygame.K_s))
    assert context.match.left_paddle.y == start + 6
    assert context.stats["total_time"] == pytest.approx(0.5)


def test_paddle_hit_rumbles_and_counts(scene, context, pad):
    ball = context.match.ball
    ball.x, ball.y = 47.0, 250.0
    ball.speed_x, ball.speed_y = -4.0, 0.0
    result = scene.update(1 / 60, keys=Keys())
    assert result.hit == "left"
    assert pad.rumbles
    assert context.stats["paddle_hits"] == 1


def test_finished_game_recorded_once(scene, context):
    context.match.left_score = 6
    ball = context.match.ball
    ball.x, ball.y = 799.0, 10.0
    ball.speed_x, ball.speed_y = 4.0, 0.0
    assert scene.update(1 / 60, keys=Keys()).game_over
    scene.update(1 / 60, keys=Keys())
    assert context.stats["games_played"] == 1
    assert context.stats["wins"]["left"] == 1


def test_draw_renders_frame(scene, fake_manager, context):
    fake_manager.screen.fill((1, 2, 3))
    scene.draw()
    assert fake_manager.screen.get_at((0, 0)) != pygame.Color(1, 2, 3)
    context.match.left_score = 7
    scene.draw()


def test_render_without_surface_returns_early(context):
    assert graphics.render(None, load_game_fonts(), context) is False


def test_hud_mentions_style_and_gamepad(scene):
    lines = scene.hud_lines()
    assert "Simple / Klein" in lines[0]
    assert "No gamepad" in lines[1]


def test_scene_builds_own_context(fake_manager, pad):
    scene = PongScene(fake_manager, gamepad=pad, config=PongConfig(seed=1))
    assert scene.context.match.winning_score == 7
