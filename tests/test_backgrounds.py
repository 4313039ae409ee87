"""Tests for background motifs and palette switching."""

import random

import pygame
import pytest

from content_registry import COLOR_SCHEMES, scheme_index
from pong.backgrounds import (
    BackgroundManager,
    DynamicBackground,
    SimpleBackground,
    ellipse_points,
)

WHITE = pygame.Color(255, 255, 255)


@pytest.fixture
def manager():
    return BackgroundManager((800, 500), style="simple", palette="Klein", rng=random.Random(3))


def test_initial_style_and_scheme(manager):
    assert isinstance(manager.style, SimpleBackground)
    assert manager.style_name() == "Simple"
    assert manager.scheme_name() == "Klein"


def test_switch_style_alternates(manager):
    manager.switch_style()
    assert isinstance(manager.style, DynamicBackground)
    assert manager.style_name() == "Dynamic"
    manager.switch_style()
    assert isinstance(manager.style, SimpleBackground)


def test_cycle_palette_wraps(manager):
    names = []
    for _ in range(len(COLOR_SCHEMES)):
        manager.cycle_palette()
        names.append(manager.scheme_name())
    assert names[-1] == "Klein"
    assert names[0] == "Haru"


def test_random_palette_when_unset():
    bg = BackgroundManager((800, 500), rng=random.Random(0))
    assert 0 <= bg.scheme_index < len(COLOR_SCHEMES)


def test_unknown_palette_rejected():
    with pytest.raises(ValueError):
        BackgroundManager((800, 500), palette="Sepia")


def test_scheme_lookup_ignores_case():
    assert scheme_index("midnightdream") == 3


@pytest.mark.parametrize("style", ["simple", "dynamic"])
def test_draw_tints_the_court(style):
    bg = BackgroundManager((800, 500), style=style, palette="Klein", rng=random.Random(1))
    surface = pygame.Surface((800, 500))
    for _ in range(5):
        surface.fill(WHITE)
        bg.update()
        bg.draw(surface)
    assert surface.get_at((400, 250)) != WHITE


def test_draw_without_surface_is_noop(manager):
    assert manager.draw(None) is None


def test_ellipse_points_are_centered():
    pts = ellipse_points(100, 50, 40, 20, 0.0, segments=4)
    assert pts[0] == pytest.approx((120, 50))
    assert pts[1][1] == pytest.approx(60)
