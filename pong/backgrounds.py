# pong/backgrounds.py
# ---- Decorative background motifs behind the court ----
# A ring of gradient-striped ellipses slowly spinning around the court
# center. Two motifs share one interface: "simple" only spins and swells,
# "dynamic" adds per-element drift/pulse and a breathing, swaying ring.
# BackgroundManager picks the motif and the color scheme.

from __future__ import annotations

import logging
import math
import random
from typing import Optional

import pygame

from content_registry import COLOR_SCHEMES, scheme_index
from pong.config import BACKGROUND_DYNAMIC, BACKGROUND_SIMPLE

log = logging.getLogger(__name__)

RING_ELEMENTS = 12
RING_SIZE = 400
FALLBACK_COLORS = ["#0000FF", "#00FFFF"]
STRIPES = 6


def ellipse_points(cx, cy, w, h, angle, segments=40):
    """Outline of an ellipse of size w x h rotated by angle (radians)."""
    ca, sa = math.cos(angle), math.sin(angle)
    pts = []
    for i in range(segments):
        t = 2 * math.pi * i / segments
        ex = math.cos(t) * w * 0.5
        ey = math.sin(t) * h * 0.5
        pts.append((cx + ex * ca - ey * sa, cy + ex * sa + ey * ca))
    return pts


def draw_striped_ellipse(layer, colors, cx, cy, w, h, angle):
    """Stand-in for a repeating linear gradient: nested bands cycling the palette."""
    if w < 1 or h < 1:
        return
    for band in range(STRIPES):
        k = 1.0 - band / STRIPES
        col = pygame.Color(colors[band % len(colors)])
        pygame.draw.polygon(layer, col, ellipse_points(cx, cy, w * k, h * k, angle))


class BackgroundElement:
    def __init__(self, index: int, size: float):
        self.index = index
        self.size = size
        self.w = size
        self.h = size


class BackgroundStyle:
    """Shared ring geometry; subclasses animate it."""

    name = "base"

    def __init__(self, origin, rng: Optional[random.Random] = None):
        self.origin_x, self.origin_y = origin
        self.rng = rng or random.Random()
        self.angle = 0.0
        self.frame = 0
        step = RING_SIZE / RING_ELEMENTS
        self.elements = [BackgroundElement(i, RING_SIZE - i * step) for i in range(RING_ELEMENTS)]

    def update(self):
        self.frame += 1

    def draw(self, layer: pygame.Surface, colors):
        raise NotImplementedError


class SimpleBackground(BackgroundStyle):
    name = "Simple"

    def update(self):
        super().update()
        self.angle += (math.pi / RING_ELEMENTS) * 0.05

    def draw(self, layer, colors):
        angle_step = math.pi / RING_ELEMENTS
        rot = self.angle
        for i, el in enumerate(self.elements):
            t = angle_step * i + self.frame * 0.005
            rot += t * 0.03
            el.w = el.h = el.size * (0.9 + 0.3 * math.sin(t))  # 0.6x .. 1.2x
            draw_striped_ellipse(layer, colors, self.origin_x, self.origin_y, el.w, el.h, rot)


class DynamicBackground(BackgroundStyle):
    name = "Dynamic"

    def __init__(self, origin, rng=None):
        super().__init__(origin, rng)
        self.breathing = 1.0
        self.sway_x = 0.0
        self.sway_y = 0.0
        for el in self.elements:
            el.local_angle = 0.0
            el.rotation_speed = self.rng.uniform(-0.02, 0.02)
            el.pulse_speed = self.rng.uniform(0.01, 0.03)
            el.drift_speed = self.rng.uniform(0.005, 0.015)
            el.max_drift = self.rng.uniform(20, 50)

    def update(self):
        super().update()
        f = self.frame
        self.breathing = 1.0 + math.sin(f * 0.008) * 0.2
        self.sway_x = math.sin(f * 0.006) * 30
        self.sway_y = math.cos(f * 0.006 * 0.8) * 20
        self.angle += (math.pi / RING_ELEMENTS) * 0.05
        for el in self.elements:
            el.local_angle += el.rotation_speed

    def draw(self, layer, colors):
        f = self.frame
        cx = self.origin_x + self.sway_x
        cy = self.origin_y + self.sway_y
        angle_step = math.pi / RING_ELEMENTS
        rot = self.angle
        for i, el in enumerate(self.elements):
            t = angle_step * i + f * 0.005
            rot += t * 0.03 + math.sin(f * 0.01 + i) * 0.1
            variation = 1.0 + 0.4 * math.sin(t + f * 0.003)  # 0.6 .. 1.4
            aspect = 1.0 + 0.2 * math.cos(t * 1.3 + f * 0.004)  # 0.8 .. 1.2
            pulse = 1.0 + math.sin(f * el.pulse_speed) * 0.3
            drift_x = math.sin(f * el.drift_speed) * el.max_drift
            drift_y = math.cos(f * el.drift_speed * 0.7) * el.max_drift * 0.5
            el.w = el.size * variation * pulse * self.breathing
            el.h = el.w * aspect
            draw_striped_ellipse(
                layer, colors, cx + drift_x, cy + drift_y, el.w, el.h, rot + el.local_angle
            )


STYLES = {
    BACKGROUND_SIMPLE: SimpleBackground,
    BACKGROUND_DYNAMIC: DynamicBackground,
}


class BackgroundManager:
    """Current motif + color scheme, toggled from the keyboard or pad."""

    def __init__(self, size, style=BACKGROUND_DYNAMIC, palette=None,
                 alpha=0.3, rng: Optional[random.Random] = None):
        self.size = size
        self.alpha = alpha
        self.rng = rng or random.Random()
        if palette is None:
            self.scheme_index = self.rng.randrange(len(COLOR_SCHEMES))
        else:
            self.scheme_index = scheme_index(palette)
        self.style_key = style
        self.style = self._build(style)
        self.layer = None

    def _build(self, key):
        w, h = self.size
        return STYLES[key]((w / 2, h / 2), self.rng)

    @property
    def scheme(self):
        return COLOR_SCHEMES[self.scheme_index]

    def style_name(self) -> str:
        return self.style.name

    def scheme_name(self) -> str:
        return self.scheme["name"]

    def switch_style(self):
        key = BACKGROUND_SIMPLE if self.style_key == BACKGROUND_DYNAMIC else BACKGROUND_DYNAMIC
        self.style_key = key
        self.style = self._build(key)
        log.info("Background style -> %s", self.style_name())

    def cycle_palette(self):
        self.scheme_index = (self.scheme_index + 1) % len(COLOR_SCHEMES)
        log.info("Color scheme -> %s", self.scheme_name())

    def update(self):
        self.style.update()

    def draw(self, surface: Optional[pygame.Surface]):
        if surface is None:
            return
        if self.layer is None or self.layer.get_size() != surface.get_size():
            self.layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        self.layer.fill((0, 0, 0, 0))
        colors = self.scheme.get("colors") or FALLBACK_COLORS
        self.style.draw(self.layer, colors)
        self.layer.set_alpha(int(self.alpha * 255))
        surface.blit(self.layer, (0, 0))
