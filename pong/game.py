# pong/game.py
# ---- Two-player PONG over an animated background ----
# W/S and Up/Down (or a gamepad) move the paddles. The ball speeds up 10% on
# every paddle hit. First to 7 wins; SPACE / START restarts once the match is
# over. B / SELECT swaps the background motif, C / right-stick click cycles
# the palette.

import logging

import pygame

from content_registry import load_game_fonts
from game_context import GameContext
from pong import graphics
from pong.input import GamepadManager, InputResolver
from pong.simulation import SimulationLoop
from scene_manager import Scene

TITLE = "Pong"

log = logging.getLogger(__name__)


class PongScene(Scene):
    def __init__(self, manager, context=None, **kwargs):
        super().__init__(manager)
        self.context = context or GameContext(kwargs.get("config"))
        self.config = self.context.config
        self.screen = getattr(manager, "screen", None)
        self.fonts = load_game_fonts()
        self.resolver = InputResolver(self.config.deadzone, self.config.trigger_threshold)
        self.gamepad = kwargs.get("gamepad") or GamepadManager()
        self.loop = SimulationLoop(self.context.match, self.resolver)
        self.last_result = None

    # ---------------- actions ----------------
    def restart(self):
        if self.loop.restart():
            self.last_result = None
            return True
        return False

    def _gamepad_actions(self, pad):
        # query every name each frame so the edge memory stays current
        start = self.resolver.just_pressed(pad, "START")
        select = self.resolver.just_pressed(pad, "SELECT")
        palette = self.resolver.just_pressed(pad, "RS")
        if start:
            self.restart()
        if select:
            self.context.background.switch_style()
        if palette:
            self.context.background.cycle_palette()

    # ---------------- scene API ----------------
    def handle_event(self, event):
        if self.gamepad.handle_event(event):
            return
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_ESCAPE:
            self.manager.running = False
        elif event.key == pygame.K_SPACE:
            self.restart()
        elif event.key == pygame.K_b:
            self.context.background.switch_style()
        elif event.key == pygame.K_c:
            self.context.background.cycle_palette()
        elif event.key == pygame.K_g:
            self.resolver.debug_inputs(self.gamepad.snapshot)

    def update(self, dt, keys=None):
        self.context.add_playtime(dt)
        pad = self.gamepad.update()
        self._gamepad_actions(pad)
        self.context.background.update()
        if keys is None:
            keys = pygame.key.get_pressed()
        result = self.loop.tick(keys, pad)
        self.context.record_tick(result)
        if result.hit and self.config.rumble:
            self.gamepad.vibrate(80, 0.4, 0.4)
        self.last_result = result
        return result

    def hud_lines(self):
        bg = self.context.background
        pad = "No gamepad"
        if self.gamepad.has_gamepad:
            pad = f"Gamepad: {self.gamepad.snapshot.name or 'connected'}"
        return [
            f"{bg.style_name()} / {bg.scheme_name()}  •  B: style  C: palette",
            f"W/S vs Up/Down  •  First to {self.config.winning_score}  •  {pad}",
        ]

    def draw(self):
        graphics.render(self.screen, self.fonts, self.context, self.hud_lines())


def launch(manager, context=None, **kwargs):
    return PongScene(manager, context, **kwargs)
