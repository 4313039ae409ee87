"""
pong/input.py
-------------
Keyboard + gamepad input for the two paddles.

 • GamepadSnapshot  → one frame of pad state in standard-gamepad order
 • GamepadManager   → pygame joystick bookkeeping, polling, rumble
 • InputResolver    → per-paddle direction with stick > d-pad > buttons > trigger
                      precedence, keyboard added on top, rising-edge detection
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Dict, Optional

import pygame

from pong.entities import LEFT, RIGHT

log = logging.getLogger(__name__)

# Standard gamepad layout: logical name -> button slot
DEFAULT_BUTTONS = {
    "A": 0,
    "B": 1,
    "X": 2,
    "Y": 3,
    "LB": 4,
    "RB": 5,
    "LT": 6,
    "RT": 7,
    "SELECT": 8,
    "START": 9,
    "LS": 10,
    "RS": 11,
    "DPAD_UP": 12,
    "DPAD_DOWN": 13,
    "DPAD_LEFT": 14,
    "DPAD_RIGHT": 15,
    "HOME": 16,
}
BUTTON_SLOTS = len(DEFAULT_BUTTONS)

AXIS_NAMES = {
    0: "Left Stick X",
    1: "Left Stick Y",
    2: "Right Stick X",
    3: "Right Stick Y",
}


@dataclass(frozen=True)
class ButtonState:
    pressed: bool = False
    value: float = 0.0


@dataclass(frozen=True)
class GamepadSnapshot:
    connected: bool = False
    axes: tuple = ()
    buttons: tuple = ()
    name: str = ""

    def axis(self, index: int) -> float:
        if not self.connected or not 0 <= index < len(self.axes):
            return 0.0
        return float(self.axes[index] or 0.0)

    def button(self, index: Optional[int]) -> ButtonState:
        if not self.connected or index is None or not 0 <= index < len(self.buttons):
            return ButtonState()
        return self.buttons[index]


DISCONNECTED = GamepadSnapshot()


# =====================================================
#   Device bookkeeping
# =====================================================
XBOX_BUTTONS = {"A": 0, "B": 1, "X": 2, "Y": 3, "LB": 4, "RB": 5,
                "SELECT": 6, "START": 7, "LS": 8, "RS": 9, "HOME": 10}

# Linux (evdev): LX LY LT RX RY RT
LINUX_LAYOUT = {
    "buttons": XBOX_BUTTONS,
    "sticks": (0, 1, 3, 4),
    "triggers": {"LT": 2, "RT": 5},
}
# Windows / macOS: LX LY RX RY LT RT
XINPUT_LAYOUT = {
    "buttons": XBOX_BUTTONS,
    "sticks": (0, 1, 2, 3),
    "triggers": {"LT": 4, "RT": 5},
}

RESTING_TRIGGER = -0.5  # an axis below this at connect time is a released trigger


def platform_layout(platform: Optional[str] = None) -> dict:
    platform = platform or sys.platform
    return LINUX_LAYOUT if platform.startswith("linux") else XINPUT_LAYOUT


def detect_layout(rest_axes, platform: Optional[str] = None) -> dict:
    """Pick the axis order from where a six-axis pad's axes rest when it connects.

    Released triggers sit at -1 and sticks at 0, so the resting values show
    which axes are triggers. Anything inconclusive falls back to the platform.
    """
    rest = list(rest_axes)
    if len(rest) >= 6:
        low = {i for i, v in enumerate(rest) if v <= RESTING_TRIGGER}
        if low == {2, 5}:
            return LINUX_LAYOUT
        if low == {4, 5}:
            return XINPUT_LAYOUT
    return platform_layout(platform)


class GamepadManager:
    """Tracks one pygame joystick and turns it into standard-layout snapshots.

    SDL reports an Xbox-style pad as buttons A B X Y LB RB BACK START LS RS
    GUIDE and the d-pad as hat 0; the axis order depends on the platform
    driver (see LINUX_LAYOUT / XINPUT_LAYOUT). Trigger axes are measured
    against the value they rest at when the pad connects. Pass a layout to
    skip detection for odd devices.
    """

    def __init__(self, layout: Optional[dict] = None):
        self.fixed_layout = layout
        self.layout = layout or platform_layout()
        self.trigger_rest: Dict[str, float] = {}
        self.joystick = None
        self.snapshot = DISCONNECTED
        if not pygame.joystick.get_init():
            pygame.joystick.init()
        if pygame.joystick.get_count() > 0:
            self._connect(0)

    @property
    def has_gamepad(self) -> bool:
        return self.joystick is not None

    # --- connection events ---
    def handle_event(self, event) -> bool:
        """Consume joystick hot-plug events. Returns True when handled."""
        if event.type == pygame.JOYDEVICEADDED:
            if self.joystick is None:
                self._connect(event.device_index)
            return True
        if event.type == pygame.JOYDEVICEREMOVED:
            if self.joystick is not None and event.instance_id == self.joystick.get_instance_id():
                log.info("Gamepad disconnected: %s", self.snapshot.name or "unknown")
                self.joystick = None
                self.snapshot = DISCONNECTED
            return True
        return False

    def _connect(self, device_index: int):
        try:
            joy = pygame.joystick.Joystick(device_index)
            if not joy.get_init():
                joy.init()
        except pygame.error as exc:
            log.warning("Gamepad %s could not be opened: %s", device_index, exc)
            return
        self.attach(joy)

    def attach(self, joy):
        """Adopt an opened joystick: settle its layout and trigger baselines."""
        rest = [joy.get_axis(i) for i in range(joy.get_numaxes())]
        self.layout = self.fixed_layout or detect_layout(rest)
        self.trigger_rest = {
            name: rest[raw] if raw < len(rest) else -1.0
            for name, raw in self.layout["triggers"].items()
        }
        self.joystick = joy
        self.snapshot = DISCONNECTED
        self._log_info(joy)

    def _log_info(self, joy):
        name = joy.get_name()
        log.info("Gamepad connected: %s", name)
        log.info("- Index: %s", joy.get_id())
        log.info("- Buttons: %d  Axes: %d  Hats: %d",
                 joy.get_numbuttons(), joy.get_numaxes(), joy.get_numhats())
        log.info("- Detected: %s", detect_family(name))

    # --- polling ---
    def update(self) -> GamepadSnapshot:
        """Poll the pad once for this frame."""
        if self.joystick is None:
            self.snapshot = DISCONNECTED
            return self.snapshot
        try:
            self.snapshot = self._read(self.joystick)
        except pygame.error as exc:
            log.warning("Gamepad read failed: %s", exc)
            self.snapshot = DISCONNECTED
        return self.snapshot

    def _read(self, joy) -> GamepadSnapshot:
        n_axes = joy.get_numaxes()
        n_buttons = joy.get_numbuttons()

        def axis(i):
            return joy.get_axis(i) if 0 <= i < n_axes else 0.0

        slots = [ButtonState()] * BUTTON_SLOTS
        for name, raw in self.layout["buttons"].items():
            if raw < n_buttons and joy.get_button(raw):
                slots[DEFAULT_BUTTONS[name]] = ButtonState(True, 1.0)

        for name, raw in self.layout["triggers"].items():
            if raw < n_axes:
                value = trigger_travel(axis(raw), self.trigger_rest.get(name, -1.0))
                slots[DEFAULT_BUTTONS[name]] = ButtonState(value > 0.5, value)

        if joy.get_numhats() > 0:
            hx, hy = joy.get_hat(0)
            for name, on in (("DPAD_UP", hy > 0), ("DPAD_DOWN", hy < 0),
                             ("DPAD_LEFT", hx < 0), ("DPAD_RIGHT", hx > 0)):
                if on:
                    slots[DEFAULT_BUTTONS[name]] = ButtonState(True, 1.0)

        axes = tuple(axis(i) for i in self.layout["sticks"])
        return GamepadSnapshot(True, axes, tuple(slots), joy.get_name())

    # --- feedback ---
    def vibrate(self, duration_ms: int = 200, strong: float = 0.5, weak: float = 0.5) -> bool:
        if self.joystick is None:
            return False
        try:
            return bool(self.joystick.rumble(strong, weak, duration_ms))
        except (pygame.error, AttributeError) as exc:
            log.debug("Rumble unsupported: %s", exc)
            return False


def trigger_travel(value: float, rest: float) -> float:
    """How far a trigger axis has moved from its resting value, as 0..1."""
    if rest >= 1.0:
        return 0.0
    return max(0.0, min(1.0, (value - rest) / (1.0 - rest)))


def detect_family(name: str) -> str:
    lowered = (name or "").lower()
    if "xbox" in lowered or "xinput" in lowered:
        return "Xbox-style controller"
    if any(tag in lowered for tag in ("playstation", "dualshock", "dualsense", "ps4", "ps5")):
        return "PlayStation-style controller"
    if "nintendo" in lowered or "switch" in lowered:
        return "Nintendo-style controller"
    return "Generic/Unknown controller"


# =====================================================
#   Direction resolution
# =====================================================
@dataclass(frozen=True)
class PaddleBinding:
    up_key: int
    down_key: int
    stick_axis: int
    use_dpad: bool
    up_button: str
    down_button: str
    trigger: str


BINDINGS = {
    LEFT: PaddleBinding(pygame.K_w, pygame.K_s, 1, True, "LB", "X", "LT"),
    RIGHT: PaddleBinding(pygame.K_UP, pygame.K_DOWN, 3, False, "RB", "B", "RT"),
}


@dataclass
class PaddleIntent:
    keyboard: float = 0.0
    gamepad: float = 0.0

    @property
    def combined(self) -> float:
        return self.keyboard + self.gamepad


class InputResolver:
    def __init__(self, deadzone: float = 0.2, trigger_threshold: float = 0.1,
                 bindings: Optional[Dict[str, PaddleBinding]] = None):
        self.deadzone = deadzone
        self.trigger_threshold = trigger_threshold
        self.bindings = dict(bindings or BINDINGS)
        self.button_mappings = dict(DEFAULT_BUTTONS)
        self.previous_buttons: Dict[str, bool] = {}

    def set_custom_mapping(self, mappings: Dict[str, int]):
        self.button_mappings.update(mappings)

    # --- primitives ---
    def apply_deadzone(self, value: float) -> float:
        return 0.0 if abs(value) < self.deadzone else value

    def is_pressed(self, pad: GamepadSnapshot, name: str) -> bool:
        return pad.button(self.button_mappings.get(name)).pressed

    def just_pressed(self, pad: GamepadSnapshot, name: str) -> bool:
        """Rising edge of a logical button since the last query for that name."""
        if name not in self.button_mappings:
            return False
        now = self.is_pressed(pad, name)
        was = self.previous_buttons.get(name, False)
        self.previous_buttons[name] = now
        return now and not was

    def trigger_movement(self, pad: GamepadSnapshot, name: str) -> float:
        value = pad.button(self.button_mappings.get(name)).value
        return value if value > self.trigger_threshold else 0.0

    # --- per paddle ---
    def keyboard_direction(self, keys, binding: PaddleBinding) -> float:
        direction = 0.0
        if keys[binding.up_key]:
            direction -= 1.0
        if keys[binding.down_key]:
            direction += 1.0
        return direction

    def gamepad_direction(self, pad: Optional[GamepadSnapshot], binding: PaddleBinding) -> float:
        if pad is None or not pad.connected:
            return 0.0
        stick = self.apply_deadzone(pad.axis(binding.stick_axis))
        if stick:
            return stick
        if binding.use_dpad:
            if self.is_pressed(pad, "DPAD_UP"):
                return -1.0
            if self.is_pressed(pad, "DPAD_DOWN"):
                return 1.0
        if self.is_pressed(pad, binding.up_button):
            return -1.0
        if self.is_pressed(pad, binding.down_button):
            return 1.0
        return self.trigger_movement(pad, binding.trigger)

    def resolve(self, keys, pad: Optional[GamepadSnapshot] = None) -> Dict[str, PaddleIntent]:
        return {
            side: PaddleIntent(
                keyboard=self.keyboard_direction(keys, binding),
                gamepad=self.gamepad_direction(pad, binding),
            )
            for side, binding in self.bindings.items()
        }

    def debug_inputs(self, pad: GamepadSnapshot):
        if not pad.connected:
            log.info("No gamepad connected")
            return
        log.info("=== Gamepad Debug === %s", pad.name)
        for i, name in AXIS_NAMES.items():
            log.info("%s: %.2f", name, pad.axis(i))
        log.info("Left Trigger: %.2f  Right Trigger: %.2f",
                 pad.button(self.button_mappings.get("LT")).value,
                 pad.button(self.button_mappings.get("RT")).value)
        pressed = [f"{n} ({i})" for n, i in self.button_mappings.items() if pad.button(i).pressed]
        log.info("Pressed buttons: %s", ", ".join(pressed) if pressed else "None")
