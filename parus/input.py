"""Keyboard and mouse state tracking that turns raw input into engine events."""

from __future__ import annotations

import logging
from enum import IntEnum

from parus.events import EventSystem, EventType
from parus.services import Service

__all__ = ["KeyButton", "MouseButton", "Input", "key_name", "mouse_button_name"]

_log = logging.getLogger(__name__)


class MouseButton(IntEnum):
    """Mouse buttons the engine tracks."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class KeyButton(IntEnum):
    """Keyboard keys, numbered by their virtual-key codes."""

    BACKSPACE = 0x08
    ENTER = 0x0D
    TAB = 0x09
    SHIFT = 0x10
    CONTROL = 0x11

    PAUSE = 0x13
    CAPITAL = 0x14

    ESCAPE = 0x1B

    CONVERT = 0x1C
    NONCONVERT = 0x1D
    ACCEPT = 0x1E
    MODECHANGE = 0x1F

    SPACE = 0x20
    PRIOR = 0x21
    NEXT = 0x22
    END = 0x23
    HOME = 0x24
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28
    SELECT = 0x29
    PRINT = 0x2A
    SNAPSHOT = 0x2C
    INSERT = 0x2D
    DELETE = 0x2E
    HELP = 0x2F

    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49  # noqa: E741
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F  # noqa: E741
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A

    LWIN = 0x5B
    RWIN = 0x5C
    APPS = 0x5D

    SLEEP = 0x5F

    NUMPAD0 = 0x60
    NUMPAD1 = 0x61
    NUMPAD2 = 0x62
    NUMPAD3 = 0x63
    NUMPAD4 = 0x64
    NUMPAD5 = 0x65
    NUMPAD6 = 0x66
    NUMPAD7 = 0x67
    NUMPAD8 = 0x68
    NUMPAD9 = 0x69
    MULTIPLY = 0x6A
    ADD = 0x6B
    SEPARATOR = 0x6C
    SUBTRACT = 0x6D
    DECIMAL = 0x6E
    DIVIDE = 0x6F
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B
    F13 = 0x7C
    F14 = 0x7D
    F15 = 0x7E
    F16 = 0x7F
    F17 = 0x80
    F18 = 0x81
    F19 = 0x82
    F20 = 0x83
    F21 = 0x84
    F22 = 0x85
    F23 = 0x86
    F24 = 0x87

    NUMLOCK = 0x90
    SCROLL = 0x91

    NUMPAD_EQUAL = 0x92

    LSHIFT = 0xA0
    RSHIFT = 0xA1
    LCONTROL = 0xA2
    RCONTROL = 0xA3
    LMENU = 0xA4
    RMENU = 0xA5

    SEMICOLON = 0xBA
    PLUS = 0xBB
    COMMA = 0xBC
    MINUS = 0xBD
    PERIOD = 0xBE
    SLASH = 0xBF
    GRAVE = 0xC0


def key_name(key: object) -> str:
    """Return ``KEY_<NAME>`` for a known key, else ``unknown``."""
    try:
        return f"KEY_{KeyButton(key).name}"
    except ValueError:
        return "unknown"


def mouse_button_name(button: object) -> str:
    """Return ``BUTTON_<NAME>`` for a known mouse button, else ``unknown``."""
    try:
        return f"BUTTON_{MouseButton(button).name}"
    except ValueError:
        return "unknown"


class Input(Service):
    """Tracks pressed keys and buttons and the mouse position, firing events on change."""

    def __init__(self, events: EventSystem | None = None) -> None:
        self.events = events
        self._pressed_keys: set[KeyButton] = set()
        self._pressed_buttons: set[MouseButton] = set()
        self.mouse_x = 0
        self.mouse_y = 0
        self._offset_x = 0
        self._offset_y = 0
        self._last_offset_x = 0
        self._last_offset_y = 0

    def _fire(self, event_type: EventType, *args: object) -> None:
        if self.events is not None:
            self.events.fire_event(event_type, *args)

    def process_key(self, key: KeyButton, is_pressed: bool) -> None:
        """Record a key's state; fire a pressed or released event when it changes."""
        key = KeyButton(key)
        if (key in self._pressed_keys) == is_pressed:
            return
        if is_pressed:
            self._pressed_keys.add(key)
        else:
            self._pressed_keys.discard(key)
        self._fire(EventType.KEY_PRESSED if is_pressed else EventType.KEY_RELEASED, key)
        _log.debug("Key %s is %s", key_name(key), "pressed" if is_pressed else "released")

    def process_char(self, input_char: str) -> None:
        """Fire a character-input event."""
        self._fire(EventType.CHAR_INPUT, input_char)
        _log.debug("Char entered: %s", input_char)

    def process_button(self, button: MouseButton, is_pressed: bool) -> None:
        """Record a mouse button's state; fire an event when it changes."""
        button = MouseButton(button)
        if (button in self._pressed_buttons) == is_pressed:
            return
        if is_pressed:
            self._pressed_buttons.add(button)
        else:
            self._pressed_buttons.discard(button)
        self._fire(
            EventType.MOUSE_BUTTON_PRESSED if is_pressed else EventType.MOUSE_BUTTON_RELEASED,
            button,
        )
        _log.debug(
            "Mouse %s is %s", mouse_button_name(button), "pressed" if is_pressed else "released"
        )

    def process_mouse_move(self, mouse_x: int, mouse_y: int) -> None:
        """Update the mouse position and offset; fire a moved event when it changes."""
        if mouse_x == self.mouse_x and mouse_y == self.mouse_y:
            return
        self._offset_x = mouse_x - self.mouse_x
        self._offset_y = self.mouse_y - mouse_y
        self.mouse_x = mouse_x
        self.mouse_y = mouse_y
        self._fire(EventType.MOUSE_MOVED, mouse_x, mouse_y)

    def process_mouse_wheel(self, wheel_delta: int) -> None:
        """Fire a mouse-wheel event."""
        self._fire(EventType.MOUSE_WHEEL, wheel_delta)

    def is_key_pressed(self, key: KeyButton) -> bool:
        """Tell whether the key is held down."""
        return KeyButton(key) in self._pressed_keys

    def is_mouse_down(self, button: MouseButton) -> bool:
        """Tell whether the mouse button is held down."""
        return MouseButton(button) in self._pressed_buttons

    def mouse_offset(self) -> tuple[int, int]:
        """Return the last movement offset, or (0, 0) if it was already reported."""
        if self._last_offset_x == self._offset_x and self._last_offset_y == self._offset_y:
            self._offset_x = 0
            self._offset_y = 0
        self._last_offset_x = self._offset_x
        self._last_offset_y = self._offset_y
        return self._offset_x, self._offset_y