"""Keyboard, mouse and gamepad input state for one frame."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List

from .vectors import Vector2

MAX_EVENTS_PER_FRAME = 10000


class InputEventKind(enum.Enum):
    KEY = 0
    SCROLL = 1
    TEXT = 2
    GAMEPAD_AXIS = 3


class KeyCode(enum.IntEnum):
    """Key codes; letters and digits use their ASCII values."""

    UNKNOWN = 0

    BACKSPACE = 8
    TAB = 9
    ENTER = 13
    ESCAPE = 27
    SPACEBAR = 32

    DELETE = 127

    ARROW_UP = 128
    ARROW_DOWN = 129
    ARROW_LEFT = 130
    ARROW_RIGHT = 131

    PAGE_UP = 132
    PAGE_DOWN = 133

    HOME = 134
    END = 135

    INSERT = 136

    PAUSE = 137
    SCROLL_LOCK = 138

    ALT = 139
    CTRL = 140
    SHIFT = 141
    CMD = 142
    META = 142

    F1 = 143
    F2 = 144
    F3 = 145
    F4 = 146
    F5 = 147
    F6 = 148
    F7 = 149
    F8 = 150
    F9 = 151
    F10 = 152
    F11 = 153
    F12 = 154

    PRINT_SCREEN = 155

    GAMEPAD_DPAD_UP = 156
    GAMEPAD_DPAD_RIGHT = 157
    GAMEPAD_DPAD_DOWN = 158
    GAMEPAD_DPAD_LEFT = 159

    GAMEPAD_A = 160
    GAMEPAD_X = 161
    GAMEPAD_Y = 162
    GAMEPAD_B = 163

    GAMEPAD_START = 164
    GAMEPAD_BACK = 165

    GAMEPAD_LEFT_STICK = 166
    GAMEPAD_RIGHT_STICK = 167

    GAMEPAD_LEFT_BUMPER = 168
    GAMEPAD_RIGHT_BUMPER = 169
    GAMEPAD_LEFT_TRIGGER = 170
    GAMEPAD_RIGHT_TRIGGER = 171

    MOUSE_BUTTON_LEFT = 172
    MOUSE_BUTTON_MIDDLE = 173
    MOUSE_BUTTON_RIGHT = 174

    GAMEPAD_FIRST = 164
    GAMEPAD_LAST = 171

    MOUSE_FIRST = 172
    MOUSE_LAST = 174


KEY_CODE_COUNT = 175


class InputStateFlags(enum.IntFlag):
    NONE = 0
    DOWN = 1 << 0
    JUST_PRESSED = 1 << 1
    JUST_RELEASED = 1 << 2
    REPEAT = 1 << 3


class InputAxisFlags(enum.IntFlag):
    NONE = 0
    LEFT_STICK = 1 << 0
    RIGHT_STICK = 1 << 1
    LEFT_TRIGGER = 1 << 2
    RIGHT_TRIGGER = 1 << 3


@dataclass
class InputEvent:
    """One input event; which fields matter depends on ``kind``."""

    kind: InputEventKind
    key_code: int = KeyCode.UNKNOWN
    key_state: InputStateFlags = InputStateFlags.NONE
    gamepad_index: int = -1
    xscroll: float = 0.0
    yscroll: float = 0.0
    utf32: int = 0
    axes_changed: InputAxisFlags = InputAxisFlags.NONE
    left_stick: Vector2 = field(default_factory=Vector2)
    right_stick: Vector2 = field(default_factory=Vector2)
    left_trigger: float = 0.0
    right_trigger: float = 0.0

    @property
    def ascii(self) -> str:
        """The low byte of ``utf32`` as a character."""
        return chr(self.utf32 & 0xFF)


@dataclass
class Deadzones:
    """Axis magnitudes below which gamepad input reads as zero."""

    left_stick: Vector2 = field(default_factory=lambda: Vector2(0.2, 0.2))
    right_stick: Vector2 = field(default_factory=lambda: Vector2(0.2, 0.2))
    left_trigger: float = 0.07
    right_trigger: float = 0.07


_IMPOSSIBLE_STATES = (
    InputStateFlags.JUST_RELEASED | InputStateFlags.DOWN,
    InputStateFlags.JUST_RELEASED | InputStateFlags.JUST_PRESSED,
)


@dataclass
class InputFrame:
    """Events and key states collected for the current frame."""

    events: List[InputEvent] = field(default_factory=list)
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    left_stick: Vector2 = field(default_factory=Vector2)
    right_stick: Vector2 = field(default_factory=Vector2)
    left_trigger: float = 0.0
    right_trigger: float = 0.0
    key_states: List[InputStateFlags] = field(
        default_factory=lambda: [InputStateFlags.NONE] * KEY_CODE_COUNT
    )
    deadzones: Deadzones = field(default_factory=Deadzones)

    @property
    def number_of_events(self) -> int:
        return len(self.events)

    @staticmethod
    def _check_code(code: int) -> None:
        if not 0 < code < KEY_CODE_COUNT:
            raise ValueError(f"Invalid key code {int(code)}!")

    def has_key_state(self, code: int, flags: InputStateFlags) -> bool:
        """Whether every bit of ``flags`` is set for ``code``."""
        self._check_code(code)
        state = self.key_states[code]
        for impossible in _IMPOSSIBLE_STATES:
            if state & impossible == impossible:
                raise ValueError(f"Key state for key '{int(code)}' is corrupt!")
        return state & flags == flags

    def is_key_down(self, code: int) -> bool:
        return self.has_key_state(code, InputStateFlags.DOWN)

    def is_key_up(self, code: int) -> bool:
        self._check_code(code)
        return self.key_states[code] == 0 or self.has_key_state(
            code, InputStateFlags.JUST_RELEASED
        )

    def is_key_just_pressed(self, code: int) -> bool:
        return self.has_key_state(code, InputStateFlags.JUST_PRESSED)

    def is_key_just_released(self, code: int) -> bool:
        return self.has_key_state(code, InputStateFlags.JUST_RELEASED)

    def _consume(self, code: int, flag: InputStateFlags) -> bool:
        result = self.has_key_state(code, flag)
        self.key_states[code] = InputStateFlags(self.key_states[code] & ~flag)
        return result

    def consume_key_down(self, code: int) -> bool:
        """Report and clear the down state of ``code``."""
        return self._consume(code, InputStateFlags.DOWN)

    def consume_key_just_pressed(self, code: int) -> bool:
        """Report and clear the just-pressed state of ``code``."""
        return self._consume(code, InputStateFlags.JUST_PRESSED)

    def consume_key_just_released(self, code: int) -> bool:
        """Report and clear the just-released state of ``code``."""
        return self._consume(code, InputStateFlags.JUST_RELEASED)