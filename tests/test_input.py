import pytest

from oogabooga.input import (
    Deadzones,
    InputEvent,
    InputEventKind,
    InputFrame,
    InputStateFlags,
    KeyCode,
)
from oogabooga.vectors import Vector2

PRESSED = InputStateFlags.DOWN | InputStateFlags.JUST_PRESSED


def _frame_with(code, state):
    frame = InputFrame()
    frame.key_states[code] = state
    return frame


def test_key_codes_fixed_by_source():
    assert KeyCode(27) is KeyCode.ESCAPE
    assert KeyCode(128) is KeyCode.ARROW_UP
    assert KeyCode(138) is KeyCode.SCROLL_LOCK
    assert KeyCode(int(KeyCode.META)) is KeyCode.CMD
    assert KeyCode(int(KeyCode.GAMEPAD_FIRST)) is KeyCode.GAMEPAD_START
    assert KeyCode(int(KeyCode.MOUSE_LAST)) is KeyCode.MOUSE_BUTTON_RIGHT


def test_default_deadzones():
    dz = Deadzones()
    assert dz.left_stick == Vector2(0.2, 0.2)
    assert dz.right_stick == Vector2(0.2, 0.2)
    assert dz.left_trigger == pytest.approx(0.07)


def test_fresh_frame_keys_are_up():
    frame = InputFrame()
    assert frame.is_key_up(KeyCode.SPACEBAR) is True
    assert frame.is_key_down(KeyCode.SPACEBAR) is False
    assert frame.number_of_events == 0


def test_just_pressed_key():
    frame = _frame_with(ord("A"), PRESSED)
    assert frame.is_key_down(ord("A"))
    assert frame.is_key_just_pressed(ord("A"))
    assert not frame.is_key_up(ord("A"))
    assert not frame.is_key_just_released(ord("A"))


def test_just_released_key_is_up():
    frame = _frame_with(KeyCode.ENTER, InputStateFlags.JUST_RELEASED)
    assert frame.is_key_up(KeyCode.ENTER)
    assert frame.is_key_just_released(KeyCode.ENTER)
    assert not frame.is_key_down(KeyCode.ENTER)


def test_has_key_state_needs_all_flags():
    frame = _frame_with(KeyCode.TAB, InputStateFlags.DOWN)
    assert frame.has_key_state(KeyCode.TAB, InputStateFlags.DOWN)
    assert not frame.has_key_state(KeyCode.TAB, PRESSED)


@pytest.mark.parametrize("code", [0, -1, 175, 1000])
def test_invalid_key_code_raises(code):
    frame = InputFrame()
    with pytest.raises(ValueError):
        frame.is_key_down(code)


@pytest.mark.parametrize(
    "state",
    [
        InputStateFlags.JUST_RELEASED | InputStateFlags.DOWN,
        InputStateFlags.JUST_RELEASED | InputStateFlags.JUST_PRESSED,
    ],
)
def test_corrupt_state_raises(state):
    frame = _frame_with(KeyCode.SHIFT, state)
    with pytest.raises(ValueError):
        frame.is_key_down(KeyCode.SHIFT)


def test_consume_key_just_pressed_clears_only_that_flag():
    frame = _frame_with(KeyCode.GAMEPAD_A, PRESSED)
    assert frame.consume_key_just_pressed(KeyCode.GAMEPAD_A) is True
    assert frame.is_key_just_pressed(KeyCode.GAMEPAD_A) is False
    assert frame.is_key_down(KeyCode.GAMEPAD_A) is True
    assert frame.consume_key_just_pressed(KeyCode.GAMEPAD_A) is False


def test_consume_key_down():
    frame = _frame_with(KeyCode.MOUSE_BUTTON_LEFT, InputStateFlags.DOWN)
    assert frame.consume_key_down(KeyCode.MOUSE_BUTTON_LEFT) is True
    assert frame.is_key_down(KeyCode.MOUSE_BUTTON_LEFT) is False
    assert frame.is_key_up(KeyCode.MOUSE_BUTTON_LEFT) is True


def test_consume_key_just_released():
    frame = _frame_with(KeyCode.F1, InputStateFlags.JUST_RELEASED)
    assert frame.consume_key_just_released(KeyCode.F1) is True
    assert frame.key_states[KeyCode.F1] == InputStateFlags.NONE
    assert frame.consume_key_just_released(KeyCode.F1) is False


def test_repeat_only_state_is_neither_up_nor_down():
    frame = _frame_with(KeyCode.DELETE, InputStateFlags.REPEAT)
    assert frame.is_key_up(KeyCode.DELETE) is False
    assert frame.is_key_down(KeyCode.DELETE) is False


def test_event_defaults_and_ascii():
    event = InputEvent(InputEventKind.TEXT, utf32=ord("z"))
    assert event.gamepad_index == -1
    assert event.ascii == "z"
    assert event.left_stick == Vector2(0, 0)


def test_events_count():
    frame = InputFrame()
    frame.events.append(InputEvent(InputEventKind.SCROLL, yscroll=1.0))
    assert frame.number_of_events == 1
    assert frame.events[0].yscroll == 1.0