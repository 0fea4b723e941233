import pytest

from parus.events import EventSystem, EventType
from parus.input import Input, KeyButton, MouseButton, key_name, mouse_button_name


@pytest.fixture
def recorded():
    events = EventSystem()
    log = []
    events.register_event(
        EventType.KEY_PRESSED, lambda k: log.append(("pressed", k)), KeyButton
    )
    events.register_event(
        EventType.KEY_RELEASED, lambda k: log.append(("released", k)), KeyButton
    )
    events.register_event(
        EventType.MOUSE_BUTTON_PRESSED, lambda b: log.append(("down", b)), MouseButton
    )
    events.register_event(
        EventType.MOUSE_BUTTON_RELEASED, lambda b: log.append(("up", b)), MouseButton
    )
    events.register_event(
        EventType.MOUSE_MOVED, lambda x, y: log.append(("move", x, y)), int, int
    )
    events.register_event(EventType.MOUSE_WHEEL, lambda d: log.append(("wheel", d)), int)
    events.register_event(EventType.CHAR_INPUT, lambda c: log.append(("char", c)), str)
    return Input(events), log


def test_key_names_follow_source():
    assert key_name(KeyButton.ESCAPE) == "KEY_ESCAPE"
    assert key_name(KeyButton.NUMPAD_EQUAL) == "KEY_NUMPAD_EQUAL"
    assert key_name(0x2B) == "unknown"
    assert KeyButton.ESCAPE == 0x1B
    assert KeyButton.GRAVE == 0xC0


def test_mouse_button_names():
    assert mouse_button_name(MouseButton.LEFT) == "BUTTON_LEFT"
    assert mouse_button_name(MouseButton.MIDDLE) == "BUTTON_MIDDLE"
    assert mouse_button_name(7) == "unknown"


def test_key_press_fires_once_per_change(recorded):
    inp, log = recorded
    inp.process_key(KeyButton.A, True)
    inp.process_key(KeyButton.A, True)
    assert inp.is_key_pressed(KeyButton.A)
    inp.process_key(KeyButton.A, False)
    inp.process_key(KeyButton.A, False)
    assert not inp.is_key_pressed(KeyButton.A)
    assert log == [("pressed", KeyButton.A), ("released", KeyButton.A)]


def test_release_without_press_fires_nothing(recorded):
    inp, log = recorded
    inp.process_key(KeyButton.SPACE, False)
    assert log == []


def test_mouse_buttons(recorded):
    inp, log = recorded
    inp.process_button(MouseButton.RIGHT, True)
    inp.process_button(MouseButton.RIGHT, True)
    assert inp.is_mouse_down(MouseButton.RIGHT)
    assert not inp.is_mouse_down(MouseButton.LEFT)
    inp.process_button(MouseButton.RIGHT, False)
    assert log == [("down", MouseButton.RIGHT), ("up", MouseButton.RIGHT)]
    assert not inp.is_mouse_down(MouseButton.RIGHT)


def test_mouse_move_and_offset(recorded):
    inp, log = recorded
    inp.process_mouse_move(10, 20)
    assert log == [("move", 10, 20)]
    assert (inp.mouse_x, inp.mouse_y) == (10, 20)
    assert inp.mouse_offset() == (10, -20)
    assert inp.mouse_offset() == (0, 0)


def test_mouse_move_to_same_position_is_ignored(recorded):
    inp, log = recorded
    inp.process_mouse_move(0, 0)
    assert log == []
    assert inp.mouse_offset() == (0, 0)


def test_wheel_and_char_events(recorded):
    inp, log = recorded
    inp.process_mouse_wheel(-1)
    inp.process_char("q")
    assert log == [("wheel", -1), ("char", "q")]


def test_input_without_event_system_tracks_state():
    inp = Input()
    inp.process_key(KeyButton.ESCAPE, True)
    inp.process_mouse_move(3, 4)
    assert inp.is_key_pressed(KeyButton.ESCAPE)
    assert inp.mouse_offset() == (3, -4)