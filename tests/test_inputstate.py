import pytest

from katana.inputstate import InputState
from katana.point import Point


def test_new_key_press_only_on_first_frame():
    state = InputState()
    state.set_key("enter", True)
    assert state.is_key_down("enter")
    assert state.is_new_key_press("enter")
    state.update()
    assert state.is_key_down("enter")
    assert not state.is_new_key_press("enter")


def test_new_key_release():
    state = InputState()
    state.set_key("up", True)
    state.update()
    state.set_key("up", False)
    assert state.is_key_up("up")
    assert state.is_new_key_release("up")
    state.update()
    assert not state.is_new_key_release("up")


def test_unpressed_key_is_up():
    state = InputState()
    assert state.is_key_up("down")
    assert not state.is_new_key_press("down")


def test_mouse_position_and_buttons():
    state = InputState()
    state.set_mouse(12, 34, 1)
    assert state.mouse_position == Point(12, 34)
    assert state.is_mouse_button_down(1)
    assert state.is_mouse_button_up(2)
    assert state.is_new_mouse_button_press(1)
    state.update()
    assert state.was_mouse_button_down(1)
    assert not state.is_new_mouse_button_press(1)
    state.set_mouse(12, 34, 0)
    assert state.is_new_mouse_button_release(1)
    assert state.was_mouse_button_up(2)


def test_connect_gamepad_assigns_slots():
    state = InputState()
    assert state.connect_gamepad("pad-a") == 0
    assert state.connect_gamepad("pad-b") == 1
    assert state.connect_gamepad("pad-a") == 0
    assert state.gamepad_state(1).is_connected
    assert not state.gamepad_state(2).is_connected


def test_connect_gamepad_full():
    state = InputState()
    for n in range(InputState.MAX_GAMEPADS):
        assert state.connect_gamepad(n) == n
    assert state.connect_gamepad("extra") is None


def test_button_event_and_new_press():
    state = InputState()
    state.connect_gamepad("pad")
    state.handle_button_event("pad", 0, True)
    assert state.is_button_down("a", 0) == 0
    assert state.is_new_button_press("a") == 0
    state.update()
    assert state.is_new_button_press("a") is None
    state.handle_button_event("pad", 0, False)
    assert state.is_new_button_release("a", 0) == 0
    assert state.is_button_up("a", 0) == 0


def test_button_numbers_map_to_names():
    state = InputState()
    state.connect_gamepad("pad")
    state.handle_button_event("pad", 13, True)
    state.handle_button_event("pad", 12, True)
    assert state.is_button_down("dpad_up") == 0
    assert state.is_button_down("dpad_down") == 0
    assert state.is_button_down("start") is None


def test_search_finds_second_pad():
    state = InputState()
    state.connect_gamepad("first")
    state.connect_gamepad("second")
    state.handle_button_event("second", 1, True)
    assert state.is_button_down("b") == 1
    assert state.is_button_down("b", 0) is None
    assert state.is_button_up("b") == 0


def test_unknown_joystick_ignored():
    state = InputState()
    state.handle_button_event("ghost", 0, True)
    state.handle_axis_event("ghost", 2, 0, 1.0)
    assert state.is_button_down("a") is None
    assert state.gamepad_state(0).left_trigger == 0.0


def test_axis_events():
    state = InputState()
    state.connect_gamepad("pad")
    state.handle_axis_event("pad", 0, 0, 0.5)
    state.handle_axis_event("pad", 0, 1, -0.25)
    state.handle_axis_event("pad", 1, 1, 0.75)
    state.handle_axis_event("pad", 3, 0, 1.0)
    pad = state.gamepad_state(0)
    assert pad.left_stick == (0.5, -0.25)
    assert pad.right_stick == (0.0, 0.75)
    assert pad.right_trigger == 1.0
    assert pad.left_trigger == 0.0


def test_gamepad_state_is_a_copy():
    state = InputState()
    state.connect_gamepad("pad")
    snapshot = state.gamepad_state(0)
    state.handle_button_event("pad", 2, True)
    assert not snapshot.is_button_down("x")
    assert state.gamepad_state(0).is_button_down("x")


def test_unknown_button_name_raises():
    state = InputState()
    with pytest.raises(ValueError):
        state.is_button_down("turbo")