"""State of keyboard, mouse and game pad input across two consecutive frames."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Hashable, Optional

from katana.point import Point

_BUTTONS_BY_INDEX: tuple[str, ...] = (
    "a",
    "b",
    "x",
    "y",
    "right_shoulder",
    "left_shoulder",
    "right_stick",
    "left_stick",
    "back",
    "start",
    "dpad_right",
    "dpad_left",
    "dpad_down",
    "dpad_up",
)
_BUTTON_NAMES = frozenset(_BUTTONS_BY_INDEX)


def _check_button(button: str) -> None:
    if button not in _BUTTON_NAMES:
        raise ValueError(f"unknown game pad button: {button!r}")


@dataclass
class _GamePadState:
    """Sticks, triggers and buttons of one game pad."""

    joystick: Any = None
    is_connected: bool = False
    left_stick: tuple[float, float] = (0.0, 0.0)
    right_stick: tuple[float, float] = (0.0, 0.0)
    left_trigger: float = 0.0
    right_trigger: float = 0.0
    pressed: set[str] = field(default_factory=set)

    def reset(self) -> None:
        self.left_stick = (0.0, 0.0)
        self.right_stick = (0.0, 0.0)
        self.left_trigger = 0.0
        self.right_trigger = 0.0
        self.pressed.clear()

    def is_button_down(self, button: str) -> bool:
        _check_button(button)
        return button in self.pressed

    def is_button_up(self, button: str) -> bool:
        return not self.is_button_down(button)


@dataclass
class _MouseState:
    x: int = 0
    y: int = 0
    buttons: int = 0


class InputState:
    """Current and previous input of the keyboard, the mouse and up to four game pads.

    Device events are fed in through set_key, set_mouse and the game pad
    handlers; update() ends a frame by making the current state the previous one.
    Game pad buttons are named: "a", "b", "x", "y", "right_shoulder",
    "left_shoulder", "right_stick", "left_stick", "back", "start",
    "dpad_right", "dpad_left", "dpad_down" and "dpad_up".
    """

    MAX_GAMEPADS = 4

    def __init__(self) -> None:
        self._current_keys: set[Hashable] = set()
        self._previous_keys: set[Hashable] = set()
        self._current_mouse = _MouseState()
        self._previous_mouse = _MouseState()
        self._current_pads = [_GamePadState() for _ in range(self.MAX_GAMEPADS)]
        self._previous_pads = [_GamePadState() for _ in range(self.MAX_GAMEPADS)]
        self._pad_indices: dict[Any, int] = {}

    def update(self) -> None:
        """End the frame: the current state becomes the previous state."""
        self._previous_keys = set(self._current_keys)
        self._previous_mouse = copy.copy(self._current_mouse)
        self._previous_pads = [copy.deepcopy(pad) for pad in self._current_pads]

    # Device events

    def set_key(self, key: Hashable, down: bool) -> None:
        """Record a key as held down or released."""
        if down:
            self._current_keys.add(key)
        else:
            self._current_keys.discard(key)

    def set_mouse(self, x: int, y: int, buttons: int) -> None:
        """Record the cursor position and the bit mask of held mouse buttons."""
        self._current_mouse = _MouseState(x, y, buttons)

    def connect_gamepad(self, joystick: Any) -> Optional[int]:
        """Assign a joystick to the first free game pad slot.

        Returns the slot index, the existing index if the joystick is already
        connected, or None if every slot is taken.
        """
        if joystick in self._pad_indices:
            return self._pad_indices[joystick]
        for index, pad in enumerate(self._current_pads):
            if pad.joystick is None:
                pad.joystick = joystick
                pad.is_connected = True
                pad.reset()
                self._previous_pads[index] = copy.deepcopy(pad)
                self._pad_indices[joystick] = index
                return index
        return None

    def handle_axis_event(self, joystick: Any, stick: int, axis: int, position: float) -> None:
        """Record a stick or trigger movement; unknown joysticks are ignored."""
        index = self._pad_indices.get(joystick)
        if index is None:
            return
        pad = self._current_pads[index]
        if stick == 0 and axis == 0:
            pad.left_stick = (position, pad.left_stick[1])
        elif stick == 0 and axis == 1:
            pad.left_stick = (pad.left_stick[0], position)
        elif stick == 1 and axis == 0:
            pad.right_stick = (position, pad.right_stick[1])
        elif stick == 1 and axis == 1:
            pad.right_stick = (pad.right_stick[0], position)
        elif stick == 2:
            pad.left_trigger = position
        elif stick == 3:
            pad.right_trigger = position

    def handle_button_event(self, joystick: Any, button: int, pressed: bool) -> None:
        """Record a button press or release by raw button number.

        Unknown joysticks and button numbers are ignored.
        """
        index = self._pad_indices.get(joystick)
        if index is None or not 0 <= button < len(_BUTTONS_BY_INDEX):
            return
        name = _BUTTONS_BY_INDEX[button]
        pressed_set = self._current_pads[index].pressed
        if pressed:
            pressed_set.add(name)
        else:
            pressed_set.discard(name)

    # Keyboard

    def is_key_down(self, key: Hashable) -> bool:
        """True if the key is held down."""
        return key in self._current_keys

    def is_key_up(self, key: Hashable) -> bool:
        """True if the key is not held down."""
        return key not in self._current_keys

    def is_new_key_press(self, key: Hashable) -> bool:
        """True if the key went down this frame."""
        return self.is_key_down(key) and key not in self._previous_keys

    def is_new_key_release(self, key: Hashable) -> bool:
        """True if the key was released this frame."""
        return self.is_key_up(key) and key in self._previous_keys

    # Mouse

    @property
    def mouse_position(self) -> Point:
        """Current screen position of the mouse cursor."""
        return Point(self._current_mouse.x, self._current_mouse.y)

    def is_mouse_button_down(self, button: int) -> bool:
        """True if the mouse button flag is set now."""
        return bool(self._current_mouse.buttons & button)

    def is_mouse_button_up(self, button: int) -> bool:
        """True if the mouse button flag is clear now."""
        return not self.is_mouse_button_down(button)

    def was_mouse_button_down(self, button: int) -> bool:
        """True if the mouse button flag was set last frame."""
        return bool(self._previous_mouse.buttons & button)

    def was_mouse_button_up(self, button: int) -> bool:
        """True if the mouse button flag was clear last frame."""
        return not self.was_mouse_button_down(button)

    def is_new_mouse_button_press(self, button: int) -> bool:
        """True if the mouse button went down this frame."""
        return self.is_mouse_button_down(button) and self.was_mouse_button_up(button)

    def is_new_mouse_button_release(self, button: int) -> bool:
        """True if the mouse button was released this frame."""
        return self.was_mouse_button_down(button) and self.is_mouse_button_up(button)

    # Game pads

    def _find_pad(self, controlling_index: int, test) -> Optional[int]:
        if 0 <= controlling_index < self.MAX_GAMEPADS:
            return controlling_index if test(controlling_index) else None
        return next((i for i in range(self.MAX_GAMEPADS) if test(i)), None)

    def is_button_up(self, button: str, controlling_index: int = -1) -> Optional[int]:
        """Index of the pad whose button is up, or None.

        With an invalid controlling_index every pad is tested and the first
        match is returned.
        """
        _check_button(button)
        return self._find_pad(
            controlling_index, lambda i: self._current_pads[i].is_button_up(button)
        )

    def is_button_down(self, button: str, controlling_index: int = -1) -> Optional[int]:
        """Index of the pad whose button is down, or None."""
        _check_button(button)
        return self._find_pad(
            controlling_index, lambda i: self._current_pads[i].is_button_down(button)
        )

    def is_new_button_press(self, button: str, controlling_index: int = -1) -> Optional[int]:
        """Index of the pad whose button went down this frame, or None."""
        _check_button(button)
        return self._find_pad(
            controlling_index,
            lambda i: self._current_pads[i].is_button_down(button)
            and self._previous_pads[i].is_button_up(button),
        )

    def is_new_button_release(self, button: str, controlling_index: int = -1) -> Optional[int]:
        """Index of the pad whose button was released this frame, or None."""
        _check_button(button)
        return self._find_pad(
            controlling_index,
            lambda i: self._current_pads[i].is_button_up(button)
            and self._previous_pads[i].is_button_down(button),
        )

    def gamepad_state(self, index: int) -> _GamePadState:
        """Return a copy of the current state of the game pad at index."""
        return copy.deepcopy(self._current_pads[index])