"""Input service that polls the keyboard and mouse through pygame."""

from __future__ import annotations

import string
from collections.abc import Callable, Mapping
from typing import Any

import pygame

from imge.services import Input, Key, MouseButton

KeyboardState = Callable[[], Any]
MouseState = Callable[[], tuple[tuple[int, int], tuple[bool, ...]]]

_LETTERS = {
    getattr(pygame, f"K_{letter.lower()}"): Key[letter]
    for letter in string.ascii_uppercase
}
_DIGITS = {getattr(pygame, f"K_{digit}"): Key[f"NUM{digit}"] for digit in range(10)}
_SPECIAL = {
    pygame.K_SPACE: Key.SPACE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_BACKSPACE: Key.BACKSPACE,
    pygame.K_TAB: Key.TAB,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
}
_MODIFIERS = {
    pygame.K_LSHIFT: Key.LEFT_SHIFT,
    pygame.K_RSHIFT: Key.RIGHT_SHIFT,
    pygame.K_LCTRL: Key.LEFT_CTRL,
    pygame.K_RCTRL: Key.RIGHT_CTRL,
}

_KEYCODE_TO_KEY: Mapping[int, Key] = {**_LETTERS, **_DIGITS, **_SPECIAL}
_POLLED_KEYS: Mapping[int, Key] = {**_KEYCODE_TO_KEY, **_MODIFIERS}
_POLLED_BUTTONS = (MouseButton.LEFT, MouseButton.MIDDLE, MouseButton.RIGHT)


def key_from_pygame(keycode: int) -> Key:
    """Map a pygame key code to a Key; unknown codes map to Key.A."""
    return _KEYCODE_TO_KEY.get(keycode, Key.A)


def _pygame_mouse() -> tuple[tuple[int, int], tuple[bool, ...]]:
    return pygame.mouse.get_pos(), tuple(pygame.mouse.get_pressed()[:3])


class PygameInput(Input):
    """Polls key and mouse state once per frame; registers itself as active.

    ``keyboard`` returns a state indexable by pygame key codes and ``mouse``
    returns ``((x, y), (left, middle, right))``; both default to pygame.
    """

    def __init__(
        self,
        keyboard: KeyboardState | None = None,
        mouse: MouseState | None = None,
    ) -> None:
        self._keyboard = keyboard if keyboard is not None else pygame.key.get_pressed
        self._mouse = mouse if mouse is not None else _pygame_mouse
        self._current_keys: frozenset[Key] = frozenset()
        self._previous_keys: frozenset[Key] = frozenset()
        self._current_buttons: frozenset[MouseButton] = frozenset()
        self._previous_buttons: frozenset[MouseButton] = frozenset()
        self._mouse_position = (0, 0)
        self._wheel = (0.0, 0.0)
        Input.set_instance(self)

    def update(self) -> None:
        """Take a snapshot of the keyboard and mouse."""
        self._previous_keys = self._current_keys
        self._previous_buttons = self._current_buttons
        self._wheel = (0.0, 0.0)

        pressed = self._keyboard()
        self._current_keys = frozenset(
            key for code, key in _POLLED_KEYS.items() if pressed[code]
        )

        position, buttons = self._mouse()
        self._mouse_position = (int(position[0]), int(position[1]))
        self._current_buttons = frozenset(
            button for button, down in zip(_POLLED_BUTTONS, buttons) if down
        )

    def is_key_pressed(self, key: Key) -> bool:
        return key in self._current_keys

    def is_key_just_pressed(self, key: Key) -> bool:
        return key in self._current_keys and key not in self._previous_keys

    def is_key_just_released(self, key: Key) -> bool:
        return key not in self._current_keys and key in self._previous_keys

    def mouse_position(self) -> tuple[int, int]:
        return self._mouse_position

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        return button in self._current_buttons

    def is_mouse_button_just_pressed(self, button: MouseButton) -> bool:
        return button in self._current_buttons and button not in self._previous_buttons

    def is_mouse_button_just_released(self, button: MouseButton) -> bool:
        return button not in self._current_buttons and button in self._previous_buttons

    def mouse_wheel(self) -> tuple[float, float]:
        return self._wheel