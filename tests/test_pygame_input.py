from collections import defaultdict

import pygame
import pytest

from imge.pygame_input import PygameInput, key_from_pygame
from imge.services import Input, Key, MouseButton


@pytest.fixture(autouse=True)
def _restore_input():
    saved = Input.get_instance()
    yield
    Input.set_instance(saved)


def _keyboard(*frames):
    states = iter([defaultdict(bool, {code: True for code in frame}) for frame in frames])
    return lambda: next(states)


def _mouse(*frames):
    states = iter(frames)
    return lambda: next(states)


def _still_mouse():
    return (0, 0), (False, False, False)


@pytest.mark.parametrize(
    ("keycode", "expected"),
    [
        (pygame.K_w, Key.W),
        (pygame.K_z, Key.Z),
        (pygame.K_0, Key.NUM0),
        (pygame.K_9, Key.NUM9),
        (pygame.K_RETURN, Key.ENTER),
        (pygame.K_ESCAPE, Key.ESCAPE),
        (pygame.K_DOWN, Key.DOWN),
    ],
)
def test_key_from_pygame_maps_known_keys(keycode, expected):
    assert key_from_pygame(keycode) == expected


def test_key_from_pygame_falls_back_to_a():
    assert key_from_pygame(pygame.K_F5) == Key.A


def test_constructor_registers_instance():
    inp = PygameInput(keyboard=_keyboard(), mouse=_still_mouse)
    assert Input.get_instance() is inp


def test_key_pressed_and_edges():
    inp = PygameInput(
        keyboard=_keyboard({pygame.K_w}, {pygame.K_w}, set()),
        mouse=_still_mouse,
    )
    inp.update()
    assert inp.is_key_pressed(Key.W)
    assert inp.is_key_just_pressed(Key.W)
    assert not inp.is_key_just_released(Key.W)

    inp.update()
    assert inp.is_key_pressed(Key.W)
    assert not inp.is_key_just_pressed(Key.W)

    inp.update()
    assert not inp.is_key_pressed(Key.W)
    assert inp.is_key_just_released(Key.W)


def test_modifier_keys_are_polled():
    inp = PygameInput(keyboard=_keyboard({pygame.K_LSHIFT, pygame.K_RCTRL}), mouse=_still_mouse)
    inp.update()
    assert inp.is_key_pressed(Key.LEFT_SHIFT)
    assert inp.is_key_pressed(Key.RIGHT_CTRL)
    assert not inp.is_key_pressed(Key.A)


def test_mouse_state():
    inp = PygameInput(
        keyboard=_keyboard(set(), set()),
        mouse=_mouse(((10, 20), (True, False, True)), ((5, 6), (False, False, True))),
    )
    inp.update()
    assert inp.mouse_position() == (10, 20)
    assert inp.is_mouse_button_pressed(MouseButton.LEFT)
    assert inp.is_mouse_button_just_pressed(MouseButton.RIGHT)
    assert not inp.is_mouse_button_pressed(MouseButton.MIDDLE)

    inp.update()
    assert inp.mouse_position() == (5, 6)
    assert inp.is_mouse_button_just_released(MouseButton.LEFT)
    assert not inp.is_mouse_button_just_pressed(MouseButton.RIGHT)
    assert inp.is_mouse_button_pressed(MouseButton.RIGHT)


def test_mouse_wheel_resets_each_frame():
    inp = PygameInput(keyboard=_keyboard(set()), mouse=_still_mouse)
    inp.update()
    assert inp.mouse_wheel() == (0.0, 0.0)