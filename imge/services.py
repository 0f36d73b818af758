"""Abstract engine services (screen, input, audio) and the frame clock."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum, auto
from typing import Any, ClassVar


class Key(IntEnum):
    """Keyboard keys, numbered consecutively from zero."""

    A = 0
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()

    NUM0 = auto()
    NUM1 = auto()
    NUM2 = auto()
    NUM3 = auto()
    NUM4 = auto()
    NUM5 = auto()
    NUM6 = auto()
    NUM7 = auto()
    NUM8 = auto()
    NUM9 = auto()

    SPACE = auto()
    ENTER = auto()
    ESCAPE = auto()
    BACKSPACE = auto()
    TAB = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    INSERT = auto()
    DELETE = auto()

    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()

    LEFT_SHIFT = auto()
    RIGHT_SHIFT = auto()
    LEFT_CTRL = auto()
    RIGHT_CTRL = auto()
    LEFT_ALT = auto()
    RIGHT_ALT = auto()
    LEFT_SUPER = auto()
    RIGHT_SUPER = auto()


class MouseButton(IntEnum):
    """Mouse buttons."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    X1 = 4
    X2 = 5


class Screen(ABC):
    """Rendering service; a platform backend provides the implementation."""

    _instance: ClassVar[Screen | None] = None

    @staticmethod
    def get_instance() -> Screen | None:
        """The registered screen, or None."""
        return Screen._instance

    @staticmethod
    def set_instance(instance: Screen | None) -> None:
        """Register the active screen."""
        Screen._instance = instance

    @abstractmethod
    def init(self, width: int, height: int, title: str = "IMGE Game") -> None:
        """Open the window."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the frame with the background."""

    @abstractmethod
    def present(self) -> None:
        """Show the rendered frame."""

    @abstractmethod
    def set_background_color(self, color: str) -> None:
        """Set the background from a "#RRGGBB" or "#RRGGBBAA" string."""

    @abstractmethod
    def set_background_image(self, filename: str) -> None:
        """Set a background image."""

    @abstractmethod
    def is_open(self) -> bool:
        """Whether the window is still open."""

    @abstractmethod
    def close(self) -> None:
        """Close the window."""

    @abstractmethod
    def set_color(self, r: int, g: int, b: int, a: int = 255) -> None:
        """Set the current drawing colour."""

    @abstractmethod
    def draw_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Draw a filled rectangle."""

    @abstractmethod
    def draw_rect_outline(
        self, x: float, y: float, width: float, height: float
    ) -> None:
        """Draw a rectangle outline."""

    @abstractmethod
    def draw_texture(
        self, texture: Any, x: float, y: float, width: float, height: float
    ) -> None:
        """Draw a texture previously returned by load_texture."""

    @abstractmethod
    def load_texture(self, filename: str) -> tuple[Any, int, int] | None:
        """Load an image; return (texture, width, height) or None on failure."""


class Input(ABC):
    """Input service; a platform backend provides the implementation."""

    _instance: ClassVar[Input | None] = None

    @staticmethod
    def get_instance() -> Input | None:
        """The registered input service, or None."""
        return Input._instance

    @staticmethod
    def set_instance(instance: Input | None) -> None:
        """Register the active input service."""
        Input._instance = instance

    @abstractmethod
    def update(self) -> None:
        """Poll the input state; call once per frame."""

    @abstractmethod
    def is_key_pressed(self, key: Key) -> bool:
        """Whether the key is held down."""

    @abstractmethod
    def is_key_just_pressed(self, key: Key) -> bool:
        """Whether the key went down this frame."""

    @abstractmethod
    def is_key_just_released(self, key: Key) -> bool:
        """Whether the key went up this frame."""

    @abstractmethod
    def mouse_position(self) -> tuple[int, int]:
        """The mouse position as (x, y)."""

    @abstractmethod
    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        """Whether the button is held down."""

    @abstractmethod
    def is_mouse_button_just_pressed(self, button: MouseButton) -> bool:
        """Whether the button went down this frame."""

    @abstractmethod
    def is_mouse_button_just_released(self, button: MouseButton) -> bool:
        """Whether the button went up this frame."""

    @abstractmethod
    def mouse_wheel(self) -> tuple[float, float]:
        """Wheel movement this frame as (x, y)."""


class Audio(ABC):
    """Audio service; a platform backend provides the implementation."""

    _instance: ClassVar[Audio | None] = None

    @staticmethod
    def get_instance() -> Audio | None:
        """The registered audio service, or None."""
        return Audio._instance

    @staticmethod
    def set_instance(instance: Audio | None) -> None:
        """Register the active audio service."""
        Audio._instance = instance

    @abstractmethod
    def init(self) -> None:
        """Start the audio system."""

    @abstractmethod
    def play_music(
        self,
        filename: str,
        loop: bool = True,
        fade_in: float = 0.0,
        volume: float = 1.0,
    ) -> None:
        """Play background music; fade_in is in seconds."""

    @abstractmethod
    def stop_music(self, fade_out: float = 0.0) -> None:
        """Stop background music; fade_out is in seconds."""

    @abstractmethod
    def pause_music(self) -> None:
        """Pause background music."""

    @abstractmethod
    def resume_music(self) -> None:
        """Resume background music."""

    @abstractmethod
    def is_music_playing(self) -> bool:
        """Whether background music is playing."""

    @abstractmethod
    def set_music_volume(self, volume: float) -> None:
        """Set music volume in the range 0.0 to 1.0."""

    @abstractmethod
    def play_sound(
        self, filename: str, volume: float = 1.0, loop: bool = False
    ) -> None:
        """Play a sound effect."""

    @abstractmethod
    def stop_sound(self, filename: str) -> None:
        """Stop a sound effect."""

    @abstractmethod
    def set_sound_volume(self, volume: float) -> None:
        """Set sound-effect volume in the range 0.0 to 1.0."""


_FPS_WINDOW = 0.5


@dataclass
class Time:
    """Frame timing: delta time, totals and a periodically sampled FPS."""

    delta_time: float = 0.0
    total_time: float = 0.0
    frame_count: int = 0
    fps: float = 60.0
    target_fps: float = 60.0
    fixed_delta_time: float = 1.0 / 60.0
    _fps_accumulator: float = field(default=0.0, init=False, repr=False)
    _fps_samples: int = field(default=0, init=False, repr=False)

    _instance: ClassVar[Time | None] = None

    @staticmethod
    def get_instance() -> Time:
        """The shared clock, created on first use."""
        if Time._instance is None:
            Time._instance = Time()
        return Time._instance

    def update(self, dt: float) -> None:
        """Advance the clock by ``dt`` seconds; call once per frame."""
        self.delta_time = dt
        self.total_time += dt
        self.frame_count += 1

        self._fps_accumulator += dt
        self._fps_samples += 1
        if self._fps_accumulator >= _FPS_WINDOW:
            self.fps = self._fps_samples / self._fps_accumulator
            self._fps_accumulator = 0.0
            self._fps_samples = 0