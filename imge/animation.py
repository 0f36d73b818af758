"""Builtin sprite-sheet animation component."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from imge.component import Component
from imge.image import _leading_int, _require_str
from imge.services import Screen, Time

if TYPE_CHECKING:
    from imge.game_object import GameObject


@dataclass
class AnimationData:
    """Description of a sprite-sheet animation."""

    file: str = ""
    frame_width: int = 32
    frame_height: int = 32
    frames: list[int] = field(default_factory=list)
    speed: float = 10.0
    loop: bool = True


@dataclass(frozen=True)
class FrameRect:
    """The area of the sheet that holds one frame."""

    x: int
    y: int
    width: int
    height: int


class Animation(Component):
    """Steps through frames at ``speed`` frames per second."""

    def __init__(
        self, data: AnimationData, pivot_x: str = "0", pivot_y: str = "0"
    ) -> None:
        self.data = replace(data, frames=list(data.frames))
        self.frame_width = data.frame_width
        self.frame_height = data.frame_height
        self.speed = data.speed
        self.loop = data.loop
        self.pivot_x = 0
        self.pivot_y = 0
        self.width = 0
        self.height = 0
        self.texture: Any = None
        self.frames: list[FrameRect] = []
        self.current_frame = 0
        self.timer = 0.0
        self.playing = True

    def on_create(self, owner: GameObject) -> None:
        """Centre the pivot, build the frame list and load the sheet if possible."""
        self.pivot_x = self._parse_pivot("center", self.width)
        self.pivot_y = self._parse_pivot("center", self.height)
        self.frames = [FrameRect(0, 0, self.frame_width, self.frame_height)]

        screen = Screen.get_instance()
        if screen is not None and self.data.file:
            loaded = screen.load_texture(self.data.file)
            if loaded is not None:
                self.texture = loaded[0]

    def on_update(self, owner: GameObject) -> None:
        """Advance the frame timer by the frame's delta time."""
        if not self.playing:
            return
        self.timer += Time.get_instance().delta_time * self.speed
        if self.timer < 1.0:
            return
        self.timer = 0.0
        self.current_frame += 1
        if self.current_frame >= len(self.frames):
            if self.loop:
                self.current_frame = 0
            else:
                self.playing = False
                self.current_frame = max(len(self.frames) - 1, 0)

    def on_draw(self, owner: GameObject) -> None:
        """Draw the sheet texture at the current frame size, pivot on the owner."""
        screen = Screen.get_instance()
        if screen is None or self.texture is None or not self.frames:
            return
        frame = self.frames[self.current_frame]
        screen.draw_texture(
            self.texture,
            owner.x - self.pivot_x,
            owner.y - self.pivot_y,
            frame.width,
            frame.height,
        )

    def from_json(self, data: Mapping[str, Any]) -> None:
        """Read the animation fields and pivots from decoded JSON."""
        if "file" in data:
            self.data.file = _require_str(data, "file")
        if "frameWidth" in data:
            self.data.frame_width = int(data["frameWidth"])
            self.frame_width = self.data.frame_width
        if "frameHeight" in data:
            self.data.frame_height = int(data["frameHeight"])
            self.frame_height = self.data.frame_height
        if "frames" in data:
            self.data.frames = [int(index) for index in data["frames"]]
        if "speed" in data:
            self.data.speed = float(data["speed"])
            self.speed = self.data.speed
        if "loop" in data:
            self.data.loop = bool(data["loop"])
            self.loop = self.data.loop
        if "pivotX" in data:
            self.pivot_x = self._parse_pivot(_require_str(data, "pivotX"), self.width)
        if "pivotY" in data:
            self.pivot_y = self._parse_pivot(_require_str(data, "pivotY"), self.height)

    @staticmethod
    def _parse_pivot(value: str, max_value: int) -> int:
        if value == "center":
            return int(max_value / 2)
        if value == "end":
            return max_value - 1
        parsed = _leading_int(value)
        return 0 if parsed is None else parsed