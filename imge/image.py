"""Builtin sprite component that draws a single image."""

from __future__ import annotations

import re
import sys
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from imge.component import Component
from imge.services import Screen

if TYPE_CHECKING:
    from imge.game_object import GameObject

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_DEFAULT_CENTER = 16
_DEFAULT_END = 31


def _leading_int(text: str) -> int | None:
    """The integer at the start of ``text``, or None if there is none in range."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def _require_str(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {value!r}")
    return value


class Image(Component):
    """Draws an image with its pivot placed at the owner's position.

    Pivots are ``"center"``, ``"end"`` or a pixel offset given as text.
    """

    def __init__(self, image_path: str, pivot_x: str = "0", pivot_y: str = "0") -> None:
        self.image_path = image_path
        self._pivot_x_spec = pivot_x
        self._pivot_y_spec = pivot_y
        self.pivot_x = 0
        self.pivot_y = 0
        self.width = 0
        self.height = 0
        self.texture: Any = None

    def on_create(self, owner: GameObject) -> None:
        """Load the texture and resolve the pivots against its size."""
        screen = Screen.get_instance()
        if screen is None:
            return
        loaded = screen.load_texture(self.image_path)
        if loaded is None:
            print(f"Failed to load image: {self.image_path}", file=sys.stderr)
            return
        self.texture, self.width, self.height = loaded
        self.pivot_x = self._parse_pivot(self._pivot_x_spec, self.width)
        self.pivot_y = self._parse_pivot(self._pivot_y_spec, self.height)

    def on_draw(self, owner: GameObject) -> None:
        """Draw the texture so that its pivot sits on the owner."""
        screen = Screen.get_instance()
        if screen is None or self.texture is None:
            return
        screen.draw_texture(
            self.texture,
            owner.x - self.pivot_x,
            owner.y - self.pivot_y,
            self.width,
            self.height,
        )

    def from_json(self, data: Mapping[str, Any]) -> None:
        """Read ``file``, ``pivotX`` and ``pivotY``."""
        if "file" in data:
            self.image_path = _require_str(data, "file")
        if "pivotX" in data:
            self.pivot_x = self._parse_pivot(_require_str(data, "pivotX"), self.width)
        if "pivotY" in data:
            self.pivot_y = self._parse_pivot(_require_str(data, "pivotY"), self.height)

    def set_pivot(self, x: str, y: str) -> None:
        """Resolve new pivots against the current size."""
        self.pivot_x = self._parse_pivot(x, self.width)
        self.pivot_y = self._parse_pivot(y, self.height)

    @staticmethod
    def _parse_pivot(value: str, max_value: int) -> int:
        if value == "center":
            return max_value // 2 if max_value > 0 else _DEFAULT_CENTER
        if value == "end":
            return max_value - 1 if max_value > 0 else _DEFAULT_END
        parsed = _leading_int(value)
        return 0 if parsed is None else parsed