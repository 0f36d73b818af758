"""Screen service drawn with pygame."""

from __future__ import annotations

import re
import sys
from typing import Any

import pygame

from imge.services import Screen

_HEX_PREFIX = re.compile(r"\s*(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_OPAQUE_BLACK = 0x000000FF


def parse_hex_color(color: str) -> int | None:
    """Parse ``#RRGGBB`` or ``#RRGGBBAA`` into a packed ``0xRRGGBBAA`` value.

    Returns None for strings without a leading ``#`` or of another length;
    raises ValueError when no hex digits follow the ``#``.
    """
    if not color.startswith("#"):
        return None
    digits = color[1:]
    match = _HEX_PREFIX.match(digits)
    if match is None:
        raise ValueError(f"invalid hex colour: {color!r}")
    value = int(match.group(1), 16) & 0xFFFFFFFF
    if len(digits) == 6:
        return ((value << 8) | 0xFF) & 0xFFFFFFFF
    if len(digits) == 8:
        return value
    return None


def _unpack(color: int) -> tuple[int, int, int, int]:
    return (
        (color >> 24) & 0xFF,
        (color >> 16) & 0xFF,
        (color >> 8) & 0xFF,
        color & 0xFF,
    )


class PygameScreen(Screen):
    """A window drawn with pygame; registers itself as the active screen."""

    def __init__(self) -> None:
        self.window: pygame.Surface | None = None
        self.width = 0
        self.height = 0
        self.background_color = _OPAQUE_BLACK
        self._background_image: pygame.Surface | None = None
        self._draw_color: tuple[int, int, int, int] = (0, 0, 0, 255)
        self._open = False
        Screen.set_instance(self)

    @property
    def background_rgba(self) -> tuple[int, int, int, int]:
        """The background colour as (r, g, b, a)."""
        return _unpack(self.background_color)

    def _surface(self) -> pygame.Surface:
        if self.window is None:
            raise RuntimeError("screen is not initialised")
        return self.window

    def init(self, width: int, height: int, title: str = "IMGE Game") -> None:
        """Open a window of the given size and title."""
        self.width = width
        self.height = height
        try:
            pygame.display.init()
            self.window = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise RuntimeError(f"Failed to create window: {exc}") from exc
        pygame.display.set_caption(title)
        self._open = True

    def clear(self) -> None:
        """Fill the window with the background colour and image."""
        surface = self._surface()
        surface.fill(self.background_rgba)
        if self._background_image is not None:
            image = self._background_image
            size = surface.get_size()
            if image.get_size() != size:
                image = pygame.transform.scale(image, size)
            surface.blit(image, (0, 0))

    def present(self) -> None:
        """Show the frame."""
        self._surface()
        pygame.display.flip()

    def set_background_color(self, color: str) -> None:
        """Set the background from a hex string; malformed strings are ignored."""
        value = parse_hex_color(color)
        if value is not None:
            self.background_color = value

    def set_background_image(self, filename: str) -> None:
        """Draw an image, stretched to the window, over the background colour."""
        try:
            self._background_image = pygame.image.load(filename)
        except (pygame.error, OSError) as exc:
            print(f"Failed to load image {filename}: {exc}", file=sys.stderr)

    def is_open(self) -> bool:
        return self._open

    def close(self) -> None:
        self._open = False

    def set_color(self, r: int, g: int, b: int, a: int = 255) -> None:
        self._draw_color = (r, g, b, a)

    def _pixel_rect(
        self, x: float, y: float, width: float, height: float
    ) -> pygame.Rect:
        return pygame.Rect(int(x), int(y), int(width), int(height))

    def draw_rect(self, x: float, y: float, width: float, height: float) -> None:
        pygame.draw.rect(
            self._surface(), self._draw_color, self._pixel_rect(x, y, width, height)
        )

    def draw_rect_outline(
        self, x: float, y: float, width: float, height: float
    ) -> None:
        pygame.draw.rect(
            self._surface(),
            self._draw_color,
            self._pixel_rect(x, y, width, height),
            width=1,
        )

    def draw_texture(
        self, texture: Any, x: float, y: float, width: float, height: float
    ) -> None:
        """Draw a loaded surface stretched to the given size."""
        if texture is None:
            return
        surface = self._surface()
        size = (int(width), int(height))
        if size[0] <= 0 or size[1] <= 0:
            return
        if texture.get_size() != size:
            texture = pygame.transform.scale(texture, size)
        surface.blit(texture, (int(x), int(y)))

    def load_texture(self, filename: str) -> tuple[Any, int, int] | None:
        """Load an image file; report and return None on failure."""
        try:
            surface = pygame.image.load(filename)
        except (pygame.error, OSError) as exc:
            print(f"Failed to load image {filename}: {exc}", file=sys.stderr)
            return None
        if self.window is not None:
            surface = surface.convert_alpha()
        return surface, surface.get_width(), surface.get_height()