"""Builtin collision-box component."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from imge.component import Component
from imge.geometry import Rect

if TYPE_CHECKING:
    from imge.game_object import GameObject


@dataclass(frozen=True)
class HitboxDef:
    """A box relative to its owner's position, optionally named."""

    offset_x: float = 0.0
    offset_y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    name: str = ""

    def to_world(self, owner: GameObject) -> Rect:
        """The box placed at the owner's position."""
        return Rect(
            owner.x + self.offset_x, owner.y + self.offset_y, self.width, self.height
        )


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_hitbox(data: Any) -> HitboxDef:
    """Parse ``[offset_x, offset_y, width, height]``; anything else is a zero box."""
    if not (_is_sequence(data) and len(data) == 4):
        return HitboxDef()
    for value in data:
        if not isinstance(value, (int, float)):
            raise TypeError(f"hitbox values must be numbers, got {value!r}")
    offset_x, offset_y, width, height = (float(value) for value in data)
    return HitboxDef(offset_x, offset_y, width, height)


def _parse_hitboxes(data: Any) -> list[HitboxDef]:
    """Parse a single box, a list of boxes, or a mapping of named boxes."""
    if _is_sequence(data):
        if len(data) == 4 and _is_number(data[0]):
            return [_parse_hitbox(data)]
        return [_parse_hitbox(item) for item in data]
    if isinstance(data, Mapping):
        return [
            replace(_parse_hitbox(value), name=name)
            for name, value in sorted(data.items())
            if _is_sequence(value) and len(value) == 4
        ]
    return []


class Hitbox(Component):
    """Collision boxes attached to an object.

    Accepts a single box ``[x, y, w, h]``, a list of boxes, or a mapping
    of names to boxes.
    """

    def __init__(self, hitboxes: Any = None) -> None:
        self.hitboxes: list[HitboxDef] = _parse_hitboxes(hitboxes)

    def world_hitboxes(self, owner: GameObject) -> list[Rect]:
        """All boxes in world coordinates."""
        return [hitbox.to_world(owner) for hitbox in self.hitboxes]

    def named_hitbox(self, name: str, owner: GameObject) -> Rect | None:
        """The first box with the given name in world coordinates, or None."""
        for hitbox in self.hitboxes:
            if hitbox.name == name:
                return hitbox.to_world(owner)
        return None

    def from_json(self, data: Mapping[str, Any]) -> None:
        """Replace the boxes from a ``hitboxes`` entry and/or an ``args`` entry."""
        self.hitboxes = []
        if "hitboxes" in data:
            self.hitboxes.extend(_parse_hitboxes(data["hitboxes"]))
        args = data.get("args")
        if _is_sequence(args) and args:
            first = args[0]
            if _is_sequence(first) and len(first) == 4:
                self.hitboxes.append(_parse_hitbox(first))