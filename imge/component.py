"""Base class for behaviour attached to game objects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from imge.game_object import GameObject


class Component:
    """A unit of behaviour; builtin and custom components share this base.

    Every hook does nothing by default; subclasses override what they need.
    """

    def on_create(self, owner: GameObject) -> None:
        """Called once when the owning object enters a scene."""

    def on_update(self, owner: GameObject) -> None:
        """Called every frame."""

    def on_draw(self, owner: GameObject) -> None:
        """Called every frame after all updates."""

    def from_json(self, data: Mapping[str, Any]) -> None:
        """Load properties from decoded JSON data."""

    def to_json(self) -> dict[str, Any]:
        """Return the component's properties as JSON-ready data."""
        return {}