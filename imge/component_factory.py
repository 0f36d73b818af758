"""Creation of components from their JSON descriptions."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from imge.component import Component
from imge.hitbox import Hitbox

Creator = Callable[[Any], "Component | None"]

BUILTIN_PREFIX = "@"


class ComponentFactory:
    """Builds builtin (``@``-prefixed) and registered custom components."""

    _custom_components: ClassVar[dict[str, Creator]] = {}

    @classmethod
    def register_component(cls, name: str, creator: Creator) -> None:
        """Register or replace the creator for a custom component name."""
        cls._custom_components[name] = creator

    @classmethod
    def create_component(cls, data: Mapping[str, Any]) -> Component | None:
        """Build a component from ``{"file": ..., "args": [...]}``, or None."""
        if "file" not in data:
            return None
        file = data["file"]
        if not isinstance(file, str):
            raise TypeError(f"component 'file' must be a string, got {file!r}")
        args = data.get("args", [])

        if file.startswith(BUILTIN_PREFIX):
            return cls.create_builtin(file, args)
        creator = cls._custom_components.get(file)
        if creator is None:
            return None
        return creator(args)

    @classmethod
    def create_builtin(cls, name: str, args: Any) -> Component | None:
        """Build a builtin component such as ``@Hitbox``, or None."""
        if name == "@Hitbox" and isinstance(args, (list, tuple)) and args:
            return Hitbox(args)
        return None