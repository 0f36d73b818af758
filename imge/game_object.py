"""Game objects: named, tagged entities that carry components."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

from imge.component import Component
from imge.component_factory import BUILTIN_PREFIX, ComponentFactory


@dataclass(eq=False)
class GameObject:
    """An entity in a scene.

    Tag changes are recorded as pending so that the scene can bring its
    tag index up to date at the end of the frame.
    """

    x: float = 0.0
    y: float = 0.0
    name: str = ""
    tags: set[str] = field(default_factory=set)
    depth: float = 0.0
    components: dict[str, Component] = field(default_factory=dict, init=False)
    dead: bool = field(default=False, init=False)
    _pending_tag_adds: set[str] = field(default_factory=set, init=False, repr=False)
    _pending_tag_removes: set[str] = field(
        default_factory=set, init=False, repr=False
    )

    _id_counter: ClassVar[int] = 0

    def __post_init__(self) -> None:
        self.tags = set(self.tags)
        if not self.name:
            self.name = f"object_{GameObject._id_counter}"
            GameObject._id_counter += 1

    def add_tag(self, tag: str) -> None:
        """Add a tag; the scene index follows at the end of the frame."""
        if tag in self.tags:
            return
        self.tags.add(tag)
        self._pending_tag_adds.add(tag)
        self._pending_tag_removes.discard(tag)

    def remove_tag(self, tag: str) -> None:
        """Remove a tag; the scene index follows at the end of the frame."""
        if tag not in self.tags:
            return
        self.tags.discard(tag)
        self._pending_tag_removes.add(tag)
        self._pending_tag_adds.discard(tag)

    def has_tag(self, tag: str) -> bool:
        """Whether the object has the tag right now."""
        return tag in self.tags

    def kill(self) -> None:
        """Mark the object for removal at the end of the frame."""
        self.dead = True

    def _clear_pending_updates(self) -> None:
        self._pending_tag_adds.clear()
        self._pending_tag_removes.clear()

    def add_component(self, component: Component, name: str = "") -> None:
        """Attach a component under ``name`` or an automatic ``component_N``."""
        key = name or f"component_{len(self.components)}"
        self.components[key] = component

    def get_component(self, name: str) -> Component | None:
        """The component with this name, or None."""
        return self.components.get(name)

    def get_components(self, type_name: str) -> list[Component]:
        """All components whose class is named ``type_name``."""
        return [
            component
            for component in self.components.values()
            if type(component).__name__ == type_name
        ]

    def update(self) -> None:
        """Run every component's update hook."""
        for component in list(self.components.values()):
            if component is not None:
                component.on_update(self)

    def draw(self) -> None:
        """Run every component's draw hook."""
        for component in list(self.components.values()):
            if component is not None:
                component.on_draw(self)

    @classmethod
    def from_data(cls, data: Mapping[str, Any], x: float, y: float) -> GameObject:
        """Build an object from its decoded JSON definition at (x, y)."""
        obj = cls(
            x,
            y,
            data.get("name", ""),
            set(data.get("tags", ())),
            data.get("depth", 0.0),
        )
        for component_data in data.get("components", ()):
            component = ComponentFactory.create_component(component_data)
            if component is None:
                continue
            name = component_data.get("name", "")
            if not name and "file" in component_data:
                name = component_data["file"].removeprefix(BUILTIN_PREFIX)
            obj.add_component(component, name)
        return obj

    @classmethod
    def from_file(cls, filename: str, x: float, y: float) -> GameObject | None:
        """Load an object definition file; None if the file cannot be opened."""
        try:
            with open(filename, encoding="utf-8") as handle:
                text = handle.read()
        except OSError:
            return None
        return cls.from_data(json.loads(text), x, y)