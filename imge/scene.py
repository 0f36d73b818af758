"""Scenes: collections of game objects with a tag index and deferred updates."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from imge.game_object import GameObject
from imge.hitbox import Hitbox
from imge.services import Screen


@dataclass(eq=False)
class Scene:
    """A set of uniquely named objects.

    Additions, removals and tag changes are deferred and applied at the
    end of each update, so the scene stays consistent during a frame.
    Objects with higher depth are drawn first.
    """

    width: int = 800
    height: int = 600
    background_color: str | None = None
    background_image: str | None = None
    objects: dict[str, GameObject] = field(default_factory=dict, init=False)
    _tags: dict[str, list[str]] = field(default_factory=dict, init=False, repr=False)
    _pending_objects: list[GameObject] = field(
        default_factory=list, init=False, repr=False
    )

    def add_object(self, obj: GameObject | None) -> None:
        """Queue an object; it joins the scene at the end of the next update."""
        if obj is not None:
            self._pending_objects.append(obj)

    def remove_object(self, obj: GameObject | None) -> None:
        """Mark an object dead; it leaves the scene at the end of the next update."""
        if obj is not None:
            obj.kill()

    def get_object(self, name: str) -> GameObject | None:
        """The object with this name, or None."""
        return self.objects.get(name)

    def get_objects_by_tag(self, tag: str) -> list[GameObject]:
        """Objects indexed under ``tag``."""
        return [
            obj
            for name in self._tags.get(tag, ())
            if (obj := self.objects.get(name)) is not None
        ]

    def get_all_objects(self) -> list[GameObject]:
        """All objects, highest depth first."""
        return sorted(self.objects.values(), key=lambda obj: obj.depth, reverse=True)

    def update(self) -> None:
        """Update every live object, then apply pending changes."""
        for obj in list(self.objects.values()):
            if not obj.dead:
                obj.update()
        self._apply_pending_updates()

    def draw(self) -> None:
        """Set the background and draw live objects, highest depth first."""
        if self.background_color is not None:
            screen = Screen.get_instance()
            if screen is not None:
                screen.set_background_color(self.background_color)
        alive = [obj for obj in self.objects.values() if not obj.dead]
        alive.sort(key=lambda obj: obj.depth, reverse=True)
        for obj in alive:
            obj.draw()

    def _apply_pending_updates(self) -> None:
        for obj in [obj for obj in self.objects.values() if obj.dead]:
            self._remove_object_now(obj)

        pending, self._pending_objects = self._pending_objects, []
        for obj in pending:
            self._add_object_now(obj)

        for obj in self.objects.values():
            for tag in obj._pending_tag_adds:
                self._add_tag_now(obj, tag)
            for tag in obj._pending_tag_removes:
                self._remove_tag_now(obj, tag)
            obj._clear_pending_updates()

    def _add_object_now(self, obj: GameObject) -> None:
        name = obj.name
        counter = 2
        while name in self.objects:
            name = f"{obj.name}_{counter}"
            counter += 1
        obj.name = name
        self.objects[name] = obj

        for tag in obj.tags:
            self._add_tag_now(obj, tag)
        for component in list(obj.components.values()):
            if component is not None:
                component.on_create(obj)

    def _remove_object_now(self, obj: GameObject) -> None:
        self.objects.pop(obj.name, None)
        for tag in obj.tags | obj._pending_tag_removes:
            self._remove_tag_now(obj, tag)

    def _add_tag_now(self, obj: GameObject, tag: str) -> None:
        names = self._tags.setdefault(tag, [])
        if obj.name not in names:
            names.append(obj.name)

    def _remove_tag_now(self, obj: GameObject, tag: str) -> None:
        names = self._tags.get(tag)
        if names is None:
            return
        names[:] = [name for name in names if name != obj.name]
        if not names:
            del self._tags[tag]

    def check_collision(self, obj1: GameObject, obj2: GameObject) -> bool:
        """Whether any ``Hitbox`` box of one object overlaps one of the other."""
        hitbox1 = obj1.get_component("Hitbox")
        hitbox2 = obj2.get_component("Hitbox")
        if not isinstance(hitbox1, Hitbox) or not isinstance(hitbox2, Hitbox):
            return False
        rects2 = hitbox2.world_hitboxes(obj2)
        return any(
            r1.intersects(r2) for r1 in hitbox1.world_hitboxes(obj1) for r2 in rects2
        )

    def get_collisions(self, obj: GameObject) -> list[GameObject]:
        """Live objects other than ``obj`` that collide with it."""
        return [
            other
            for other in self.objects.values()
            if other is not obj and not other.dead and self.check_collision(obj, other)
        ]

    def get_collisions_with_tag(self, obj: GameObject, tag: str) -> list[GameObject]:
        """Live objects tagged ``tag``, other than ``obj``, that collide with it."""
        return [
            other
            for other in self.get_objects_by_tag(tag)
            if other is not obj and not other.dead and self.check_collision(obj, other)
        ]

    @classmethod
    def from_file(cls, filename: str) -> Scene | None:
        """Load a scene file; None if the file cannot be opened."""
        try:
            with open(filename, encoding="utf-8") as handle:
                text = handle.read()
        except OSError:
            return None
        return cls.from_data(json.loads(text))

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> Scene:
        """Build a scene from its decoded JSON definition."""
        scene = cls(
            width=data.get("width", 800),
            height=data.get("height", 600),
            background_color=data.get("background_color"),
            background_image=data.get("background_image"),
        )
        for object_data in data.get("objects", ()):
            scene.add_object(_load_object(object_data))
        return scene


def _load_object(data: Mapping[str, Any]) -> GameObject | None:
    """Load an object defined inline or by reference to an object file."""
    x = float(data["x"])
    y = float(data["y"])
    if "file" in data:
        return GameObject.from_file(data["file"], x, y)
    return GameObject.from_data(data, x, y)