"""The engine: scene registry and the abstract main loop."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from imge.scene import Scene
from imge.services import Audio, Screen, Time


class Engine(ABC):
    """Holds named scenes and runs the game loop; backends implement ``run``."""

    _instance: ClassVar[Engine | None] = None

    def __init__(self) -> None:
        self.running = False
        self.current_scene_name = ""
        self.scenes: dict[str, Scene] = {}

    @staticmethod
    def get_instance() -> Engine | None:
        """The registered engine, or None."""
        return Engine._instance

    @staticmethod
    def set_instance(instance: Engine | None) -> None:
        """Register the active engine."""
        Engine._instance = instance

    def init(self, width: int, height: int, title: str = "IMGE Game") -> None:
        """Open the screen and start audio through the registered services."""
        screen = Screen.get_instance()
        if screen is None:
            raise RuntimeError("no screen service registered")
        audio = Audio.get_instance()
        if audio is None:
            raise RuntimeError("no audio service registered")
        screen.init(width, height, title)
        audio.init()
        self.running = False

    def add_scene(self, name: str, scene: Scene) -> None:
        """Add or replace a scene; the first scene added becomes current."""
        self.scenes[name] = scene
        if not self.current_scene_name:
            self.current_scene_name = name

    def set_scene(self, name: str) -> None:
        """Make a known scene current; unknown names are ignored."""
        if name in self.scenes:
            self.current_scene_name = name

    def current_scene(self) -> Scene | None:
        """The current scene, or None."""
        return self.scenes.get(self.current_scene_name)

    def delta_time(self) -> float:
        """Seconds since the previous frame."""
        return Time.get_instance().delta_time

    @abstractmethod
    def run(self) -> None:
        """Run the main loop until stopped."""

    def stop(self) -> None:
        """Ask the main loop to finish."""
        self.running = False

    def is_running(self) -> bool:
        """Whether the main loop is running."""
        return self.running