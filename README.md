# imge

A small component-based 2D game engine. A game is a flat set of named
objects living in a scene; each object carries tags, a depth and any number
of components that react to `on_create`, `on_update` and `on_draw`. Scenes
and objects can be described in JSON. pygame supplies the window and the
keyboard and mouse polling.

## Installation

```bash
pip install .
```

For the test suite:

```bash
pip install ".[test]"
pytest
```

## What is in the package

| Module | Contents |
| --- | --- |
| `imge.geometry` | `Vec2` (immutable vector) and `Rect` (axis-aligned rectangle) |
| `imge.services` | `Key`, `MouseButton`, the abstract `Screen`, `Input` and `Audio` services, and the `Time` frame clock |
| `imge.component` | `Component`, the base class for behaviour |
| `imge.hitbox` | `Hitbox`, the builtin collision-box component |
| `imge.component_factory` | `ComponentFactory`, which builds components from JSON |
| `imge.game_object` | `GameObject` |
| `imge.scene` | `Scene` |
| `imge.engine` | `Engine`, the abstract scene registry and main loop |
| `imge.image` | `Image`, a component that draws one image |
| `imge.animation` | `Animation`, `AnimationData`, `FrameRect` |
| `imge.pygame_screen` | `PygameScreen` and `parse_hex_color` |
| `imge.pygame_input` | `PygameInput` and `key_from_pygame` |

Each service has a class-level registry: `Screen.get_instance()` /
`Screen.set_instance(...)`, and likewise for `Input`, `Audio` and `Engine`.
`PygameScreen` and `PygameInput` register themselves when created.
`Time.get_instance()` creates the shared clock on first use.

## The object model

- Object names are unique within a scene. A `GameObject` created without a
  name gets `object_<n>`; a clash when it joins a scene is resolved by
  appending `_2`, `_3`, ...
- `Scene.add_object`, `Scene.remove_object`, `GameObject.kill()` and tag
  changes are deferred: they take effect at the end of the next
  `Scene.update()`. `GameObject.has_tag` answers immediately.
- Components' `on_create` hooks run when their object joins the scene.
- `Scene.get_all_objects()` and `Scene.draw()` order objects by depth,
  higher depth first.
- `Scene.check_collision`, `get_collisions` and `get_collisions_with_tag`
  compare the boxes of the components named `"Hitbox"` on each object.

```python
from imge.component import Component
from imge.game_object import GameObject
from imge.hitbox import Hitbox
from imge.scene import Scene


class Mover(Component):
    def on_update(self, owner):
        owner.x += 1


scene = Scene()
player = GameObject(0, 0, "player", {"hero"})
player.add_component(Mover(), "Mover")
player.add_component(Hitbox([0, 0, 32, 32]), "Hitbox")
wall = GameObject(40, 0, "wall")
wall.add_component(Hitbox([0, 0, 8, 32]), "Hitbox")
scene.add_object(player)
scene.add_object(wall)

scene.update()            # objects join the scene here
for _ in range(10):
    scene.update()        # Mover runs each frame

print(player.x)                          # 10
print(scene.check_collision(player, wall))  # True
```

## Scene files

`Scene.from_file("scenes/main_scene.json")` loads a scene such as:

```json
{
    "width": 800,
    "height": 600,
    "background_color": "#222222",
    "objects": [
        {
            "name": "player",
            "x": 100, "y": 200,
            "depth": 10,
            "tags": ["hero"],
            "components": [
                {"file": "@Hitbox", "args": [[0, 0, 32, 32]]},
                {"file": "Mover"}
            ]
        },
        {"file": "objects/enemy.obj", "x": 300, "y": 200}
    ]
}
```

`from_file` returns `None` when the file cannot be opened. An object entry
either defines the object inline or points at an `.obj` file holding the same
fields; `x` and `y` are always taken from the scene. The objects are queued
and join the scene on its first `update()`.

A component whose `file` begins with `@` is builtin; the only builtin is
`@Hitbox`, whose arguments are one box `[x, y, w, h]`, a list of boxes, or
named boxes `{"body": [...], "attack": [...]}`. Any other name must be
registered first, or the entry is skipped:

```python
from imge.component_factory import ComponentFactory

ComponentFactory.register_component("Mover", lambda args: Mover())
```

A component without a `name` is stored under its `file` with any leading `@`
removed, so `@Hitbox` becomes `"Hitbox"`.

## Running a game loop

`Engine.run` is abstract, and `Engine.init` needs both a `Screen` and an
`Audio` service registered. With the pygame screen and input services a loop
can be written like this:

```python
import pygame

from imge.engine import Engine
from imge.pygame_input import PygameInput
from imge.pygame_screen import PygameScreen
from imge.services import Input, Key, Time


class LoopEngine(Engine):
    def __init__(self, screen):
        super().__init__()
        self.screen = screen
        Engine.set_instance(self)

    def run(self):
        self.running = bool(self.scenes)
        clock = pygame.time.Clock()
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.stop()
            Input.get_instance().update()
            if Input.get_instance().is_key_pressed(Key.ESCAPE):
                self.stop()
            Time.get_instance().update(clock.tick(60) / 1000)
            scene = self.current_scene()
            if scene is not None:
                scene.update()
                self.screen.clear()
                scene.draw()
                self.screen.present()
        self.screen.close()


screen = PygameScreen()
PygameInput()
screen.init(800, 600, "My Game")

engine = LoopEngine(screen)
engine.add_scene("main", scene)
engine.run()
```

`PygameScreen.set_background_color` accepts `#RRGGBB` or `#RRGGBBAA` and
ignores other strings; `load_texture` returns `(surface, width, height)` or
`None`. `PygameInput` polls letters, digits, space, enter, escape,
backspace, tab, the arrow keys, shift and ctrl, and the left, middle and
right mouse buttons; the mouse wheel always reads `(0.0, 0.0)`.

## What the package does not do

- There is no ready-made engine: `Engine` is abstract and the package ships
  no concrete main loop.
- There is no audio backend: `Audio` is only an interface, so an
  implementation must be supplied before `Engine.init` can be called.
- There is no command-line tool, no project generator and no example game.
- `Animation` builds a single frame covering `frame_width` × `frame_height`;
  it does not split a sprite sheet into frames.