"""Engine setup: the window, renderer and camera used by a game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .camera import Camera

WINDOW_SIZE = (1280, 720)
WINDOW_TITLE = "Engine"
CAMERA_POSITION = (4.0, 3.0, 3.0)
CAMERA_LOOK_AT = (0.0, 0.0, 0.0)


@dataclass
class Engine:
    """The core objects a game loop works with."""

    window: object
    renderer: object
    camera: Camera

    @classmethod
    def from_window(cls, window, renderer_factory=None) -> "Engine":
        """Build the renderer and the starting camera around ``window``."""
        if renderer_factory is None:
            from .renderer import Renderer

            renderer_factory = Renderer
        camera = Camera(window, CAMERA_POSITION, CAMERA_LOOK_AT)
        renderer = renderer_factory(window, camera)
        return cls(window, renderer, camera)


current: Optional[Engine] = None


def initialize() -> Engine:
    """Open the default window and set up the engine."""
    global current
    from .window import Window

    current = Engine.from_window(Window(*WINDOW_SIZE, WINDOW_TITLE))
    return current