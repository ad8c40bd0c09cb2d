"""Application window, keyboard state and frame timing."""

from __future__ import annotations

import enum
import time
from typing import Callable


class Key(enum.Enum):
    """Keys the engine reads for movement."""

    W = "W"
    A = "A"
    S = "S"
    D = "D"
    SPACE = "SPACE"
    LEFT_SHIFT = "LSHIFT"


class FpsCounter:
    """Counts frames presented during the last second."""

    def __init__(self) -> None:
        self._times: list[float] = []

    def tick(self, now: float) -> None:
        """Record a frame presented at time ``now``."""
        self._times.append(now)

    def fps(self, now: float) -> int:
        """Return how many frames were recorded less than a second before ``now``."""
        self._times = [t for t in self._times if now - t < 1.0]
        return len(self._times)


class Window:
    """An OpenGL window with a hidden cursor and polled keyboard state."""

    def __init__(
        self,
        width: int,
        height: int,
        title: str,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        import pyglet
        from pyglet.window import key

        self.width = width
        self.height = height
        self._clock = clock
        self._closed = False
        self._window = pyglet.window.Window(width, height, title)
        self._window.set_location(100, 100)
        self._window.set_mouse_visible(False)
        self._keys = key.KeyStateHandler()
        self._window.push_handlers(self._keys)
        self._key_codes = {
            Key.W: key.W,
            Key.A: key.A,
            Key.S: key.S,
            Key.D: key.D,
            Key.SPACE: key.SPACE,
            Key.LEFT_SHIFT: key.LSHIFT,
        }
        self.cursor: tuple[float, float] = (width / 2, height / 2)

        @self._window.event
        def on_close() -> bool:
            self._closed = True
            return True

        @self._window.event
        def on_mouse_motion(x, y, dx, dy) -> None:
            # Cursor coordinates are kept with the origin at the top-left.
            self.cursor = (float(x), float(self.height - y))

        self._last_time = clock()
        self._fps = FpsCounter()

    def update(self) -> None:
        """Present the frame and process pending events."""
        self._window.flip()
        self._window.dispatch_events()
        self._fps.tick(self._clock())

    def should_close(self) -> bool:
        return self._closed

    def is_key_pressed(self, key: Key) -> bool:
        return bool(self._keys[self._key_codes[key]])

    def set_cursor(self, x: float, y: float) -> None:
        """Move the cursor, origin at the top-left corner."""
        self.cursor = (float(x), float(y))
        mover = getattr(self._window, "set_mouse_position", None)
        if mover is not None:
            mover(int(x), int(self.height - y))

    def delta_time(self) -> float:
        """Seconds elapsed since the previous call."""
        now = self._clock()
        delta = now - self._last_time
        self._last_time = now
        return delta

    def set_title(self, title: str) -> None:
        self._window.set_caption(title)

    def close(self) -> None:
        self._closed = True
        self._window.close()

    def fps(self) -> int:
        return self._fps.fps(self._clock())

    def sleep(self, seconds: float) -> None:
        time.sleep(int(seconds * 1000) / 1000)