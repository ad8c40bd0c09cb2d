"""First-person camera driven by mouse and keyboard."""

from __future__ import annotations

import math
import time
from typing import Callable

import numpy as np

from .window import Key

_HALF_PI = 3.1415926536 / 2.0


class Camera:
    """A camera at ``position`` looking toward ``look_at``."""

    def __init__(
        self,
        window,
        position: tuple[float, float, float],
        look_at: tuple[float, float, float],
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.window = window
        self.pos_x, self.pos_y, self.pos_z = (float(v) for v in position)
        self.look_at_x, self.look_at_y, self.look_at_z = (float(v) for v in look_at)
        self._clock = clock
        self._last_time = clock()
        self.yaw = 3.14
        self.pitch = 0.0
        self.sensitivity = 1.0
        self.speed = 15.0
        self.controls_mouse = True
        self.controls_keyboard = True
        window.set_cursor(window.width // 2, window.height // 2)

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.pos_x, self.pos_y, self.pos_z)

    @property
    def look_at(self) -> tuple[float, float, float]:
        return (self.look_at_x, self.look_at_y, self.look_at_z)

    def update(self) -> None:
        """Turn with the mouse and move with the keyboard."""
        now = self._clock()
        dt = now - self._last_time
        self._last_time = now
        window = self.window
        cx, cy = window.width // 2, window.height // 2

        if self.controls_mouse:
            x, y = window.cursor
            window.set_cursor(cx, cy)
            self.yaw += self.sensitivity * (cx - x) * dt
            self.pitch += self.sensitivity * (cy - y) * dt
            self.look_at_x = self.pos_x + math.sin(self.yaw) * math.cos(self.pitch)
            self.look_at_y = self.pos_y + math.sin(self.pitch)
            self.look_at_z = self.pos_z + math.cos(self.yaw) * math.cos(self.pitch)

        if self.controls_keyboard:
            right = np.array(
                [math.sin(self.yaw - _HALF_PI), 0.0, math.cos(self.yaw - _HALF_PI)]
            )
            direction = np.array(
                [
                    math.sin(self.yaw) * math.cos(self.pitch),
                    math.sin(self.pitch),
                    math.cos(self.yaw) * math.cos(self.pitch),
                ]
            )
            up = np.array([0.0, 1.0, 0.0])
            step = dt * self.speed
            position = np.array(self.position)
            moves = (
                (Key.W, direction),
                (Key.S, -direction),
                (Key.D, right),
                (Key.A, -right),
                (Key.SPACE, up),
                (Key.LEFT_SHIFT, -up),
            )
            for key, vector in moves:
                if window.is_key_pressed(key):
                    position = position + vector * step
            self.pos_x, self.pos_y, self.pos_z = (float(v) for v in position)