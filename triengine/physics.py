"""Simple collision primitives."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AABB:
    """Axis-aligned bounding box spanning (x1, y1, z1) to (x2, y2, z2)."""

    x1: float
    y1: float
    z1: float
    x2: float
    y2: float
    z2: float

    def intersects(self, other: AABB) -> bool:
        """Return True if the boxes overlap or touch."""
        if self.x2 < other.x1 or self.x1 > other.x2:
            return False
        if self.y2 < other.y1 or self.y1 > other.y2:
            return False
        if self.z2 < other.z1 or self.z1 > other.z2:
            return False
        return True