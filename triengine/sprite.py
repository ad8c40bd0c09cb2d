"""Screen-space textured quads."""

from __future__ import annotations

import numpy as np

from .utils import QUAD_UVS, QUAD_VERTICES, BitmapImage, PathType, read_bmp


class Sprite:
    """A bitmap drawn as a quad; (pos_x, pos_y) is its bottom-left corner."""

    def __init__(self, bmp_file: PathType) -> None:
        self.pos_x = 0
        self.pos_y = 0
        self.image: BitmapImage = read_bmp(bmp_file)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def vertices(self) -> np.ndarray:
        return QUAD_VERTICES

    @property
    def uvs(self) -> np.ndarray:
        return QUAD_UVS