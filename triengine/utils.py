"""File helpers and shared geometry constants."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from typing import Union

import numpy as np

PathType = Union[str, "PathLike[str]"]

_BMP_WIDTH_OFFSET = 0x12
_BMP_PIXEL_OFFSET = 0x36


def _frozen(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


QUAD_VERTICES = _frozen(
    np.array(
        [
            [-1, -1, 0],
            [1, 1, 0],
            [-1, 1, 0],
            [-1, -1, 0],
            [1, -1, 0],
            [1, 1, 0],
        ],
        dtype=np.float32,
    )
)

QUAD_UVS = _frozen(
    np.array(
        [
            [0, 0],
            [1, 1],
            [0, 1],
            [0, 0],
            [1, 0],
            [1, 1],
        ],
        dtype=np.float32,
    )
)


@dataclass(frozen=True)
class BitmapImage:
    """Uncompressed 24-bit pixel data in BGR order, bottom row first."""

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        expected = self.width * self.height * 3
        if len(self.pixels) != expected:
            raise ValueError(
                f"pixel data holds {len(self.pixels)} bytes, expected {expected}"
            )


def read_file(path: PathType) -> bytes:
    """Return the whole contents of a file."""
    with open(path, "rb") as handle:
        return handle.read()


def read_bmp(path: PathType) -> BitmapImage:
    """Read a 24-bit BMP file whose pixel data starts right after the header."""
    contents = read_file(path)
    if len(contents) < _BMP_PIXEL_OFFSET:
        raise ValueError(f"{path}: too short for a BMP header")
    width, height = struct.unpack_from("<II", contents, _BMP_WIDTH_OFFSET)
    size = width * height * 3
    end = _BMP_PIXEL_OFFSET + size
    if len(contents) < end:
        raise ValueError(
            f"{path}: expected {size} bytes of pixel data, "
            f"found {len(contents) - _BMP_PIXEL_OFFSET}"
        )
    return BitmapImage(width, height, contents[_BMP_PIXEL_OFFSET:end])