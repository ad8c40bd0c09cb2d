"""Wavefront OBJ loading and textured models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from .utils import BitmapImage, PathType, read_bmp


@dataclass(frozen=True)
class Mesh:
    """Unindexed triangle data: one row per face corner."""

    vertices: np.ndarray
    uvs: np.ndarray
    normals: np.ndarray

    def __len__(self) -> int:
        return len(self.vertices)


def _floats(args: Sequence[str], count: int, line_no: int) -> tuple[float, ...]:
    if len(args) < count:
        raise ValueError(f"line {line_no}: expected {count} numbers")
    try:
        return tuple(float(value) for value in args[:count])
    except ValueError as exc:
        raise ValueError(f"line {line_no}: {exc}") from None


def _corner(token: str, line_no: int) -> tuple[int, int, int]:
    parts = token.split("/")
    if len(parts) != 3:
        raise ValueError(f"line {line_no}: face corner {token!r} is not v/vt/vn")
    try:
        v, t, n = (int(part) for part in parts)
    except ValueError:
        raise ValueError(f"line {line_no}: face corner {token!r} is not v/vt/vn") from None
    return v, t, n


def _lookup(items: list, index: int, kind: str) -> tuple[float, ...]:
    if not 1 <= index <= len(items):
        raise ValueError(f"{kind} index {index} out of range 1..{len(items)}")
    return items[index - 1]


def parse_obj(lines: Iterable[str]) -> Mesh:
    """Parse OBJ text with triangular v/vt/vn faces into a Mesh."""
    positions: list[tuple[float, ...]] = []
    uvs: list[tuple[float, ...]] = []
    normals: list[tuple[float, ...]] = []
    corners: list[tuple[int, int, int]] = []

    for line_no, line in enumerate(lines, 1):
        fields = line.split()
        if not fields:
            continue
        tag, args = fields[0], fields[1:]
        if tag == "v":
            positions.append(_floats(args, 3, line_no))
        elif tag == "vt":
            uvs.append(_floats(args, 2, line_no))
        elif tag == "vn":
            normals.append(_floats(args, 3, line_no))
        elif tag == "f":
            if len(args) < 3:
                raise ValueError(f"line {line_no}: face needs three corners")
            corners.extend(_corner(token, line_no) for token in args[:3])

    out_vertices = [_lookup(positions, v, "vertex") for v, _, _ in corners]
    out_uvs = [_lookup(uvs, t, "uv") for _, t, _ in corners]
    out_normals = [_lookup(normals, n, "normal") for _, _, n in corners]

    return Mesh(
        vertices=np.array(out_vertices, dtype=np.float32).reshape(-1, 3),
        uvs=np.array(out_uvs, dtype=np.float32).reshape(-1, 2),
        normals=np.array(out_normals, dtype=np.float32).reshape(-1, 3),
    )


def load_obj(path: PathType) -> Mesh:
    """Read and parse an OBJ file."""
    with open(path, encoding="utf-8") as handle:
        return parse_obj(handle)


class Model:
    """A textured mesh with a position and rotation in the world."""

    def __init__(self, obj_file: PathType, bmp_file: PathType) -> None:
        self.pos_x = 0.0
        self.pos_y = 0.0
        self.pos_z = 0.0
        self.rot_x = 0.0
        self.rot_y = 0.0
        self.rot_z = 0.0
        self.mesh: Mesh = load_obj(obj_file)
        self.texture: BitmapImage = read_bmp(bmp_file)

    @property
    def triangles(self) -> int:
        """Number of face corners loaded from the OBJ file."""
        return len(self.mesh)