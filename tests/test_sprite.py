import struct

import numpy as np
import pytest

from triengine.sprite import Sprite
from triengine.utils import QUAD_UVS, QUAD_VERTICES


def _write_bmp(path, width, height):
    header = bytearray(0x36)
    struct.pack_into("<II", header, 0x12, width, height)
    path.write_bytes(bytes(header) + b"\x01" * (width * height * 3))
    return path


def test_sprite_takes_size_from_bitmap(tmp_path):
    sprite = Sprite(_write_bmp(tmp_path / "hud.bmp", 4, 2))
    assert (sprite.width, sprite.height) == (4, 2)


def test_sprite_starts_at_origin(tmp_path):
    sprite = Sprite(_write_bmp(tmp_path / "hud.bmp", 1, 1))
    assert (sprite.pos_x, sprite.pos_y) == (0, 0)


def test_sprite_position_is_mutable(tmp_path):
    sprite = Sprite(_write_bmp(tmp_path / "hud.bmp", 1, 1))
    sprite.pos_x, sprite.pos_y = 10, 20
    assert (sprite.pos_x, sprite.pos_y) == (10, 20)


def test_sprite_uses_unit_quad(tmp_path):
    sprite = Sprite(_write_bmp(tmp_path / "hud.bmp", 3, 3))
    assert np.array_equal(sprite.vertices, QUAD_VERTICES)
    assert np.array_equal(sprite.uvs, QUAD_UVS)


def test_sprite_pixels_loaded(tmp_path):
    sprite = Sprite(_write_bmp(tmp_path / "hud.bmp", 2, 2))
    assert sprite.image.pixels == b"\x01" * 12


def test_sprite_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Sprite(tmp_path / "none.bmp")