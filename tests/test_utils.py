import struct

import pytest

from triengine.utils import BitmapImage, read_bmp, read_file


def _bmp_bytes(width, height, pixels):
    header = bytearray(0x36)
    header[0:2] = b"BM"
    struct.pack_into("<II", header, 0x12, width, height)
    return bytes(header) + pixels


def test_read_file_returns_exact_bytes(tmp_path):
    path = tmp_path / "data.bin"
    payload = b"\x00\x01hello\xff"
    path.write_bytes(payload)
    assert read_file(path) == payload


def test_read_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "absent.bin")


def test_read_bmp_reads_dimensions_and_pixels(tmp_path):
    pixels = bytes(range(2 * 3 * 3))
    path = tmp_path / "image.bmp"
    path.write_bytes(_bmp_bytes(2, 3, pixels))
    image = read_bmp(path)
    assert (image.width, image.height) == (2, 3)
    assert image.pixels == pixels


def test_read_bmp_ignores_trailing_bytes(tmp_path):
    pixels = b"\x10\x20\x30"
    path = tmp_path / "image.bmp"
    path.write_bytes(_bmp_bytes(1, 1, pixels) + b"extra")
    assert read_bmp(path).pixels == pixels


def test_read_bmp_short_header(tmp_path):
    path = tmp_path / "short.bmp"
    path.write_bytes(b"BM\x00\x00")
    with pytest.raises(ValueError):
        read_bmp(path)


def test_read_bmp_truncated_pixels(tmp_path):
    path = tmp_path / "trunc.bmp"
    path.write_bytes(_bmp_bytes(4, 4, b"\x00" * 10))
    with pytest.raises(ValueError):
        read_bmp(path)


def test_bitmap_image_validates_length():
    with pytest.raises(ValueError):
        BitmapImage(2, 2, b"\x00" * 5)