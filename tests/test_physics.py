import pytest

from triengine.physics import AABB


def _box(x, y, z, size=1.0):
    return AABB(x, y, z, x + size, y + size, z + size)


def test_overlapping_boxes_intersect():
    assert _box(0, 0, 0).intersects(_box(0.5, 0.5, 0.5)) is True


def test_box_intersects_itself():
    box = _box(2, 3, 4)
    assert box.intersects(box) is True


def test_touching_faces_count_as_intersection():
    assert _box(0, 0, 0).intersects(_box(1, 0, 0)) is True


@pytest.mark.parametrize("offset", [(2, 0, 0), (0, 2, 0), (0, 0, 2), (-2, 0, 0)])
def test_separated_on_one_axis(offset):
    assert _box(0, 0, 0).intersects(_box(*offset)) is False


def test_contained_box_intersects():
    outer = AABB(-5, -5, -5, 5, 5, 5)
    inner = AABB(-1, -1, -1, 1, 1, 1)
    assert outer.intersects(inner) is True
    assert inner.intersects(outer) is True


@pytest.mark.parametrize("offset", [(0.5, 0.5, 0.5), (3, 0, 0), (1, 1, 1), (0, -3, 0)])
def test_intersection_is_symmetric(offset):
    a = _box(0, 0, 0)
    b = _box(*offset)
    assert a.intersects(b) == b.intersects(a)