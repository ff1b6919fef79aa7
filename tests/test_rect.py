import pytest

from tinkerbench.rect import Rect


@pytest.mark.parametrize("x,y,w,h", [(1, 2, 3, 4), (0, 0, 10, 10), (-5, 7, 6, 9)])
def test_from_size_keeps_size(x, y, w, h):
    r = Rect.from_size(x, y, w, h)
    assert (r.x1, r.y1) == (x, y)
    assert r.x2 - r.x1 == w
    assert r.y2 - r.y1 == h


def test_center_of_even_square():
    assert Rect.from_size(0, 0, 10, 10).center() == (5, 5)


def test_center_truncates_toward_zero():
    assert Rect(-3, -3, 0, 0).center() == (-1, -1)


def test_center_lies_inside():
    r = Rect.from_size(3, 4, 7, 9)
    cx, cy = r.center()
    assert r.x1 <= cx <= r.x2
    assert r.y1 <= cy <= r.y2


def test_overlapping_rects_intersect():
    a = Rect.from_size(0, 0, 5, 5)
    b = Rect.from_size(3, 3, 5, 5)
    assert a.intersect(b)
    assert b.intersect(a)


def test_touching_edges_count_as_intersection():
    a = Rect.from_size(0, 0, 5, 5)
    b = Rect.from_size(5, 0, 5, 5)
    assert a.intersect(b)


def test_separate_rects_do_not_intersect():
    a = Rect.from_size(0, 0, 5, 5)
    b = Rect.from_size(6, 6, 2, 2)
    assert not a.intersect(b)
    assert not b.intersect(a)


def test_rect_intersects_itself():
    r = Rect.from_size(2, 2, 4, 4)
    assert r.intersect(r)