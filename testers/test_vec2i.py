# -*- coding: utf-8 -*-
import numpy as np
import pytest

from raymath.math.vec2i import Vec2i


def test_vec2i_add():
    assert Vec2i(0, 5) + Vec2i(-6, 4) == Vec2i(-6, 9)


def test_vec2i_sub():
    assert Vec2i(0, 5) - Vec2i(-6, 4) == Vec2i(6, 1)


def test_vec2i_mul():
    a = Vec2i(0, 5)
    assert a * 3 == Vec2i(0, 15)
    assert 3 * a == Vec2i(0, 15)


def test_vec2i_mul_vec2i():
    assert Vec2i(0, 5) * Vec2i(3, 2) == Vec2i(0, 10)


def test_vec2i_div_truncates_toward_zero():
    assert Vec2i(12, 5) / 3 == Vec2i(4, 1)
    assert Vec2i(-7, 7) / 2 == Vec2i(-3, 3)
    assert Vec2i(-7, 7) / -2 == Vec2i(3, -3)
    assert Vec2i(-7, 7) // 2 == Vec2i(-3, 3)


def test_vec2i_div_int32_min():
    assert Vec2i(-2**31, 0) / 2 == Vec2i(-2**30, 0)
    assert Vec2i(-2**31, 2**31 - 1) / 2 == Vec2i(-2**30, 2**30 - 1)


def test_vec2i_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        Vec2i(1, 1) / 0


def test_vec2i_neg():
    assert -Vec2i(12, 0) == Vec2i(-12, 0)


def test_vec2i_index():
    a = Vec2i(12, 0)
    assert a[0] == 12
    assert a[1] == 0
    with pytest.raises(IndexError):
        a[2]


def test_vec2i_components_are_int():
    a = Vec2i(3, -4)
    assert isinstance(a.x, int) and isinstance(a.y, int)
    assert a.as_np().dtype == np.int32


def test_vec2i_barycentric_inside():
    v0, v1, v2 = Vec2i(0, 0), Vec2i(0, 10), Vec2i(10, 0)
    bc = Vec2i.barycentric(Vec2i(0, 0), v0, v1, v2)
    assert bc is not None
    assert np.allclose(bc.as_np(), [1.0, 0.0, 0.0])

    bc = Vec2i.barycentric(Vec2i(2, 3), v0, v1, v2)
    assert np.allclose(bc.as_np(), [0.5, 0.3, 0.2], atol=1e-6)
    assert sum(bc) == pytest.approx(1.0)


def test_vec2i_barycentric_collinear_is_none():
    bc = Vec2i.barycentric(Vec2i(1, 1), Vec2i(0, 0), Vec2i(1, 1), Vec2i(2, 2))
    assert bc is None


def test_vec2i_barycentric_inverted_is_none():
    # обратный порядок вершин даёт отрицательный знаменатель
    bc = Vec2i.barycentric(Vec2i(2, 3), Vec2i(0, 0), Vec2i(10, 0), Vec2i(0, 10))
    assert bc is None


def test_vec2i_bbox3():
    lo, hi = Vec2i.bbox3(Vec2i(5, -2), Vec2i(-1, 7), Vec2i(3, 3))
    assert lo == Vec2i(-1, -2)
    assert hi == Vec2i(5, 7)
