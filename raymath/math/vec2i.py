# raymath/math/vec2i.py
"""
Целочисленный 2‑D вектор (int32) – экранные/растровые координаты.

Используется растеризатором: барицентрические координаты пикселя и
ограничивающий прямоугольник треугольника.
"""

import numpy as np
from typing import Optional, Tuple

from raymath.math.vec3 import Vec3

_INT_TYPES = (int, np.integer)


class Vec2i:
    __slots__ = ("_v",)

    __array_ufunc__ = None

    def __init__(self, x: int = 0, y: int = 0):
        self._v = np.array([x, y], dtype=np.int32)

    @property
    def x(self) -> int:
        return int(self._v[0])

    @property
    def y(self) -> int:
        return int(self._v[1])

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < 2:
            raise IndexError(f"Invalid Vec2i index: {index}")
        return int(self._v[index])

    def __iter__(self):
        return iter(self._v.tolist())

    # -----------------------------------------------------------
    # арифметика
    # -----------------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, Vec2i):
            return NotImplemented
        return Vec2i(*(self._v + other._v))

    def __sub__(self, other):
        if not isinstance(other, Vec2i):
            return NotImplemented
        return Vec2i(*(self._v - other._v))

    def __neg__(self):
        return Vec2i(*(-self._v))

    def __mul__(self, other):
        if isinstance(other, Vec2i):
            return Vec2i(*(self._v * other._v))
        if isinstance(other, _INT_TYPES):
            return Vec2i(*(self._v * np.int32(other)))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, _INT_TYPES):
            return Vec2i(*(np.int32(other) * self._v))
        return NotImplemented

    def __truediv__(self, divisor):
        """Деление с отбрасыванием дробной части (к нулю): (-7, 7) / 2 → (-3, 3)."""
        if not isinstance(divisor, _INT_TYPES):
            return NotImplemented
        divisor = int(divisor)
        if divisor == 0:
            raise ZeroDivisionError("Vec2i division by zero")
        # int64: abs(-2**31) не помещается в int32
        v = self._v.astype(np.int64)
        q = np.abs(v) // abs(divisor)
        sign = np.sign(v) * (1 if divisor > 0 else -1)
        return Vec2i(*(q * sign).astype(np.int32))

    __floordiv__ = __truediv__

    # -----------------------------------------------------------
    # геометрия
    # -----------------------------------------------------------
    @staticmethod
    def barycentric(point: "Vec2i", v0: "Vec2i", v1: "Vec2i", v2: "Vec2i") -> Optional[Vec3]:
        """
        Барицентрические координаты `point` внутри треугольника v0‑v1‑v2.

        Возвращает None, если треугольник вырожденный или обращён
        (однородный знаменатель u.z < 1).
        """
        x = Vec3(v2.x - v0.x, v1.x - v0.x, v0.x - point.x)
        y = Vec3(v2.y - v0.y, v1.y - v0.y, v0.y - point.y)

        u = Vec3.cross(x, y)

        if u.z < 1.0:
            return None

        return Vec3(1.0 - (u.x + u.y) / u.z, u.y / u.z, u.x / u.z)

    @staticmethod
    def bbox3(v0: "Vec2i", v1: "Vec2i", v2: "Vec2i") -> Tuple["Vec2i", "Vec2i"]:
        """Ограничивающий прямоугольник трёх точек: (минимум, максимум)."""
        min_x = min(v0.x, v1.x, v2.x)
        max_x = max(v0.x, v1.x, v2.x)
        min_y = min(v0.y, v1.y, v2.y)
        max_y = max(v0.y, v1.y, v2.y)

        return Vec2i(min_x, min_y), Vec2i(max_x, max_y)

    # -----------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Vec2i):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self):
        return hash(self.to_tuple())

    def as_np(self) -> np.ndarray:
        return self._v.copy()

    def to_tuple(self) -> Tuple[int, int]:
        return tuple(self._v.tolist())

    def __repr__(self):
        return f"Vec2i({self.x}, {self.y})"
