# raymath/math/vec4.py
"""
4‑мерный вектор (float32) – однородные координаты для Vec3.

Арифметики нет: Vec4 умножается только на Mat4.
"""

import numpy as np
from typing import Tuple


class Vec4:
    """Короткий вектор‑4 (float32), неизменяемый."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 z: float = 0.0, w: float = 0.0):
        self._v = np.array([x, y, z, w], dtype=np.float32)

    @staticmethod
    def zero() -> "Vec4":
        return Vec4()

    # -----------------------------------------------------------------
    # свойства
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    @property
    def w(self) -> float:
        return float(self._v[3])

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < 4:
            raise IndexError(f"Invalid Vec4 index: {index}")
        return float(self._v[index])

    # -----------------------------------------------------------------
    # преобразования
    # -----------------------------------------------------------------
    def xyz(self):
        """Отбросить w."""
        from raymath.math.vec3 import Vec3
        return Vec3(*self._v[:3])

    def as_np(self) -> np.ndarray:
        """Копия 4‑компонентного ndarray (float32)."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return tuple(self._v.tolist())

    def __eq__(self, other):
        if not isinstance(other, Vec4):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self):
        return hash(self.to_tuple())

    def __repr__(self) -> str:
        return f"Vec4({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"
