# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy (float32).

Основной тип пакета: позиции, направления и цвета.  Все операции
возвращают новый объект, исходный вектор не меняется.
"""
import numpy as np
from typing import Optional, Tuple

from raymath.math import sampling

_SCALAR_TYPES = (int, float, np.number)


class Vec3:
    __slots__ = ("_v",)

    # numpy‑скаляры слева от вектора должны уходить в __rmul__
    __array_ufunc__ = None

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    # -------------------------------------------------
    # константы
    # -------------------------------------------------
    @staticmethod
    def zero() -> "Vec3":
        return Vec3(0.0, 0.0, 0.0)

    @staticmethod
    def up() -> "Vec3":
        return Vec3(0.0, 1.0, 0.0)

    @staticmethod
    def forward() -> "Vec3":
        return Vec3(0.0, 0.0, 1.0)

    @staticmethod
    def left() -> "Vec3":
        return Vec3(1.0, 0.0, 0.0)

    # -------------------------------------------------
    # свойства (только чтение)
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    # цветовые псевдонимы
    r = x
    g = y
    b = z

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < 3:
            raise IndexError(f"Invalid Vec3 index: {index}")
        return float(self._v[index])

    def __iter__(self):
        return iter(self._v.tolist())

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(*(self._v + other._v))

    def __sub__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(*(self._v - other._v))

    def __neg__(self):
        return Vec3(*(-self._v))

    def __mul__(self, other):
        """Vec3 * скаляр или покомпонентное Vec3 * Vec3 (смешивание цветов)."""
        if isinstance(other, Vec3):
            return Vec3(*(self._v * other._v))
        if isinstance(other, _SCALAR_TYPES):
            return Vec3(*(self._v * np.float32(other)))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, _SCALAR_TYPES):
            return Vec3(*(np.float32(other) * self._v))
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, _SCALAR_TYPES):
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vec3(*(self._v / np.float32(scalar)))

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def dot(self, other: "Vec3") -> float:
        """Скалярное произведение; работает и как Vec3.dot(a, b)."""
        return float(np.dot(self._v, other._v))

    def cross(self, other: "Vec3") -> "Vec3":
        """Правое векторное произведение; cross(a, b) == -cross(b, a)."""
        return Vec3(*np.cross(self._v, other._v))

    def length_squared(self) -> float:
        return float(np.dot(self._v, self._v))

    def length(self) -> float:
        return float(np.sqrt(np.dot(self._v, self._v)))

    def normalized(self) -> "Vec3":
        """
        Единичный вектор того же направления.

        Нулевой вектор не проверяется: результат состоит из NaN.
        """
        n = np.sqrt(np.dot(self._v, self._v))
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vec3(*(self._v / n))

    def reflect(self, normal: "Vec3") -> "Vec3":
        """v - 2·dot(v, n)·n; `normal` должен быть единичным."""
        return self - normal * (2.0 * np.dot(self._v, normal._v))

    def to_vec4(self, w: float):
        from raymath.math.vec4 import Vec4
        return Vec4(self.x, self.y, self.z, w)

    # -------------------------------------------------
    # геометрия
    # -------------------------------------------------
    @staticmethod
    def barycentric(point: "Vec3", v0: "Vec3", v1: "Vec3", v2: "Vec3") -> "Vec3":
        """
        Барицентрические координаты (u, v, w) точки `point` относительно
        треугольника v0‑v1‑v2: point = u·v0 + v·v1 + w·v2, u + v + w = 1.

        Для вырожденного (коллинеарного) треугольника знаменатель равен
        нулю и компоненты получаются NaN – ошибка не выбрасывается.
        """
        e0 = v1._v - v0._v
        e1 = v2._v - v0._v
        e2 = point._v - v0._v
        d00 = np.dot(e0, e0)
        d01 = np.dot(e0, e1)
        d11 = np.dot(e1, e1)
        d20 = np.dot(e2, e0)
        d21 = np.dot(e2, e1)
        denom = d00 * d11 - d01 * d01

        with np.errstate(divide="ignore", invalid="ignore"):
            v = (d11 * d20 - d01 * d21) / denom
            w = (d00 * d21 - d01 * d20) / denom
        u = np.float32(1.0) - v - w
        return Vec3(u, v, w)

    @staticmethod
    def random_in_unit_sphere(rng: Optional[np.random.Generator] = None) -> "Vec3":
        """Равномерная точка внутри единичной сферы (rejection sampling)."""
        rng = sampling.resolve(rng)
        while True:
            p = Vec3(*rng.random(3, dtype=np.float32)) * 2.0 - Vec3(1.0, 1.0, 1.0)
            if p.length_squared() < 1.0:
                return p

    @staticmethod
    def random_in_unit_disk(rng: Optional[np.random.Generator] = None) -> "Vec3":
        """Точка внутри единичного круга в плоскости z = 0."""
        rng = sampling.resolve(rng)
        while True:
            x, y = rng.random(2, dtype=np.float32)
            p = Vec3(x, y, 0.0) * 2.0 - Vec3(1.0, 1.0, 0.0)
            if Vec3.dot(p, p) < 1.0:
                return p

    # -------------------------------------------------
    # сравнение и представление
    # -------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self):
        return hash(self.to_tuple())

    def as_np(self) -> np.ndarray:
        """Возврат копии 3‑элементного массива float32."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
