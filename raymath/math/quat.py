# raymath/math/quat.py
# ---------------------------------------------------------------
# Кватернионы (x, y, z, w) в float32:
# - создание из углов Эйлера и из оси/угла (радианы),
# - произведение Гамильтона (некоммутативное),
# - нормализация и сопряжение,
# - вращение вектора.
# Матрица вращения строится в Mat4.rotation(q).
# ---------------------------------------------------------------

import numpy as np
from typing import Tuple

from raymath.math.vec3 import Vec3


class Quat:
    __slots__ = ("_q",)

    __array_ufunc__ = None

    def __init__(self, x=0.0, y=0.0, z=0.0, w=1.0):
        self._q = np.array([x, y, z, w], dtype=np.float32)

    @staticmethod
    def identity() -> "Quat":
        return Quat(0.0, 0.0, 0.0, 1.0)

    @staticmethod
    def from_euler(x: float, y: float, z: float) -> "Quat":
        """Углы Эйлера в радианах (X, Y, Z); результат всегда единичный."""
        half = np.array([x, y, z], dtype=np.float32) / np.float32(2.0)
        cx, cy, cz = np.cos(half)
        sx, sy, sz = np.sin(half)

        return Quat(
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
            cx * cy * cz + sx * sy * sz,
        )

    @staticmethod
    def from_axis_angle(axis: Vec3, angle_rad: float) -> "Quat":
        """axis – Vec3 (нормализуется), angle – в радианах."""
        half = np.float32(angle_rad) / np.float32(2.0)
        v = axis.normalized() * np.sin(half)
        return Quat(v.x, v.y, v.z, np.cos(half))

    # -----------------------------------------------------------
    #  Компоненты
    # -----------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._q[0])

    @property
    def y(self) -> float:
        return float(self._q[1])

    @property
    def z(self) -> float:
        return float(self._q[2])

    @property
    def w(self) -> float:
        return float(self._q[3])

    @property
    def vector(self) -> Vec3:
        """Векторная часть (x, y, z)."""
        return Vec3(*self._q[:3])

    # -----------------------------------------------------------
    #  Алгебра
    # -----------------------------------------------------------
    def __mul__(self, other: "Quat") -> "Quat":
        """
        Произведение Гамильтона.  a * b != b * a; как и у матриц,
        правый множитель применяется первым.
        """
        if not isinstance(other, Quat):
            return NotImplemented
        qv = self.vector
        rv = other.vector

        v = Vec3.cross(qv, rv) + qv * other._q[3] + rv * self._q[3]
        w = self._q[3] * other._q[3] - np.dot(qv.as_np(), rv.as_np())
        return Quat(v.x, v.y, v.z, w)

    def conjugate(self) -> "Quat":
        return Quat(-self.x, -self.y, -self.z, self.w)

    def length(self) -> float:
        return float(np.sqrt(np.dot(self._q, self._q)))

    def normalized(self) -> "Quat":
        n = self.length()
        if n == 0.0:
            return Quat()
        return Quat(*(self._q / np.float32(n)))

    def rotate_vector(self, vec: Vec3) -> Vec3:
        """Повернуть вектор: q · (v, 0) · q*."""
        res = self * Quat(vec.x, vec.y, vec.z, 0.0) * self.conjugate()
        return res.vector

    # -----------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Quat):
            return NotImplemented
        return bool(np.array_equal(self._q, other._q))

    def __hash__(self):
        return hash(self.to_tuple())

    def as_np(self) -> np.ndarray:
        return self._q.copy()

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return tuple(self._q.tolist())

    def __repr__(self):
        return f"Quat({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"
