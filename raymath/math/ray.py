# raymath/math/ray.py
"""Параметрический луч P(t) = origin + t·direction."""

import numpy as np

from raymath.math.vec3 import Vec3


class Ray:
    """
    Луч с меткой времени (для motion blur).  direction не обязан быть
    единичным, `time` библиотекой никак не интерпретируется.
    """

    __slots__ = ("_origin", "_direction", "_time")

    def __init__(self, origin: Vec3, direction: Vec3, time: float = 0.0):
        self._origin = origin
        self._direction = direction
        self._time = float(np.float32(time))

    @property
    def origin(self) -> Vec3:
        return self._origin

    @property
    def direction(self) -> Vec3:
        return self._direction

    @property
    def time(self) -> float:
        return self._time

    def point_at_parameter(self, t: float) -> Vec3:
        """Точка луча для параметра t (отрицательный t – назад от origin)."""
        return self._origin + self._direction * t

    def __repr__(self):
        return f"Ray(origin={self._origin!r}, direction={self._direction!r}, time={self._time:.3f})"
