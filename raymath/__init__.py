"""
raymath – базовая 3‑D математика для растеризатора и трассировщика лучей:
векторы, матрица 4×4, кватернионы и луч.
"""

from raymath.utils import logger, Config
from raymath.math import Vec2i, Vec3, Vec4, Quat, Mat4, Ray, LEGACY_PI

__version__ = "1.0.0"

__all__ = [
    "Vec2i",
    "Vec3",
    "Vec4",
    "Quat",
    "Mat4",
    "Ray",
    "LEGACY_PI",
    "Config",
    "logger",
]
