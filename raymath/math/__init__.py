"""
Математический суб‑пакет: Vec2i, Vec3, Vec4, Quat, Mat4, Ray.
"""

from raymath.math.vec3 import Vec3
from raymath.math.vec2i import Vec2i
from raymath.math.vec4 import Vec4
from raymath.math.quat import Quat
from raymath.math.mat4 import Mat4, LEGACY_PI
from raymath.math.ray import Ray
from raymath.math.sampling import thread_rng, seed_thread_rng

__all__ = [
    "Vec2i", "Vec3", "Vec4", "Quat", "Mat4", "Ray",
    "LEGACY_PI", "thread_rng", "seed_thread_rng",
]
