# raymath/math/mat4.py
"""
Матрица 4×4 (float32), хранение построчное: m[row][col].

Умножение `*` и `@` – один и тот же оператор:
    Mat4 * Mat4 → Mat4   (строки левой на столбцы правой)
    Mat4 * Vec3 → Vec3   (точка с неявным w = 1, w отбрасывается)
    Mat4 * Vec4 → Vec4   (полное произведение, без деления на w)

Mat4 * Vec3 годится только для аффинных матриц.  Для проекций
используйте Vec4 и делите на w сами.
"""

import numpy as np

from raymath.math.vec3 import Vec3
from raymath.math.vec4 import Vec4
from raymath.math.quat import Quat

# Приближение π, которым всегда строилась перспективная матрица.
# Замена на math.pi сдвигает все значения perspective().
LEGACY_PI = 3.14159


class Mat4Row:
    """Строка Mat4 с проверкой столбца 0..3; пишет прямо в матрицу."""

    __slots__ = ("_row",)

    def __init__(self, row: np.ndarray):
        self._row = row

    @staticmethod
    def _check(col: int) -> None:
        if not 0 <= col < 4:
            raise IndexError(f"Invalid Mat4 column: {col}")

    def __getitem__(self, col: int) -> float:
        self._check(col)
        return float(self._row[col])

    def __setitem__(self, col: int, value: float) -> None:
        self._check(col)
        self._row[col] = value

    def __len__(self):
        return 4

    def __iter__(self):
        return iter(self._row.tolist())

    def tolist(self) -> list:
        return self._row.tolist()

    def __repr__(self):
        return f"Mat4Row({self._row.tolist()})"


class Mat4:
    __slots__ = ("m",)

    __array_ufunc__ = None

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(4, dtype=np.float32)
        else:
            self.m = np.array(array, dtype=np.float32).reshape((4, 4))

    @staticmethod
    def zero() -> "Mat4":
        return Mat4(np.zeros((4, 4), dtype=np.float32))

    @staticmethod
    def identity() -> "Mat4":
        return Mat4(np.identity(4, dtype=np.float32))

    # -----------------------------------------------------------
    #  Аффинные преобразования
    # -----------------------------------------------------------
    @staticmethod
    def translation(x: float, y: float, z: float) -> "Mat4":
        m = np.identity(4, dtype=np.float32)
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return Mat4(m)

    @staticmethod
    def scale(x: float, y: float, z: float) -> "Mat4":
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = x
        m[1, 1] = y
        m[2, 2] = z
        return Mat4(m)

    @staticmethod
    def rotation(q: Quat) -> "Mat4":
        """Матрица вращения кватерниона; q должен быть единичным."""
        x, y, z, w = q.as_np()
        xx, yy, zz = x*x, y*y, z*z
        xy, xz, yz = x*y, x*z, y*z
        wx, wy, wz = w*x, w*y, w*z

        m = np.identity(4, dtype=np.float32)
        m[0, 0] = 1 - 2*(yy + zz)
        m[0, 1] = 2*(xy - wz)
        m[0, 2] = 2*(xz + wy)

        m[1, 0] = 2*(xy + wz)
        m[1, 1] = 1 - 2*(xx + zz)
        m[1, 2] = 2*(yz - wx)

        m[2, 0] = 2*(xz - wy)
        m[2, 1] = 2*(yz + wx)
        m[2, 2] = 1 - 2*(xx + yy)

        return Mat4(m)

    @staticmethod
    def look_at(position: Vec3, look: Vec3, up: Vec3) -> "Mat4":
        """
        Видовая матрица камеры в `position`, смотрящей на `look`.

        forward направлен от цели к камере.  Базис (left, new_up,
        forward) записывается в столбцы верхнего блока 3×3, столбец
        переноса – (-left·pos, -new_up·pos, -forward·pos).
        Если forward параллелен up, результат не определён (NaN).
        """
        forward = (position - look).normalized()
        left = Vec3.cross(forward, up.normalized()).normalized()
        new_up = Vec3.cross(forward, left)

        m = np.identity(4, dtype=np.float32)
        m[:3, 0] = left.as_np()
        m[:3, 1] = new_up.as_np()
        m[:3, 2] = forward.as_np()

        m[0, 3] = -Vec3.dot(left, position)
        m[1, 3] = -Vec3.dot(new_up, position)
        m[2, 3] = -Vec3.dot(forward, position)

        return Mat4(m)

    # -----------------------------------------------------------
    #  Проекции
    # -----------------------------------------------------------
    @staticmethod
    def ortho(left: float, right: float, bottom: float, top: float,
              near: float, far: float) -> "Mat4":
        """Ортографическая проекция; near/far входят в строку z со знаком минус."""
        f32 = np.float32
        left, right, bottom, top = f32(left), f32(right), f32(bottom), f32(top)
        near, far = f32(near), f32(far)

        m = np.identity(4, dtype=np.float32)
        with np.errstate(divide="ignore", invalid="ignore"):
            m[0, 0] = f32(2.0) / (right - left)
            m[0, 3] = -(right + left) / (right - left)

            m[1, 1] = f32(2.0) / (top - bottom)
            m[1, 3] = -(top + bottom) / (top - bottom)

            m[2, 2] = f32(2.0) / (-far - -near)
            m[2, 3] = -(-far + -near) / (-far - -near)
        return Mat4(m)

    @staticmethod
    def perspective(fov_deg: float, aspect: float, near: float, far: float,
                    pi: float = LEGACY_PI) -> "Mat4":
        """
        Перспективная проекция; aspect = ширина / высота.

        По умолчанию угол переводится в радианы через LEGACY_PI (3.14159),
        точное значение включается явно: pi=math.pi.
        """
        f32 = np.float32
        s = np.tan(f32(fov_deg) / f32(2.0) * f32(pi) / f32(180.0))
        near, far = f32(near), f32(far)

        m = np.zeros((4, 4), dtype=np.float32)
        with np.errstate(divide="ignore", invalid="ignore"):
            m[0, 0] = f32(1.0) / (s * f32(aspect))
            m[1, 1] = f32(1.0) / s
            m[2, 2] = -far / (far - near)
            m[2, 3] = -far * near / (far - near)
        m[3, 2] = -1.0
        return Mat4(m)

    # -----------------------------------------------------------
    #  Доступ к строкам
    # -----------------------------------------------------------
    def __getitem__(self, row: int) -> "Mat4Row":
        """Строка матрицы (запись меняет матрицу): m[row][col]."""
        if not 0 <= row < 4:
            raise IndexError(f"Invalid Mat4 row: {row}")
        return Mat4Row(self.m[row])

    # -----------------------------------------------------------
    #  Умножение
    # -----------------------------------------------------------
    def __matmul__(self, other):
        if isinstance(other, Mat4):
            return Mat4(np.dot(self.m, other.m))
        if isinstance(other, Vec3):
            p = np.dot(self.m[:3, :3], other.as_np()) + self.m[:3, 3]
            return Vec3(*p)
        if isinstance(other, Vec4):
            return Vec4(*np.dot(self.m, other.as_np()))
        return NotImplemented

    __mul__ = __matmul__

    # -----------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        return bool(np.array_equal(self.m, other.m))

    __hash__ = None

    def to_np(self) -> np.ndarray:
        return self.m.copy()

    def transposed(self) -> "Mat4":
        """Транспонированная копия (для потребителей с column‑major)."""
        return Mat4(self.m.T)

    def __repr__(self):
        return f"Mat4({self.m})"
