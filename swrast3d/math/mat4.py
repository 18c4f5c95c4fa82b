# swrast3d/math/mat4.py
"""
Матрица 4×4 (row‑major, float64) и конструкторы всех матриц конвейера:
model, view (look‑at), projection, viewport, normal‑matrix.
"""

import numpy as np
from math import radians, tan, sin, cos

from swrast3d.utils.logger import logger

DTYPE = np.float64


def normalize(v: np.ndarray) -> np.ndarray:
    """Нормализация; нулевой вектор возвращается как есть."""
    n = np.linalg.norm(v)
    if n == 0.0:
        return v
    return v / n


class Mat4:
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(4, dtype=DTYPE)
        else:
            self.m = np.array(array, dtype=DTYPE).reshape((4, 4))

    @staticmethod
    def identity():
        return Mat4(np.identity(4, dtype=DTYPE))

    @staticmethod
    def translate(x: float, y: float, z: float):
        m = np.identity(4, dtype=DTYPE)
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return Mat4(m)

    @staticmethod
    def scale(sx: float, sy: float = None, sz: float = None):
        sy = sx if sy is None else sy
        sz = sx if sz is None else sz
        m = np.identity(4, dtype=DTYPE)
        m[0, 0] = sx
        m[1, 1] = sy
        m[2, 2] = sz
        return Mat4(m)

    # Углы – в радианах.
    @staticmethod
    def rotate_x(angle: float):
        c, s = cos(angle), sin(angle)
        m = np.identity(4, dtype=DTYPE)
        m[1, 1] = c
        m[1, 2] = -s
        m[2, 1] = s
        m[2, 2] = c
        return Mat4(m)

    @staticmethod
    def rotate_y(angle: float):
        c, s = cos(angle), sin(angle)
        m = np.identity(4, dtype=DTYPE)
        m[0, 0] = c
        m[0, 2] = s
        m[2, 0] = -s
        m[2, 2] = c
        return Mat4(m)

    @staticmethod
    def rotate_z(angle: float):
        c, s = cos(angle), sin(angle)
        m = np.identity(4, dtype=DTYPE)
        m[0, 0] = c
        m[0, 1] = -s
        m[1, 0] = s
        m[1, 1] = c
        return Mat4(m)

    @staticmethod
    def model(translation, scale: float, rotation) -> "Mat4":
        """model = T·S · Rz·Ry·Rx (равномерный масштаб, углы в радианах)."""
        rx, ry, rz = (float(a) for a in rotation)
        R = Mat4.rotate_z(rz) @ Mat4.rotate_y(ry) @ Mat4.rotate_x(rx)
        m = np.identity(4, dtype=DTYPE)
        m[0, 0] = m[1, 1] = m[2, 2] = scale
        m[:3, 3] = np.asarray(translation, dtype=DTYPE)[:3]
        return Mat4(m) @ R

    @staticmethod
    def perspective(fov_deg: float, aspect: float,
                    z_near: float, z_far: float):
        f = 1.0 / tan(radians(fov_deg) / 2.0)
        m = np.zeros((4, 4), dtype=DTYPE)
        m[0, 0] = f / aspect
        m[1, 1] = f
        m[2, 2] = (z_far + z_near) / (z_near - z_far)
        m[2, 3] = (2.0 * z_far * z_near) / (z_near - z_far)
        m[3, 2] = -1.0
        return Mat4(m)

    @staticmethod
    def look_at(eye, target, up) -> "Mat4":
        """
        Правосторонняя view‑матрица: строки (right, up, −forward),
        последний столбец −dot(ось, eye). Камера смотрит вдоль −Z.
        """
        eye = np.asarray(eye, dtype=DTYPE)
        target = np.asarray(target, dtype=DTYPE)
        up = np.asarray(up, dtype=DTYPE)

        f = normalize(target - eye)
        s = normalize(np.cross(f, up))
        u = np.cross(s, f)

        m = np.identity(4, dtype=DTYPE)
        m[0, :3] = s
        m[1, :3] = u
        m[2, :3] = -f

        m[0, 3] = -np.dot(s, eye)
        m[1, 3] = -np.dot(u, eye)
        m[2, 3] = np.dot(f, eye)

        return Mat4(m)

    @staticmethod
    def viewport(width: float, height: float) -> "Mat4":
        """NDC → экран: начало координат в левом верхнем углу, ось Y вниз."""
        m = np.identity(4, dtype=DTYPE)
        m[0, 0] = width / 2.0
        m[0, 3] = width / 2.0
        m[1, 1] = -height / 2.0
        m[1, 3] = height / 2.0
        return Mat4(m)

    def normal_matrix(self) -> np.ndarray:
        """transpose(inverse(upper‑left 3×3)); при вырожденности – единичная."""
        upper = self.m[:3, :3]
        try:
            inv = np.linalg.inv(upper)
        except np.linalg.LinAlgError:
            logger.debug("[Mat4] Singular model matrix – identity normal matrix")
            return np.identity(3, dtype=DTYPE)
        if not np.all(np.isfinite(inv)):
            return np.identity(3, dtype=DTYPE)
        return inv.T

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            return Mat4(np.dot(self.m, other.m))
        return np.dot(self.m, np.asarray(other, dtype=DTYPE))

    def __repr__(self):
        return f"Mat4({self.m})"

    def to_np(self) -> np.ndarray:
        return self.m.copy()
