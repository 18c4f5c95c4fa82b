# swrast3d/math/quat.py
# ---------------------------------------------------------------
# Кватернионы (x, y, z, w) – нужны камере для поворота
# направления взгляда вокруг произвольной оси:
# - создание из оси и угла (радианы),
# - умножение,
# - вращение 3‑D вектора.
# ---------------------------------------------------------------

import numpy as np
from math import sin, cos


class Quat:
    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x=0.0, y=0.0, z=0.0, w=1.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @staticmethod
    def from_axis_angle(axis, angle):
        """axis – 3‑элементный iterable, angle – в радианах."""
        a = angle / 2.0
        s = sin(a)
        ax = np.asarray(axis, dtype=np.float64)
        n = np.linalg.norm(ax)
        if n == 0.0:
            return Quat()
        ax = ax / n
        return Quat(ax[0] * s, ax[1] * s, ax[2] * s, cos(a))

    def __mul__(self, other: "Quat") -> "Quat":
        """Произведение Гамильтона."""
        x = self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y
        y = self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x
        z = self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w
        w = self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z
        return Quat(x, y, z, w)

    def conjugate(self):
        return Quat(-self.x, -self.y, -self.z, self.w)

    def rotate_vector(self, vec):
        """Вращает 3‑D вектор `vec` (правило правой руки)."""
        qvec = Quat(vec[0], vec[1], vec[2], 0.0)
        res = self * qvec * self.conjugate()
        return np.array([res.x, res.y, res.z], dtype=np.float64)

    def __repr__(self):
        return f"Quat({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"
