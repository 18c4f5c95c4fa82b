"""
Математический суб‑пакет: Mat4, Quat.
"""

from swrast3d.math.mat4 import Mat4, normalize
from swrast3d.math.quat import Quat

__all__ = ["Mat4", "Quat", "normalize"]
