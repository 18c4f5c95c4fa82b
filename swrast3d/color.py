# swrast3d/color.py
"""
8‑битный RGB‑цвет с упаковкой в 32‑битное целое (0xRRGGBB).
"""

from __future__ import annotations

from typing import Tuple


def to_byte(value: float) -> int:
    """Насыщающее приведение float → [0, 255] с отбрасыванием дробной части."""
    if value != value:          # NaN
        return 0
    if value <= 0.0:
        return 0
    if value >= 255.0:
        return 255
    return int(value)


class Color:
    """Неизменяемый RGB‑цвет (каналы 0..255)."""

    __slots__ = ("r", "g", "b")

    def __init__(self, r: int = 0, g: int = 0, b: int = 0):
        object.__setattr__(self, "r", max(0, min(255, int(r))))
        object.__setattr__(self, "g", max(0, min(255, int(g))))
        object.__setattr__(self, "b", max(0, min(255, int(b))))

    def __setattr__(self, name, value):
        raise AttributeError("Color is immutable")

    # -----------------------------------------------------------------
    # конструкторы
    # -----------------------------------------------------------------
    @staticmethod
    def from_float(r: float, g: float, b: float) -> "Color":
        """Каналы приходят как float и приводятся с насыщением."""
        return Color(to_byte(r), to_byte(g), to_byte(b))

    @staticmethod
    def from_hex(value: int) -> "Color":
        return Color((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @staticmethod
    def black() -> "Color":
        return Color(0, 0, 0)

    # -----------------------------------------------------------------
    # преобразования
    # -----------------------------------------------------------------
    def to_hex(self) -> int:
        return (self.r << 16) | (self.g << 8) | self.b

    def to_tuple(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b

    def scaled(self, factor: float) -> "Color":
        """Умножить все каналы на factor (результат усекается до 8 бит)."""
        return Color.from_float(self.r * factor, self.g * factor, self.b * factor)

    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"
