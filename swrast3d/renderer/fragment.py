"""
Фрагмент – кандидат в пиксель: целочисленная позиция, цвет, глубина
и flat‑интенсивность освещения треугольника.
"""

from dataclasses import dataclass

from swrast3d.color import Color


@dataclass(frozen=True)
class Fragment:
    x: int
    y: int
    color: Color
    depth: float
    intensity: float = 1.0
