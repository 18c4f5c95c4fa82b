# swrast3d/scene/vertex.py
"""
Вершина меша. Объектные поля задаются при загрузке; цвет и
экранные координаты заполняет вершинный шейдер, возвращая *новую*
вершину (исходная не изменяется).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

import numpy as np

from swrast3d.color import Color


def _vec(values, size: int) -> np.ndarray:
    return np.asarray(values, dtype=np.float64).reshape(size)


@dataclass(frozen=True, eq=False)
class Vertex:
    position: np.ndarray
    normal: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 1.0]))
    tex_coords: np.ndarray = field(default_factory=lambda: np.zeros(2))
    color: Color = field(default_factory=Color.black)
    transformed_position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    transformed_normal: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 1.0]))

    def __post_init__(self):
        object.__setattr__(self, "position", _vec(self.position, 3))
        object.__setattr__(self, "normal", _vec(self.normal, 3))
        object.__setattr__(self, "tex_coords", _vec(self.tex_coords, 2))
        object.__setattr__(self, "transformed_position", _vec(self.transformed_position, 3))
        object.__setattr__(self, "transformed_normal", _vec(self.transformed_normal, 3))

    @staticmethod
    def new(position, normal=(0.0, 0.0, 1.0), tex_coords=(0.0, 0.0)) -> "Vertex":
        """Вершина в состоянии «сразу после загрузки»: transformed‑поля = объектным."""
        return Vertex(
            position=position,
            normal=normal,
            tex_coords=tex_coords,
            transformed_position=position,
            transformed_normal=normal,
        )

    def with_transform(self, transformed_position, transformed_normal, color: Color) -> "Vertex":
        return replace(
            self,
            transformed_position=transformed_position,
            transformed_normal=transformed_normal,
            color=color,
        )
