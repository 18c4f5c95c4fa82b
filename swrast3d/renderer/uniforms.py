# -*- coding: utf-8 -*-
"""
Uniforms – неизменяемый набор параметров одного draw‑call’а и
перечисление материалов.

Функция цвета выбирается по материалу один раз, при создании
Uniforms; там же считаются производные матрицы (clip = P·V·M и
normal‑matrix), общие для всех вершин вызова.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from swrast3d.color import Color
from swrast3d.math.mat4 import Mat4
from swrast3d.renderer import materials


class Material(enum.Enum):
    SKYBOX = "skybox"
    STAR = "star"
    ROCKY_PLANET = "rocky_planet"
    GAS_GIANT = "gas_giant"
    SPACESHIP = "spaceship"
    ORBIT = "orbit"

    @classmethod
    def parse(cls, name: str) -> "Material":
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(f"Unknown material: {name!r}") from None


class Topology(enum.Enum):
    TRIANGLES = "triangles"     # каждые 3 вершины – треугольник
    LINE_LOOP = "line_loop"     # замкнутая ломаная (орбиты)


ShadeFn = Callable[[np.ndarray, np.ndarray, float], Color]

MATERIAL_SHADERS = {
    Material.SKYBOX: materials.skybox_color,
    Material.STAR: materials.star_color,
    Material.ROCKY_PLANET: materials.rocky_planet_color,
    Material.GAS_GIANT: materials.gas_giant_color,
    Material.SPACESHIP: materials.spaceship_color,
    Material.ORBIT: materials.orbit_color,
}


@dataclass(frozen=True, eq=False)
class Uniforms:
    model_matrix: Mat4
    view_matrix: Mat4
    projection_matrix: Mat4
    viewport_matrix: Mat4
    light_position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    is_emissive: bool = False
    material: Material = Material.ROCKY_PLANET
    time: float = 0.0

    # производные поля (заполняются в __post_init__)
    shade: ShadeFn = field(init=False, repr=False)
    clip_matrix: Mat4 = field(init=False, repr=False)
    normal_matrix: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(
            self, "light_position",
            np.asarray(self.light_position, dtype=np.float64).reshape(3),
        )
        object.__setattr__(self, "shade", MATERIAL_SHADERS[self.material])
        object.__setattr__(
            self, "clip_matrix",
            self.projection_matrix @ self.view_matrix @ self.model_matrix,
        )
        object.__setattr__(self, "normal_matrix", self.model_matrix.normal_matrix())
