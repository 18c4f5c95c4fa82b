# -*- coding: utf-8 -*-
"""
Генераторы простых вершинных массивов (уже «развёрнутых» в тройки):
сфера (скайбокс, тела), куб, кольцо орбиты.
"""

import math
from typing import List

import numpy as np

from swrast3d.scene.vertex import Vertex


def sphere_vertices(radius: float, subdivisions: int) -> List[Vertex]:
    """
    UV‑сфера: θ – широта [0, π], φ – долгота [0, 2π].
    Треугольники обходятся против часовой стрелки, если смотреть снаружи,
    т.е. нормаль грани cross(b − a, c − a) направлена наружу.
    """
    grid = []
    for i in range(subdivisions + 1):
        theta = (i / subdivisions) * math.pi
        for j in range(subdivisions + 1):
            phi = (j / subdivisions) * 2.0 * math.pi
            position = np.array([
                radius * math.sin(theta) * math.cos(phi),
                radius * math.cos(theta),
                radius * math.sin(theta) * math.sin(phi),
            ])
            length = np.linalg.norm(position)
            normal = position / length if length > 0.0 else np.array([0.0, 1.0, 0.0])
            grid.append(Vertex.new(position, normal))

    triangles = []
    for i in range(subdivisions):
        for j in range(subdivisions):
            current = i * (subdivisions + 1) + j
            below = current + subdivisions + 1
            triangles += [grid[current], grid[current + 1], grid[below + 1]]
            triangles += [grid[current], grid[below + 1], grid[below]]
    return triangles


_CUBE_CORNERS = [
    (-1, -1, -1), (1, -1, -1), (1, 1, -1), (-1, 1, -1),
    (-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1),
]

# Грани обходятся так, что нормаль грани смотрит внутрь (куб‑скайбокс).
_CUBE_INDICES = [
    0, 1, 2, 0, 2, 3,   # back
    4, 6, 5, 4, 7, 6,   # front
    0, 3, 7, 0, 7, 4,   # left
    1, 5, 6, 1, 6, 2,   # right
    0, 4, 5, 0, 5, 1,   # bottom
    3, 2, 6, 3, 6, 7,   # top
]


def cube_vertices(size: float) -> List[Vertex]:
    half = size / 2.0
    out = []
    for index in _CUBE_INDICES:
        corner = np.array(_CUBE_CORNERS[index], dtype=np.float64)
        out.append(Vertex.new(corner * half, corner / np.linalg.norm(corner)))
    return out


def orbital_path(center, radius: float, segments: int) -> List[Vertex]:
    """Кольцо в плоскости y = center.y (для LINE_LOOP)."""
    cx, cy, cz = (float(v) for v in center)
    out = []
    for i in range(segments):
        angle = (i / segments) * 2.0 * math.pi
        position = (cx + radius * math.cos(angle), cy, cz + radius * math.sin(angle))
        out.append(Vertex.new(position, (0.0, 1.0, 0.0)))
    return out
