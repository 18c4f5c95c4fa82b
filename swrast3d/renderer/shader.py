# -*- coding: utf-8 -*-
"""
Программные «шейдеры»:

* vertex_shader   – model → world → view → clip → NDC → screen,
                    преобразование нормали и базовый цвет материала;
* vertex_stage    – то же самое для всего массива вершин сразу
                    (матричная часть считается одним numpy‑умножением);
* fragment_shader – домножение цвета фрагмента на flat‑интенсивность.

Ничего не бросает: маленький w зажимается до W_EPSILON, NDC – в
[−NDC_LIMIT, NDC_LIMIT], вырожденная normal‑matrix уже заменена на
единичную в Uniforms.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

import numpy as np

from swrast3d.renderer.fragment import Fragment
from swrast3d.renderer.uniforms import Uniforms
from swrast3d.scene.vertex import Vertex

W_EPSILON = 0.001
NDC_LIMIT = 10.0


def project(positions: np.ndarray, uniforms: Uniforms) -> np.ndarray:
    """(N, 3) объектные позиции → (N, 3) экранные (x, y, depth)."""
    n = positions.shape[0]
    homogeneous = np.hstack([positions, np.ones((n, 1))])
    clip = homogeneous @ uniforms.clip_matrix.m.T

    w = np.maximum(clip[:, 3:4], W_EPSILON)
    ndc = np.clip(clip[:, :3] / w, -NDC_LIMIT, NDC_LIMIT)

    screen = np.hstack([ndc, np.ones((n, 1))]) @ uniforms.viewport_matrix.m.T
    return screen[:, :3]


def vertex_stage(vertices: Sequence[Vertex], uniforms: Uniforms) -> List[Vertex]:
    """Чистое отображение: новая вершина на каждую входную."""
    if not vertices:
        return []
    positions = np.array([v.position for v in vertices], dtype=np.float64)
    normals = np.array([v.normal for v in vertices], dtype=np.float64)

    screen = project(positions, uniforms)
    transformed_normals = normals @ uniforms.normal_matrix.T

    shade = uniforms.shade
    time = uniforms.time
    return [
        v.with_transform(screen[i], transformed_normals[i],
                         shade(v.position, transformed_normals[i], time))
        for i, v in enumerate(vertices)
    ]


def vertex_shader(vertex: Vertex, uniforms: Uniforms) -> Vertex:
    return vertex_stage([vertex], uniforms)[0]


def fragment_shader(fragment: Fragment) -> Fragment:
    return replace(fragment, color=fragment.color.scaled(fragment.intensity))
