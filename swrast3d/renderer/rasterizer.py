# -*- coding: utf-8 -*-
"""
Растеризация треугольников и линий.

Треугольник:
    1. целочисленный bounding‑box (floor/ceil), зажатый в защитное окно;
    2. отказ, если любая сторона box’а больше max_triangle_size;
    3. барицентрические веса через edge‑функции для центров пикселей;
    4. пиксель внутри, если все веса в [0, 1]; пиксели ровно на ребре
       принадлежат только «верхним» и «левым» рёбрам (top‑left rule),
       поэтому общий край двух треугольников не рисуется дважды;
    5. цвет и глубина интерполируются линейно, интенсивность – одна
       на весь треугольник.

Сканирование box’а – numba‑ядро; Python‑часть лениво отдаёт фрагменты.
"""

from __future__ import annotations

import math
from typing import Iterator, Optional, Tuple

import numpy as np
from numba import njit

from swrast3d.color import Color
from swrast3d.renderer.fragment import Fragment
from swrast3d.scene.vertex import Vertex
from swrast3d.utils.logger import logger

MAX_TRIANGLE_SIZE = 300
GUARD_MIN = -1000
GUARD_MAX = 2000
AREA_EPSILON = 1e-9


# ============================================================
#  Numba‑ядро
# ============================================================

@njit(cache=True)
def _edge(ax, ay, bx, by, px, py):
    return (px - ax) * (by - ay) - (py - ay) * (bx - ax)


@njit(cache=True)
def _owns_edge(ax, ay, bx, by, sign):
    """Верхнее или левое ребро: внутренность справа (+x) или, для горизонтального, снизу (+y)."""
    gx = sign * (by - ay)
    gy = -sign * (bx - ax)
    return gx > 0.0 or (gx == 0.0 and gy > 0.0)


@njit(cache=True)
def scan_triangle(ax, ay, bx, by, cx, cy, min_x, min_y, max_x, max_y):
    """
    Возвращает (xs, ys, weights) для пикселей box’а, попавших в треугольник.
    weights[:, i] – барицентрический вес i‑й вершины.
    """
    width = max_x - min_x + 1
    height = max_y - min_y + 1
    count = width * height if width > 0 and height > 0 else 0

    xs = np.empty(count, dtype=np.int64)
    ys = np.empty(count, dtype=np.int64)
    weights = np.empty((count, 3), dtype=np.float64)

    area = _edge(ax, ay, bx, by, cx, cy)
    if abs(area) < AREA_EPSILON or count == 0:
        return xs[:0], ys[:0], weights[:0]

    sign = 1.0 if area > 0.0 else -1.0
    inv_area = 1.0 / abs(area)
    own1 = _owns_edge(bx, by, cx, cy, sign)
    own2 = _owns_edge(cx, cy, ax, ay, sign)
    own3 = _owns_edge(ax, ay, bx, by, sign)

    n = 0
    for y in range(min_y, max_y + 1):
        py = y + 0.5
        for x in range(min_x, max_x + 1):
            px = x + 0.5
            e1 = sign * _edge(bx, by, cx, cy, px, py)
            e2 = sign * _edge(cx, cy, ax, ay, px, py)
            e3 = sign * _edge(ax, ay, bx, by, px, py)
            if e1 < 0.0 or e2 < 0.0 or e3 < 0.0:
                continue
            if (e1 == 0.0 and not own1) or (e2 == 0.0 and not own2) or (e3 == 0.0 and not own3):
                continue
            w1 = e1 * inv_area
            w2 = e2 * inv_area
            w3 = e3 * inv_area
            if w1 > 1.0 or w2 > 1.0 or w3 > 1.0:
                continue
            xs[n] = x
            ys[n] = y
            weights[n, 0] = w1
            weights[n, 1] = w2
            weights[n, 2] = w3
            n += 1

    return xs[:n], ys[:n], weights[:n]


# ============================================================
#  Треугольники
# ============================================================

def bounding_box(a, b, c,
                 guard_min: int = GUARD_MIN,
                 guard_max: int = GUARD_MAX) -> Optional[Tuple[int, int, int, int]]:
    """(min_x, min_y, max_x, max_y) или None для нечисловых координат."""
    xs = (float(a[0]), float(b[0]), float(c[0]))
    ys = (float(a[1]), float(b[1]), float(c[1]))
    if not all(math.isfinite(v) for v in xs + ys):
        return None

    def clamp(v: int) -> int:
        return max(guard_min, min(guard_max, v))

    return (
        clamp(math.floor(min(xs))),
        clamp(math.floor(min(ys))),
        clamp(math.ceil(max(xs))),
        clamp(math.ceil(max(ys))),
    )


def coverage(a, b, c,
             max_triangle_size: int = MAX_TRIANGLE_SIZE,
             guard_min: int = GUARD_MIN,
             guard_max: int = GUARD_MAX):
    """Покрытие треугольника в экранных координатах: (xs, ys, weights) или None."""
    box = bounding_box(a, b, c, guard_min, guard_max)
    if box is None:
        logger.debug("[Rasterizer] Non-finite triangle skipped")
        return None
    min_x, min_y, max_x, max_y = box
    if max_x - min_x > max_triangle_size or max_y - min_y > max_triangle_size:
        logger.debug(
            f"[Rasterizer] Triangle rejected: {max_x - min_x}x{max_y - min_y} px box"
        )
        return None
    return scan_triangle(
        float(a[0]), float(a[1]), float(b[0]), float(b[1]), float(c[0]), float(c[1]),
        min_x, min_y, max_x, max_y,
    )


def triangle(v1: Vertex, v2: Vertex, v3: Vertex,
             intensity: float = 1.0,
             max_triangle_size: int = MAX_TRIANGLE_SIZE,
             guard_min: int = GUARD_MIN,
             guard_max: int = GUARD_MAX) -> Iterator[Fragment]:
    """Лениво отдаёт фрагменты внутренней области треугольника."""
    a, b, c = v1.transformed_position, v2.transformed_position, v3.transformed_position
    covered = coverage(a, b, c, max_triangle_size, guard_min, guard_max)
    if covered is None:
        return
    xs, ys, weights = covered
    if len(xs) == 0:
        return

    depths = weights @ np.array([a[2], b[2], c[2]], dtype=np.float64)
    colors = weights @ np.array(
        [v1.color.to_tuple(), v2.color.to_tuple(), v3.color.to_tuple()],
        dtype=np.float64,
    )
    for i in range(len(xs)):
        r, g, bl = colors[i]
        yield Fragment(int(xs[i]), int(ys[i]), Color.from_float(r, g, bl),
                       float(depths[i]), intensity)


# ============================================================
#  Линии (орбиты)
# ============================================================

def line(v1: Vertex, v2: Vertex,
         guard_min: int = GUARD_MIN,
         guard_max: int = GUARD_MAX) -> Iterator[Fragment]:
    """
    Целочисленный Брезенхем между экранными позициями двух вершин;
    глубина и цвет интерполируются вдоль линии.
    """
    p0, p1 = v1.transformed_position, v2.transformed_position
    if not (np.all(np.isfinite(p0)) and np.all(np.isfinite(p1))):
        return

    def clamp(v: float) -> int:
        return max(guard_min, min(guard_max, int(round(v))))

    x0, y0 = clamp(p0[0]), clamp(p0[1])
    x1, y1 = clamp(p1[0]), clamp(p1[1])
    z0, z1 = float(p0[2]), float(p1[2])
    c0 = np.array(v1.color.to_tuple(), dtype=np.float64)
    c1 = np.array(v2.color.to_tuple(), dtype=np.float64)

    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    steps = max(dx, -dy)
    err = dx + dy

    x, y = x0, y0
    for i in range(steps + 1):
        t = i / steps if steps else 0.0
        r, g, b = c0 + (c1 - c0) * t
        yield Fragment(x, y, Color.from_float(r, g, b), z0 + (z1 - z0) * t, 1.0)
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy
