# -*- coding: utf-8 -*-
import math

import numpy as np

from swrast3d.renderer.rasterizer import (
    bounding_box, coverage, line, scan_triangle, triangle,
)


def _pixels(fragments):
    return {(f.x, f.y) for f in fragments}


def test_right_triangle_fragment_count(screen_vertex):
    frags = list(triangle(screen_vertex(0, 0), screen_vertex(10, 0), screen_vertex(0, 10)))
    assert len(frags) == 45
    # пиксели на гипотенузе (x + y = 9) не принадлежат треугольнику
    assert all(f.x + f.y <= 8 for f in frags)


def test_winding_does_not_matter(screen_vertex):
    cw = _pixels(triangle(screen_vertex(0, 0), screen_vertex(10, 0), screen_vertex(0, 10)))
    ccw = _pixels(triangle(screen_vertex(0, 0), screen_vertex(0, 10), screen_vertex(10, 0)))
    assert cw == ccw


def test_weights_sum_to_one():
    xs, ys, weights = scan_triangle(0.3, 0.1, 17.2, 4.9, 6.5, 13.7, 0, 0, 18, 14)
    assert len(xs) > 0
    assert np.allclose(weights.sum(axis=1), 1.0, atol=1e-5)
    assert np.all(weights >= 0.0) and np.all(weights <= 1.0)


def test_shared_edge_drawn_once(screen_vertex):
    a, b, c, d = (screen_vertex(0, 0), screen_vertex(10, 0),
                  screen_vertex(10, 10), screen_vertex(0, 10))
    first = [(f.x, f.y) for f in triangle(a, b, c)]
    second = [(f.x, f.y) for f in triangle(a, c, d)]
    assert not set(first) & set(second)
    assert len(first) + len(second) == 100


def test_size_guard(screen_vertex):
    big = list(triangle(screen_vertex(0, 0), screen_vertex(301, 0), screen_vertex(0, 301)))
    assert big == []
    assert coverage((0, 0), (301, 0), (0, 301)) is None

    xs, _, _ = coverage((0, 0), (299, 0), (0, 299))
    assert len(xs) == 44551


def test_degenerate_and_non_finite(screen_vertex):
    assert list(triangle(screen_vertex(0, 0), screen_vertex(5, 5), screen_vertex(10, 10))) == []
    assert list(triangle(screen_vertex(math.nan, 0), screen_vertex(5, 0), screen_vertex(0, 5))) == []
    assert bounding_box((math.inf, 0), (1, 0), (0, 1)) is None


def test_bounding_box_clamped_to_guard():
    assert bounding_box((-5000.2, 0.5), (1.5, 0), (0, 9000)) == (-1000, 0, 2, 2000)


def test_depth_and_color_interpolation(screen_vertex):
    frags = list(triangle(
        screen_vertex(0, 0, depth=0.25, color=(200, 0, 0)),
        screen_vertex(12, 0, depth=0.25, color=(200, 0, 0)),
        screen_vertex(0, 12, depth=0.25, color=(200, 0, 0)),
        intensity=0.4,
    ))
    assert frags
    for f in frags:
        assert math.isclose(f.depth, 0.25, abs_tol=1e-9)
        assert f.color.r in (199, 200)
        assert f.color.g == 0 and f.color.b == 0
        assert f.intensity == 0.4


def test_line_horizontal(screen_vertex):
    frags = list(line(screen_vertex(0, 0, depth=0.0), screen_vertex(5, 0, depth=1.0)))
    assert [(f.x, f.y) for f in frags] == [(i, 0) for i in range(6)]
    assert math.isclose(frags[0].depth, 0.0)
    assert math.isclose(frags[-1].depth, 1.0)


def test_line_steep_and_reversed(screen_vertex):
    frags = list(line(screen_vertex(3, 7), screen_vertex(0, 0)))
    assert (frags[0].x, frags[0].y) == (3, 7)
    assert (frags[-1].x, frags[-1].y) == (0, 0)
    assert len(frags) == 8
