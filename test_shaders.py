# -*- coding: utf-8 -*-
import math

import numpy as np
import pytest

from swrast3d.color import Color
from swrast3d.math.mat4 import Mat4
from swrast3d.renderer import materials
from swrast3d.renderer.fragment import Fragment
from swrast3d.renderer.shader import fragment_shader, vertex_shader, vertex_stage
from swrast3d.renderer.uniforms import MATERIAL_SHADERS, Material, Uniforms
from swrast3d.scene.vertex import Vertex

ORIGIN = np.zeros(3)
UP = np.array([0.0, 0.0, 1.0])


@pytest.mark.parametrize("material", list(Material))
def test_every_material_returns_color(material):
    color = MATERIAL_SHADERS[material](ORIGIN, UP, 0.0)
    assert isinstance(color, Color)
    assert all(0 <= c <= 255 for c in color.to_tuple())


def test_material_values_at_origin():
    assert materials.skybox_color(ORIGIN, UP, 0.0) == Color(0, 0, 30)
    star = materials.star_color(ORIGIN, UP, 0.0)
    assert star.r == 255 and star.g == 255 and star.b in (169, 170)
    assert materials.rocky_planet_color(ORIGIN, UP, 0.0) == Color(70, 60, 50)
    assert materials.gas_giant_color(ORIGIN, UP, 0.0) == Color(58, 43, 29)
    assert materials.spaceship_color(ORIGIN, UP, 0.0) == Color(127, 134, 148)
    assert materials.orbit_color(ORIGIN, UP, 0.0) == Color(0, 0, 0)


def test_orbit_color_far_from_center():
    c = materials.orbit_color(np.array([100.0, 0.0, 0.0]), UP, 0.0)
    assert 0 < c.r < c.g < c.b


def test_hash_noise_range():
    for p in [(0.0, 0.0, 0.0), (1.5, -2.0, 3.25), (1000.0, 20.0, -7.0)]:
        assert 0.0 <= materials.hash_noise(*p) < 1.0


def test_lighting():
    assert materials.attenuation(0.0) == 1.0
    # свет прямо по нормали и близко → насыщение
    assert materials.light_intensity(UP, ORIGIN, (0, 0, 100)) == 1.0
    # свет сзади → только ambient
    assert materials.light_intensity(UP, ORIGIN, (0, 0, -100)) == pytest.approx(0.1)
    expected = 0.1 + 1.0 / (1.0 + 0.1 + 1.0)
    assert materials.light_intensity(UP, ORIGIN, (0, 0, 1000)) == pytest.approx(expected)
    assert materials.light_intensity(UP, ORIGIN, (0, 0, -100), emissive=True) == 1.0


def test_triangle_intensity():
    a, b, c = (0, 0, 0), (1, 0, 0), (0, 1, 0)
    lit = materials.triangle_intensity(a, b, c, (0, 0, 1000))
    assert lit == pytest.approx(0.1 + 1.0 / 2.1, abs=1e-3)
    # тот же треугольник с обратным обходом смотрит от света
    assert materials.triangle_intensity(a, c, b, (0, 0, 1000)) == pytest.approx(0.1)
    # вырожденный
    assert materials.triangle_intensity(a, a, b, (0, 0, 1000)) == pytest.approx(0.1)


def test_material_parse():
    assert Material.parse("Gas_Giant") is Material.GAS_GIANT
    with pytest.raises(ValueError):
        Material.parse("plasma")


def test_uniforms_resolve_shader_once(identity_uniforms):
    u = identity_uniforms(material=Material.STAR)
    assert u.shade is materials.star_color
    assert np.allclose(u.clip_matrix.m, np.eye(4))
    assert np.allclose(u.normal_matrix, np.eye(3))


def test_vertex_shader_is_pure(identity_uniforms):
    v = Vertex.new((1.0, 2.0, 0.5), (0.0, 0.0, 1.0))
    out = vertex_shader(v, identity_uniforms(material=Material.ROCKY_PLANET))
    assert out is not v
    assert np.allclose(out.transformed_position, [1.0, 2.0, 0.5])
    assert np.allclose(v.transformed_position, [1.0, 2.0, 0.5])
    assert v.color == Color.black()
    assert out.color == materials.rocky_planet_color(v.position, out.transformed_normal, 0.0)


def test_vertex_stage_full_chain():
    model = Mat4.model((0, 0, 0), 2.0, (0, 0, 0))
    view = Mat4.look_at((0, 0, 100), (0, 0, 0), (0, 1, 0))
    proj = Mat4.perspective(60.0, 1.0, 10.0, 5000.0)
    viewport = Mat4.viewport(200, 200)
    u = Uniforms(model, view, proj, viewport, material=Material.ORBIT)

    out = vertex_stage([Vertex.new((0, 0, 0), (0, 0, 1)), Vertex.new((0, 0, 200))], u)
    # центр сцены – в центре экрана
    assert np.allclose(out[0].transformed_position[:2], [100, 100])
    assert -1.0 < out[0].transformed_position[2] < 1.0
    # нормаль масштабированной модели: inverse‑transpose
    assert np.allclose(out[0].transformed_normal, [0, 0, 0.5])
    # вершина позади камеры не даёт inf/nan
    assert np.all(np.isfinite(out[1].transformed_position))


def test_fragment_shader_applies_intensity():
    frag = Fragment(3, 4, Color(200, 100, 50), 0.5, 0.5)
    shaded = fragment_shader(frag)
    assert shaded.color == Color(100, 50, 25)
    assert (shaded.x, shaded.y, shaded.depth) == (3, 4, 0.5)
    assert frag.color == Color(200, 100, 50)
