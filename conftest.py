# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: вершины в экранных координатах,
Uniforms с единичными матрицами и изолированный Config.
"""

import numpy as np
import pytest

from swrast3d.color import Color
from swrast3d.math.mat4 import Mat4
from swrast3d.renderer.uniforms import Material, Uniforms
from swrast3d.scene.vertex import Vertex
from swrast3d.utils.config import Config


@pytest.fixture
def screen_vertex():
    """Фабрика вершин, уже «прошедших» вершинный шейдер."""
    def make(x, y, depth=0.5, color=(255, 255, 255)):
        return Vertex(
            position=(x, y, depth),
            transformed_position=(x, y, depth),
            color=Color(*color),
        )
    return make


@pytest.fixture
def identity_uniforms():
    """Фабрика Uniforms, в которых экранная позиция = объектной (при |x|, |y| ≤ 10)."""
    def make(material=Material.ORBIT, emissive=True, light=(0.0, 0.0, 0.0), time=0.0):
        I = Mat4.identity()
        return Uniforms(I, I, I, I, np.asarray(light, dtype=float), emissive, material, time)
    return make


@pytest.fixture
def config_path(tmp_path):
    Config.reset()
    yield tmp_path / "config.json"
    Config.reset()
