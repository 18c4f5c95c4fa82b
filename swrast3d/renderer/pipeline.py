# -*- coding: utf-8 -*-
"""
Программный forward‑конвейер.

Один draw‑call:
    1. vertex stage   – чистое отображение вершин (shader.vertex_stage);
    2. сборка         – каждые 3 вершины → треугольник, остаток игнорируется;
    3. освещение      – одна интенсивность на треугольник по мировым позициям;
    4. растеризация   – rasterizer.triangle (ленивый поток фрагментов);
    5. fragment stage – цвет × интенсивность;
    6. composite      – Framebuffer.point с явным цветом и depth‑тестом.

Кадр: clear → скайбокс (следует за камерой) → меши сцены по порядку обхода.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from swrast3d.math.mat4 import Mat4
from swrast3d.renderer.base_renderer import BaseRenderer
from swrast3d.renderer.framebuffer import Framebuffer
from swrast3d.renderer.materials import triangle_intensity
from swrast3d.renderer.rasterizer import (
    GUARD_MAX, GUARD_MIN, MAX_TRIANGLE_SIZE, line, triangle,
)
from swrast3d.renderer.shader import fragment_shader, vertex_stage
from swrast3d.renderer.uniforms import Topology, Uniforms
from swrast3d.scene.vertex import Vertex
from swrast3d.utils.logger import logger
from swrast3d.utils.profiler import Profiler


@dataclass
class DrawStats:
    triangles: int = 0
    fragments: int = 0
    written: int = 0

    def __iadd__(self, other: "DrawStats") -> "DrawStats":
        self.triangles += other.triangles
        self.fragments += other.fragments
        self.written += other.written
        return self


class SoftwareRenderer(BaseRenderer):
    """Растеризатор на CPU, пишущий в собственный Framebuffer."""

    def __init__(self,
                 framebuffer: Framebuffer,
                 fov_deg: float = 60.0,
                 near: float = 10.0,
                 far: float = 5000.0,
                 max_triangle_size: int = MAX_TRIANGLE_SIZE,
                 guard_min: int = GUARD_MIN,
                 guard_max: int = GUARD_MAX):
        super().__init__(framebuffer, fov_deg, near, far)
        self.max_triangle_size = max_triangle_size
        self.guard_min = guard_min
        self.guard_max = guard_max

    @classmethod
    def from_config(cls, cfg) -> "SoftwareRenderer":
        fb_cfg = cfg.section("framebuffer")
        proj = cfg.section("projection")
        raster = cfg.section("rasterizer")
        framebuffer = Framebuffer(fb_cfg["width"], fb_cfg["height"], fb_cfg["background"])
        return cls(
            framebuffer,
            fov_deg=proj["fov_deg"],
            near=proj["near"],
            far=proj["far"],
            max_triangle_size=raster["max_triangle_size"],
            guard_min=raster["guard_min"],
            guard_max=raster["guard_max"],
        )

    # -----------------------------------------------------------------
    # draw‑calls
    # -----------------------------------------------------------------
    def draw(self, uniforms: Uniforms, vertices: Sequence[Vertex]) -> DrawStats:
        stats = DrawStats()
        count = len(vertices) - len(vertices) % 3
        if count == 0:
            return stats

        transformed = vertex_stage(vertices[:count], uniforms)
        positions = np.array([v.position for v in vertices[:count]], dtype=np.float64)
        world = (np.hstack([positions, np.ones((count, 1))]) @ uniforms.model_matrix.m.T)[:, :3]

        fb = self.framebuffer
        for i in range(0, count, 3):
            stats.triangles += 1
            intensity = triangle_intensity(
                world[i], world[i + 1], world[i + 2],
                uniforms.light_position, uniforms.is_emissive,
            )
            for fragment in triangle(transformed[i], transformed[i + 1], transformed[i + 2],
                                     intensity, self.max_triangle_size,
                                     self.guard_min, self.guard_max):
                stats.fragments += 1
                shaded = fragment_shader(fragment)
                if fb.point(shaded.x, shaded.y, shaded.depth, shaded.color):
                    stats.written += 1
        return stats

    def draw_line_loop(self, uniforms: Uniforms, vertices: Sequence[Vertex]) -> DrawStats:
        """Замкнутая ломаная (орбита) без освещения."""
        stats = DrawStats()
        if len(vertices) < 2:
            return stats
        transformed = vertex_stage(vertices, uniforms)
        fb = self.framebuffer
        n = len(transformed)
        for i in range(n):
            for fragment in line(transformed[i], transformed[(i + 1) % n],
                                 self.guard_min, self.guard_max):
                stats.fragments += 1
                if fb.point(fragment.x, fragment.y, fragment.depth, fragment.color):
                    stats.written += 1
        return stats

    # -----------------------------------------------------------------
    # кадр
    # -----------------------------------------------------------------
    def render(self, scene, camera, time: float = 0.0) -> DrawStats:
        total = DrawStats()
        self.framebuffer.clear()
        view = camera.view_matrix()
        light = scene.light_position()

        if scene.skybox is not None:
            with Profiler("skybox"):
                sky = self.make_uniforms(
                    Mat4.model(camera.position, 1.0, (0.0, 0.0, 0.0)), view,
                    light, scene.skybox.material, emissive=True, time=time,
                )
                total += self.draw(sky, scene.skybox.vertices)

        for mesh in scene.meshes():
            with Profiler(mesh.name):
                uniforms = self.make_uniforms(
                    mesh.get_world_matrix(), view, light, mesh.material,
                    emissive=mesh.emissive, time=time,
                )
                if mesh.topology is Topology.LINE_LOOP:
                    total += self.draw_line_loop(uniforms, mesh.vertices)
                else:
                    total += self.draw(uniforms, mesh.vertices)

        logger.debug(
            f"[Renderer] Frame: {total.triangles} tris, "
            f"{total.fragments} fragments, {total.written} written"
        )
        return total
