# -*- coding: utf-8 -*-
"""
Базовый рендерер: владеет кадровым буфером и матрицами
projection / viewport, собирает Uniforms для draw‑call’ов.
Подкласс реализует render().
"""

from abc import ABC, abstractmethod

from swrast3d.math.mat4 import Mat4
from swrast3d.renderer.framebuffer import Framebuffer
from swrast3d.renderer.uniforms import Material, Uniforms
from swrast3d.utils.logger import logger


class BaseRenderer(ABC):
    def __init__(self, framebuffer: Framebuffer,
                 fov_deg: float = 60.0, near: float = 10.0, far: float = 5000.0):
        self.framebuffer = framebuffer
        self.fov_deg = fov_deg
        self.near = near
        self.far = far
        self._update_matrices()

    def _update_matrices(self):
        w, h = self.framebuffer.width, self.framebuffer.height
        self.projection_matrix = Mat4.perspective(self.fov_deg, w / h, self.near, self.far)
        self.viewport_matrix = Mat4.viewport(w, h)

    def resize(self, w: int, h: int) -> None:
        """Новый framebuffer того же фона + пересчёт projection / viewport."""
        background = self.framebuffer.background_color
        self.framebuffer = Framebuffer(w, h, background)
        self._update_matrices()
        logger.info(f"[Renderer] Framebuffer resized to {w}x{h}")

    def make_uniforms(self, model_matrix: Mat4, view_matrix: Mat4,
                      light_position, material: Material,
                      emissive: bool = False, time: float = 0.0) -> Uniforms:
        return Uniforms(
            model_matrix=model_matrix,
            view_matrix=view_matrix,
            projection_matrix=self.projection_matrix,
            viewport_matrix=self.viewport_matrix,
            light_position=light_position,
            is_emissive=emissive,
            material=material,
            time=time,
        )

    @abstractmethod
    def render(self, scene, camera, time: float = 0.0):
        """Отрисовать один кадр в self.framebuffer."""
        pass
