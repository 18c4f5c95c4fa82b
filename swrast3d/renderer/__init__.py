"""
Экспорт компонентов программного конвейера.
"""

from swrast3d.renderer.base_renderer import BaseRenderer
from swrast3d.renderer.fragment import Fragment
from swrast3d.renderer.framebuffer import Framebuffer
from swrast3d.renderer.uniforms import Material, Topology, Uniforms
from swrast3d.renderer.shader import vertex_shader, vertex_stage, fragment_shader
from swrast3d.renderer.rasterizer import triangle, line
from swrast3d.renderer.pipeline import SoftwareRenderer, DrawStats

__all__ = [
    "BaseRenderer",
    "Fragment",
    "Framebuffer",
    "Material",
    "Topology",
    "Uniforms",
    "vertex_shader",
    "vertex_stage",
    "fragment_shader",
    "triangle",
    "line",
    "SoftwareRenderer",
    "DrawStats",
]
