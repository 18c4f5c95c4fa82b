"""
SWRast3D – программный (CPU) 3‑D рендерер на Python.
Камера, вершинный конвейер, процедурные материалы, растеризация
и кадровый буфер с depth‑тестом; вывод кадра через glfw + OpenGL.

Engine и Window импортируются лениво: ядро не тянет glfw/OpenGL.
"""

from swrast3d.utils import logger
from swrast3d.color import Color
from swrast3d.math import Mat4, Quat
from swrast3d.scene import (
    Scene, Camera, Mesh, Node, Vertex,
    sphere_vertices, cube_vertices, orbital_path,
)
from swrast3d.renderer import (
    Framebuffer, Fragment, Material, Topology, Uniforms, SoftwareRenderer,
)
from swrast3d.utils.loader import load_obj

__version__ = "1.0.0"

__all__ = [
    "Color",
    "Mat4",
    "Quat",
    "Scene",
    "Camera",
    "Mesh",
    "Node",
    "Vertex",
    "sphere_vertices",
    "cube_vertices",
    "orbital_path",
    "Framebuffer",
    "Fragment",
    "Material",
    "Topology",
    "Uniforms",
    "SoftwareRenderer",
    "load_obj",
]
