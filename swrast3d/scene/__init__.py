"""
Пакет scene – узлы сцены (Node), камера, меши, вершины, примитивы.
"""

from swrast3d.scene.vertex import Vertex
from swrast3d.scene.node import Node
from swrast3d.scene.camera import Camera, OrbitalState, FreeState
from swrast3d.scene.mesh import Mesh
from swrast3d.scene.scene import Scene
from swrast3d.scene.primitives import sphere_vertices, cube_vertices, orbital_path

__all__ = ["Vertex", "Node", "Camera", "OrbitalState", "FreeState",
           "Mesh", "Scene",
           "sphere_vertices", "cube_vertices", "orbital_path"]
