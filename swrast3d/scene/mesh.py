"""
Отрисовываемый объект – список вершин (каждые 3 подряд = треугольник)
плюс материал (enum или имя, напр. "gas_giant").
Топология LINE_LOOP используется для орбит.
"""

from typing import List, Sequence, Union

from swrast3d.renderer.uniforms import Material, Topology
from swrast3d.scene.node import Node
from swrast3d.scene.vertex import Vertex


class Mesh(Node):
    """Меш‑узел сцены."""
    def __init__(self,
                 vertices: Sequence[Vertex],
                 material: Union[Material, str] = Material.ROCKY_PLANET,
                 emissive: bool = False,
                 topology: Topology = Topology.TRIANGLES,
                 collidable: bool = False,
                 name="Mesh"):
        super().__init__(name)
        self.vertices: List[Vertex] = list(vertices)
        if isinstance(material, str):
            material = Material.parse(material)
        self.material = material
        self.emissive = emissive
        self.topology = topology
        self.collidable = collidable
        self.visible = True

    @property
    def triangle_count(self) -> int:
        if self.topology is not Topology.TRIANGLES:
            return 0
        return len(self.vertices) // 3
