"""
Корневой узел сцены: источник света, скайбокс, обновление и обход мешей.
"""

from typing import Iterator, List, Optional, Tuple

import numpy as np

from swrast3d.renderer.uniforms import Topology
from swrast3d.scene.mesh import Mesh
from swrast3d.scene.node import Node


class Scene(Node):
    """Корневой узел сцены."""
    def __init__(self):
        super().__init__("RootScene")
        self.light: Optional[Node] = None
        self.skybox: Optional[Mesh] = None
        self.show_orbits = True

    def update(self, dt):
        for node in self.traverse():
            if hasattr(node, "on_update"):
                node.on_update(dt)

    def light_position(self) -> np.ndarray:
        if self.light is None:
            return np.zeros(3)
        return self.light.world_position()

    def meshes(self) -> Iterator[Mesh]:
        """Видимые меши в порядке обхода (скайбокс рисуется отдельно)."""
        for node in self.traverse():
            if not isinstance(node, Mesh) or node is self.skybox or not node.visible:
                continue
            if node.topology is Topology.LINE_LOOP and not self.show_orbits:
                continue
            yield node

    def collision_bodies(self) -> Tuple[List[np.ndarray], List[float]]:
        positions, scales = [], []
        for node in self.traverse():
            if isinstance(node, Mesh) and node.collidable:
                positions.append(node.world_position())
                scales.append(float(node.scale))
        return positions, scales
