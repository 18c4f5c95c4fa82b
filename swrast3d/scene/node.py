# -*- coding: utf-8 -*-
"""Базовый узел графа сцены."""
import numpy as np
from swrast3d.math.mat4 import Mat4


class Node:
    """Все элементы сцены наследуются от Node."""
    def __init__(self, name="Node"):
        self.name = name
        self.children = []
        self.parent = None
        self.position = np.zeros(3)
        self.rotation = np.zeros(3)   # Эйлеровы углы в радианах
        self.scale = 1.0              # только равномерный масштаб

    # ----------------- трансформации -----------------
    def get_local_matrix(self) -> Mat4:
        """model = T·S · Rz·Ry·Rx."""
        return Mat4.model(self.position, self.scale, self.rotation)

    def get_world_matrix(self) -> Mat4:
        """Рекурсивный обход к родителю."""
        if self.parent is None:
            return self.get_local_matrix()
        return self.parent.get_world_matrix() @ self.get_local_matrix()

    def world_position(self) -> np.ndarray:
        return (self.get_world_matrix() @ np.array([0.0, 0.0, 0.0, 1.0]))[:3]

    # ----------------- иерархия -----------------
    def add_child(self, node):
        node.parent = self
        self.children.append(node)
        return node

    def remove_child(self, node):
        if node in self.children:
            node.parent = None
            self.children.remove(node)

    def traverse(self):
        """Генератор DFS."""
        yield self
        for child in self.children:
            yield from child.traverse()
