# -*- coding: utf-8 -*-
"""
Минимальный парсер Wavefront OBJ (позиции, нормали, texcoords, грани).
Материалы MTL не поддерживаются. Результат – плоский список вершин,
каждые 3 подряд образуют треугольник.
"""
from pathlib import Path
from typing import List

from swrast3d.scene.vertex import Vertex
from swrast3d.utils.logger import logger

DEFAULT_NORMAL = (0.0, 0.0, 1.0)
DEFAULT_TEX = (0.0, 0.0)


def _index(token: str, count: int) -> int:
    """OBJ‑индекс (1‑based, отрицательный = с конца) → 0‑based."""
    i = int(token)
    return count + i if i < 0 else i - 1


def load_obj(path) -> List[Vertex]:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"OBJ file not found: {path}")

    verts = []
    normals = []
    texcoords = []
    faces = []   # список (p, t, n), t/n = -1 если нет

    with path.open("r", encoding="utf-8") as f:
        for line in f:
            if line.startswith("#") or not line.strip():
                continue
            parts = line.split()
            if parts[0] == "v":
                verts.append(tuple(map(float, parts[1:4])))
            elif parts[0] == "vn":
                normals.append(tuple(map(float, parts[1:4])))
            elif parts[0] == "vt":
                texcoords.append(tuple(map(float, parts[1:3])))
            elif parts[0] == "f":
                face = []
                for v in parts[1:]:
                    # форматы: v, v/vt, v//vn, v/vt/vn
                    idx = v.split("/")
                    p = _index(idx[0], len(verts))
                    t = _index(idx[1], len(texcoords)) if len(idx) > 1 and idx[1] else -1
                    n = _index(idx[2], len(normals)) if len(idx) > 2 and idx[2] else -1
                    face.append((p, t, n))
                faces.append(face)

    vertices: List[Vertex] = []
    for face in faces:
        if len(face) < 3:
            continue
        # полигон → веер треугольников
        v0 = face[0]
        for i in range(1, len(face) - 1):
            for p, t, n in (v0, face[i], face[i + 1]):
                vertices.append(Vertex.new(
                    verts[p],
                    normals[n] if n >= 0 else DEFAULT_NORMAL,
                    texcoords[t] if t >= 0 else DEFAULT_TEX,
                ))

    logger.info(f"[Loader] {path.name}: {len(vertices) // 3} triangles")
    return vertices
