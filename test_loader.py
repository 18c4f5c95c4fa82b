# -*- coding: utf-8 -*-
import numpy as np
import pytest

from swrast3d.utils.loader import load_obj

QUAD = """\
# quad
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 0
vt 1 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1 4//1
"""


def test_quad_is_fan_triangulated(tmp_path):
    path = tmp_path / "quad.obj"
    path.write_text(QUAD, encoding="utf-8")
    verts = load_obj(path)
    assert len(verts) == 6
    assert [v.position.tolist() for v in verts] == [
        [0, 0, 0], [1, 0, 0], [1, 1, 0],
        [0, 0, 0], [1, 1, 0], [0, 1, 0],
    ]
    assert all(np.allclose(v.normal, [0, 0, 1]) for v in verts)
    assert np.allclose(verts[2].tex_coords, [1, 1])
    # у 4‑й вершины нет texcoord
    assert np.allclose(verts[5].tex_coords, [0, 0])
    # сразу после загрузки transformed‑поля равны объектным
    assert np.allclose(verts[1].transformed_position, verts[1].position)


def test_defaults_and_negative_indices(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text("v 0 0 0\nv 2 0 0\nv 0 2 0\nf -3 -2 -1\n", encoding="utf-8")
    verts = load_obj(str(path))
    assert len(verts) == 3
    assert np.allclose(verts[2].position, [0, 2, 0])
    assert np.allclose(verts[0].normal, [0, 0, 1])


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj(tmp_path / "nope.obj")
