import numpy as np
import pytest
import trimesh

from aimesh import Mesh
from aimesh.io import TrimeshBridge


def test_to_trimesh_triangle_mesh(quad_mesh):
    m = Mesh(quad_mesh.record)
    tm = TrimeshBridge().to_trimesh(m)

    assert isinstance(tm, trimesh.Trimesh)
    np.testing.assert_allclose(tm.vertices, m.vertices)
    np.testing.assert_array_equal(tm.faces, [[0, 1, 2], [0, 2, 3]])
    np.testing.assert_allclose(tm.vertex_normals, m.normals)
    np.testing.assert_array_equal(tm.visual.vertex_colors[0], [255, 0, 0, 255])
    assert tm.metadata["name"] == "quad"
    assert tm.metadata["material_index"] == 1


def test_to_trimesh_rejects_non_triangles(foreign_mesh):
    fm = foreign_mesh([[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]], faces=[[0, 1, 2, 3]], primitive_types=0x8)
    with pytest.raises(ValueError):
        TrimeshBridge().to_trimesh(Mesh(fm.record))


def test_to_trimesh_skips_undefined_normals(foreign_mesh):
    fm = foreign_mesh(
        [[0, 0, 0], [1, 0, 0], [0, 1, 0], [5, 5, 5]],
        normals=[[0, 0, 1], [0, 0, 1], [0, 0, 1], [np.nan] * 3],
        faces=[[0, 1, 2]],
    )
    tm = TrimeshBridge(color_set=None).to_trimesh(Mesh(fm.record))

    assert len(tm.vertices) == 4
    assert len(tm.faces) == 1
