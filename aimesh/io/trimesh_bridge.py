from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from aimesh.core.mesh import Mesh

logger = logging.getLogger(__name__)


def _faces_as_triangles(mesh: Mesh) -> np.ndarray:
    faces = mesh.faces
    if not faces:
        return np.empty((0, 3), dtype=np.int64)
    bad = [i for i, f in enumerate(faces) if f.num_indices != 3]
    if bad:
        raise ValueError(
            f"Mesh {mesh.name!r} has {len(bad)} non-triangle face(s) (first at {bad[0]}); "
            "run assimp's Triangulate/SortByPType steps before bridging to trimesh."
        )
    return np.asarray([f.vertex_indices for f in faces], dtype=np.int64)


def _rgba_to_uint8(colors: np.ndarray) -> np.ndarray:
    return np.clip(np.round(colors * 255.0), 0, 255).astype(np.uint8)


@dataclass
class TrimeshBridge:
    """
    Hands a projected Mesh to trimesh for downstream tooling.

    - vertices/faces are copied as-is (process=False, no merging)
    - vertex normals are passed only when all finite (NaN sentinels from
      point/line vertices would otherwise leak into trimesh)
    - `color_set` selects which populated color set becomes vertex colors
    """
    include_normals: bool = True
    color_set: Optional[int] = 0

    def to_trimesh(self, mesh: Mesh):
        import trimesh

        vertices = np.asarray(mesh.vertices, dtype=np.float64)
        faces = _faces_as_triangles(mesh)

        kwargs = {}
        normals = mesh.normals
        if self.include_normals and normals.shape[0] == vertices.shape[0] and normals.size:
            if np.isfinite(normals).all():
                kwargs["vertex_normals"] = np.asarray(normals, dtype=np.float64)
            else:
                logger.debug("Skipping normals of %r: contains undefined (NaN) entries", mesh.name)

        colors = mesh.colors
        if self.color_set is not None and 0 <= self.color_set < len(colors):
            kwargs["vertex_colors"] = _rgba_to_uint8(colors[self.color_set])

        tm = trimesh.Trimesh(vertices=vertices, faces=faces, process=False, **kwargs)
        tm.metadata["name"] = mesh.name
        tm.metadata["material_index"] = mesh.material_index
        return tm
