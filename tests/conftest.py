import ctypes
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pytest

from aimesh.core.structs import aiColor4D, aiFace, aiMesh, aiString, aiVector3D


@dataclass
class ForeignMesh:
    """An aiMesh built in Python plus the buffers it points into."""
    record: aiMesh
    buffers: Dict[str, Any] = field(default_factory=dict)
    keep: List[Any] = field(default_factory=list)


def _vec_buffer(values, width: int) -> np.ndarray:
    return np.ascontiguousarray(np.asarray(values, dtype=np.float32).reshape(-1, width))


def build_foreign_mesh(
    vertices: Sequence[Sequence[float]],
    *,
    normals=None,
    tangents=None,
    bitangents=None,
    colors: Optional[Dict[int, Any]] = None,
    uvs: Optional[Dict[int, Tuple[Any, int]]] = None,
    uv_names: Optional[Dict[int, str]] = None,
    faces: Optional[Sequence[Sequence[int]]] = None,
    name: str = "",
    primitive_types: int = 0x4,
    material_index: int = 0,
    num_bones: int = 0,
    num_anim_meshes: int = 0,
    method: int = 0,
    aabb: Optional[Tuple[Sequence[float], Sequence[float]]] = None,
) -> ForeignMesh:
    rec = aiMesh()
    fm = ForeignMesh(record=rec)

    verts = _vec_buffer(vertices, 3)
    n = verts.shape[0]
    rec.mNumVertices = n
    rec.mPrimitiveTypes = primitive_types
    rec.mMaterialIndex = material_index
    rec.mNumBones = num_bones
    rec.mNumAnimMeshes = num_anim_meshes
    rec.mMethod = method
    rec.mName = aiString.from_text(name)

    fm.buffers["vertices"] = verts
    rec.mVertices = verts.ctypes.data_as(ctypes.POINTER(aiVector3D))

    for key, values, attr in (
        ("normals", normals, "mNormals"),
        ("tangents", tangents, "mTangents"),
        ("bitangents", bitangents, "mBitangents"),
    ):
        if values is None:
            continue
        buf = _vec_buffer(values, 3)
        fm.buffers[key] = buf
        setattr(rec, attr, buf.ctypes.data_as(ctypes.POINTER(aiVector3D)))

    for slot, values in (colors or {}).items():
        buf = _vec_buffer(values, 4)
        fm.buffers[f"color{slot}"] = buf
        rec.mColors[slot] = buf.ctypes.data_as(ctypes.POINTER(aiColor4D))

    for slot, (values, n_comp) in (uvs or {}).items():
        buf = _vec_buffer(values, 3)
        fm.buffers[f"uv{slot}"] = buf
        rec.mTextureCoords[slot] = buf.ctypes.data_as(ctypes.POINTER(aiVector3D))
        rec.mNumUVComponents[slot] = n_comp

    if uv_names:
        names = (ctypes.POINTER(aiString) * 8)()
        for slot, text in uv_names.items():
            s = aiString.from_text(text)
            fm.keep.append(s)
            names[slot] = ctypes.pointer(s)
        fm.keep.append(names)
        rec.mTextureCoordsNames = ctypes.cast(names, ctypes.POINTER(ctypes.POINTER(aiString)))

    faces = list(faces or [])
    if faces:
        face_structs = []
        for idx in faces:
            ibuf = np.ascontiguousarray(np.asarray(idx, dtype=np.uint32))
            fm.keep.append(ibuf)
            face_structs.append(aiFace(len(idx), ibuf.ctypes.data_as(ctypes.POINTER(ctypes.c_uint))))
        arr = (aiFace * len(face_structs))(*face_structs)
        fm.keep.append(arr)
        rec.mFaces = ctypes.cast(arr, ctypes.POINTER(aiFace))
    rec.mNumFaces = len(faces)

    if aabb is not None:
        rec.mAABB.mMin = aiVector3D(*aabb[0])
        rec.mAABB.mMax = aiVector3D(*aabb[1])

    return fm


@pytest.fixture(scope="session")
def rng_seed():
    return int(os.environ.get("AIMESH_TEST_SEED", "1234"))


@pytest.fixture
def rng(rng_seed):
    return np.random.default_rng(rng_seed)


@pytest.fixture
def foreign_mesh():
    return build_foreign_mesh


@pytest.fixture
def quad_mesh(foreign_mesh):
    """Unit quad split into two triangles, with normals, 2 UV channels and a color set."""
    verts = [[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]]
    return foreign_mesh(
        verts,
        normals=[[0, 0, 1]] * 4,
        tangents=[[1, 0, 0]] * 4,
        bitangents=[[0, 1, 0]] * 4,
        colors={0: [[1, 0, 0, 1], [0, 1, 0, 1], [0, 0, 1, 1], [1, 1, 1, 1]]},
        uvs={
            0: ([[0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0]], 2),
            1: ([[0, 0, 0], [0.5, 0, 0], [0.5, 0.5, 0], [0, 0.5, 0]], 2),
        },
        faces=[[0, 1, 2], [0, 2, 3]],
        name="quad",
        material_index=1,
    )
