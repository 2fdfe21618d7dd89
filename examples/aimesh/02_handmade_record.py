import ctypes

import numpy as np

from aimesh import Mesh
from aimesh.core.structs import aiFace, aiMesh, aiString, aiVector3D

verts = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0]], dtype=np.float32)
normals = np.array([[0, 0, 1], [0, 0, 1], [np.nan, np.nan, np.nan]], dtype=np.float32)
idx = (ctypes.c_uint * 3)(0, 1, 2)
faces = (aiFace * 1)(aiFace(3, ctypes.cast(idx, ctypes.POINTER(ctypes.c_uint))))

rec = aiMesh()
rec.mPrimitiveTypes = 0x4
rec.mNumVertices = 3
rec.mNumFaces = 1
rec.mVertices = verts.ctypes.data_as(ctypes.POINTER(aiVector3D))
rec.mNormals = normals.ctypes.data_as(ctypes.POINTER(aiVector3D))
rec.mFaces = ctypes.cast(faces, ctypes.POINTER(aiFace))
rec.mName = aiString.from_text("triangle")

mesh = Mesh(rec)
print(mesh)
print("normals (NaN kept):", mesh.normals)
print("faces:", [f.vertex_indices for f in mesh.faces])
