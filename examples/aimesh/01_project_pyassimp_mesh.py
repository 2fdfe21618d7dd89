import sys

import pyassimp

from aimesh import Mesh, setup_logging
from aimesh.io import TrimeshBridge

setup_logging()

path = sys.argv[1] if len(sys.argv) > 1 else "model.obj"

# pyassimp's Mesh structs share aiMesh's field layout, so they project directly
with pyassimp.load(path) as scene:
    meshes = [Mesh(m) for m in scene.meshes]

# projections own their data; the scene is released at this point
for m in meshes:
    print(m.summary())
    if m.primitive_types.names() == ["triangle"]:
        tm = TrimeshBridge().to_trimesh(m)
        print("  trimesh:", tm.vertices.shape, tm.faces.shape)
