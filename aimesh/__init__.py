# aimesh/__init__.py

"""
aimesh

Read-only Python value types over the in-memory mesh records produced by
the Open Asset Import Library (assimp).

- Mesh: projection of one `aiMesh` (positions, normals, tangents, color
  sets, UV channels, faces, scalar metadata) into owned numpy arrays
- Face: vertex index tuple
- PrimitiveType / MorphingMethod: flag and enum views of raw codes

Importing, post-processing and memory ownership stay with assimp; records
usually come from `pyassimp` or from `aimesh.core.structs` built by hand.
"""

from .core.errors import MeshInvariantError
from .core.face import Face
from .core.flags import MorphingMethod, PrimitiveType
from .core.mesh import Mesh
from .logging_config import setup_logging

__all__ = [
    "Mesh",
    "Face",
    "PrimitiveType",
    "MorphingMethod",
    "MeshInvariantError",
    "setup_logging",
]
