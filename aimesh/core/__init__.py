from .errors import MeshInvariantError
from .face import Face
from .flags import MorphingMethod, PrimitiveType
from .mesh import Mesh

__all__ = [
    "MeshInvariantError",
    "Face",
    "MorphingMethod",
    "PrimitiveType",
    "Mesh",
]
