from .trimesh_bridge import TrimeshBridge

__all__ = [
    "TrimeshBridge",
]
