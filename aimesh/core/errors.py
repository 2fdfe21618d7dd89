from __future__ import annotations

from typing import Optional


class MeshInvariantError(ValueError):
    """
    Raised when a foreign mesh record contradicts its own declared sizes
    (e.g. a NULL vertex array with a non-zero vertex count).
    """

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
