from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Tuple

import numpy as np

from .errors import MeshInvariantError
from .foreign import copy_uint_array, is_present


@dataclass(frozen=True)
class Face:
    """
    A single face of a mesh: an ordered tuple of vertex indices into the
    mesh's per-vertex arrays.

    1 index -> point, 2 -> line, 3 -> triangle, more -> polygon.
    """
    vertex_indices: Tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, "vertex_indices", tuple(int(i) for i in self.vertex_indices))

    @classmethod
    def from_foreign(cls, face: Any) -> "Face":
        n = int(face.mNumIndices)
        if n > 0 and not is_present(face.mIndices):
            raise MeshInvariantError(
                f"Face declares {n} indices but mIndices is NULL", field="mIndices"
            )
        return cls(tuple(copy_uint_array(face.mIndices, n).tolist()))

    @property
    def num_indices(self) -> int:
        return len(self.vertex_indices)

    @property
    def indices(self) -> np.ndarray:
        return np.asarray(self.vertex_indices, dtype=np.int64)

    def __len__(self) -> int:
        return len(self.vertex_indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertex_indices)

    def __getitem__(self, i: int) -> int:
        return self.vertex_indices[i]
