from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ..config import (
    AI_MAX_NUMBER_OF_COLOR_SETS,
    AI_MAX_NUMBER_OF_TEXTURECOORDS,
    MAX_UV_COMPONENTS,
)
from .errors import MeshInvariantError
from .face import Face
from .flags import MorphingMethod, PrimitiveType
from .foreign import copy_float_records, decode_ai_string, freeze, is_present, resolve_record
from .structs import aiMesh

logger = logging.getLogger(__name__)

_EMPTY_VEC3 = freeze(np.empty((0, 3), dtype=np.float32))


def _violation(message: str, field: str) -> MeshInvariantError:
    logger.error("Mesh invariant violated (%s): %s", field, message)
    return MeshInvariantError(message, field=field)


def _vec3_array(rec: Any, field: str, n: int) -> Optional[np.ndarray]:
    # None means the foreign pointer is NULL
    ptr = getattr(rec, field)
    if not is_present(ptr):
        return None
    return freeze(copy_float_records(ptr, n, 3))


def _array_key(arr: np.ndarray) -> Tuple[Tuple[int, ...], bytes]:
    # byte-wise so NaN sentinels in identical records compare equal
    return tuple(arr.shape), arr.tobytes()


class Mesh:
    """
    Read-only projection of one assimp `aiMesh` record.

    All data is copied out of foreign memory when the projection is built;
    afterwards the Mesh never touches the record again and can outlive it.
    Returned arrays are read-only float32; copy them before editing.

    Accepted inputs:
      - an `aiMesh` structure (or any ctypes structure with the same field
        names, e.g. `pyassimp.structs.Mesh`)
      - a ctypes pointer to one
      - an integer address (see `from_address`)

    Raises MeshInvariantError if the record contradicts its declared sizes.
    """

    __slots__ = (
        "_primitive_types",
        "_num_vertices",
        "_num_faces",
        "_num_bones",
        "_material_index",
        "_num_anim_meshes",
        "_method",
        "_name",
        "_vertices",
        "_normals",
        "_tangents",
        "_bitangents",
        "_colors",
        "_texture_coords",
        "_uv_components",
        "_texture_coords_names",
        "_faces",
        "_aabb",
        "_key",
    )

    def __init__(self, record: Any):
        rec = resolve_record(record, aiMesh)

        n = int(rec.mNumVertices)
        nf = int(rec.mNumFaces)

        self._primitive_types = int(rec.mPrimitiveTypes)
        self._num_vertices = n
        self._num_faces = nf
        self._num_bones = int(rec.mNumBones)
        self._material_index = int(rec.mMaterialIndex)
        self._num_anim_meshes = int(rec.mNumAnimMeshes)
        self._method = int(rec.mMethod)
        self._name = decode_ai_string(rec.mName)

        # ---------- per-vertex arrays ----------
        if n > 0 and not is_present(rec.mVertices):
            raise _violation(f"mNumVertices is {n} but mVertices is NULL", "mVertices")
        self._vertices = freeze(copy_float_records(rec.mVertices, n, 3))
        self._normals = _vec3_array(rec, "mNormals", n)
        self._tangents = _vec3_array(rec, "mTangents", n)
        self._bitangents = _vec3_array(rec, "mBitangents", n)

        # ---------- channel slots ----------
        colors: List[Tuple[int, np.ndarray]] = []
        for slot in range(AI_MAX_NUMBER_OF_COLOR_SETS):
            ptr = rec.mColors[slot]
            if is_present(ptr):
                colors.append((slot, freeze(copy_float_records(ptr, n, 4))))
        self._colors = tuple(colors)

        self._uv_components = tuple(
            int(rec.mNumUVComponents[slot]) for slot in range(AI_MAX_NUMBER_OF_TEXTURECOORDS)
        )
        uvs: List[Tuple[int, np.ndarray]] = []
        for slot in range(AI_MAX_NUMBER_OF_TEXTURECOORDS):
            ptr = rec.mTextureCoords[slot]
            if not is_present(ptr):
                continue
            if not 1 <= self._uv_components[slot] <= MAX_UV_COMPONENTS:
                raise _violation(
                    f"UV channel {slot} declares {self._uv_components[slot]} components "
                    f"(expected 1..{MAX_UV_COMPONENTS})",
                    "mNumUVComponents",
                )
            uvs.append((slot, freeze(copy_float_records(ptr, n, 3))))
        self._texture_coords = tuple(uvs)
        self._texture_coords_names = self._read_uv_names(rec)

        # ---------- faces ----------
        if nf > 0 and not is_present(rec.mFaces):
            raise _violation(f"mNumFaces is {nf} but mFaces is NULL", "mFaces")
        self._faces = tuple(Face.from_foreign(rec.mFaces[i]) for i in range(nf))

        aabb = getattr(rec, "mAABB", None)
        if aabb is None:
            self._aabb = freeze(np.zeros((2, 3), dtype=np.float32))
        else:
            self._aabb = freeze(np.array(
                [[aabb.mMin.x, aabb.mMin.y, aabb.mMin.z], [aabb.mMax.x, aabb.mMax.y, aabb.mMax.z]],
                dtype=np.float32,
            ))

        # excludes colors
        self._key = (
            self._name,
            self._material_index,
            _array_key(self.bitangents),
            self._faces,
            self._method,
            _array_key(self.normals),
            self._num_anim_meshes,
            self._num_bones,
            self._num_faces,
            tuple(self.num_uv_components),
            self._num_vertices,
            self._primitive_types,
            _array_key(self.tangents),
            tuple(_array_key(uv) for _, uv in self._texture_coords),
            _array_key(self._vertices),
        )

        logger.debug(
            "Projected mesh %r: %d vertices, %d faces, %d color set(s), %d UV channel(s)",
            self._name, n, nf, len(self._colors), len(self._texture_coords),
        )

    @classmethod
    def from_address(cls, address: int) -> "Mesh":
        """Project the `aiMesh` located at a raw memory address."""
        return cls(int(address))

    def _read_uv_names(self, rec: Any) -> Dict[int, str]:
        names_ptr = getattr(rec, "mTextureCoordsNames", None)
        out: Dict[int, str] = {}
        for slot, _ in self._texture_coords:
            name = ""
            if is_present(names_ptr):
                entry = names_ptr[slot]
                if is_present(entry):
                    name = decode_ai_string(entry.contents)
            out[slot] = name
        return out

    # -------------------------
    # Scalars
    # -------------------------
    @property
    def primitive_types(self) -> PrimitiveType:
        return PrimitiveType.from_raw(self._primitive_types)

    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    @property
    def num_faces(self) -> int:
        return self._num_faces

    @property
    def num_bones(self) -> int:
        return self._num_bones

    @property
    def material_index(self) -> int:
        """Index into the scene's material list."""
        return self._material_index

    @property
    def num_anim_meshes(self) -> int:
        return self._num_anim_meshes

    @property
    def method(self) -> int:
        """Raw `aiMorphingMethod` code."""
        return self._method

    @property
    def morph_method(self) -> MorphingMethod:
        return MorphingMethod.from_raw(self._method)

    @property
    def name(self) -> str:
        return self._name

    # -------------------------
    # Per-vertex data
    # -------------------------
    @property
    def vertices(self) -> np.ndarray:
        return self._vertices

    @property
    def normals(self) -> np.ndarray:
        """
        Vertex normals, (N,3). Vertices referenced only by point or line
        primitives carry NaN; they are returned untouched.
        """
        return _EMPTY_VEC3 if self._normals is None else self._normals

    @property
    def tangents(self) -> np.ndarray:
        return _EMPTY_VEC3 if self._tangents is None else self._tangents

    @property
    def bitangents(self) -> np.ndarray:
        return _EMPTY_VEC3 if self._bitangents is None else self._bitangents

    @property
    def colors(self) -> List[np.ndarray]:
        """Populated color sets in slot order, each (N,4) RGBA."""
        return [c for _, c in self._colors]

    @property
    def texture_coords(self) -> List[np.ndarray]:
        """Populated UV channels in slot order, each (N,3)."""
        return [uv for _, uv in self._texture_coords]

    @property
    def num_uv_components(self) -> List[int]:
        return [c for c in self._uv_components if c > 0]

    @property
    def texture_coords_names(self) -> List[str]:
        return [self._texture_coords_names[slot] for slot, _ in self._texture_coords]

    @property
    def faces(self) -> List[Face]:
        return list(self._faces)

    @property
    def aabb(self) -> np.ndarray:
        """(2,3) array: [min_xyz, max_xyz] as stored by the importer."""
        return self._aabb

    # -------------------------
    # Presence
    # -------------------------
    @property
    def has_positions(self) -> bool:
        return self._num_vertices > 0

    @property
    def has_faces(self) -> bool:
        return self._num_faces > 0

    @property
    def normals_present(self) -> bool:
        """True if mNormals was non-NULL, even when the mesh has no vertices."""
        return self._normals is not None

    @property
    def tangents_present(self) -> bool:
        return self._tangents is not None

    @property
    def bitangents_present(self) -> bool:
        return self._bitangents is not None

    # has_* follow assimp: present and non-empty
    @property
    def has_normals(self) -> bool:
        return self._normals is not None and self._num_vertices > 0

    @property
    def has_tangents_and_bitangents(self) -> bool:
        return (
            self._tangents is not None
            and self._bitangents is not None
            and self._num_vertices > 0
        )

    @property
    def has_bones(self) -> bool:
        return self._num_bones > 0

    def has_vertex_colors(self, channel: int) -> bool:
        if channel < 0 or channel >= AI_MAX_NUMBER_OF_COLOR_SETS:
            return False
        return any(slot == channel for slot, _ in self._colors) and self._num_vertices > 0

    def has_texture_coords(self, channel: int) -> bool:
        if channel < 0 or channel >= AI_MAX_NUMBER_OF_TEXTURECOORDS:
            return False
        return any(slot == channel for slot, _ in self._texture_coords) and self._num_vertices > 0

    @property
    def num_color_channels(self) -> int:
        return len(self._colors)

    @property
    def num_uv_channels(self) -> int:
        return len(self._texture_coords)

    # -------------------------
    # Value semantics
    # -------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mesh):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return (
            f"Mesh(name={self._name!r}, num_vertices={self._num_vertices}, "
            f"num_faces={self._num_faces}, primitive_types={self.primitive_types!r})"
        )

    def summary(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "n_vertices": self._num_vertices,
            "n_faces": self._num_faces,
            "primitive_types": self.primitive_types.names(),
            "material_index": self._material_index,
            "has_normals": self.has_normals,
            "has_tangents_and_bitangents": self.has_tangents_and_bitangents,
            "n_color_sets": self.num_color_channels,
            "n_uv_channels": self.num_uv_channels,
            "uv_components": self.num_uv_components,
            "n_bones": self._num_bones,
            "n_anim_meshes": self._num_anim_meshes,
            "morph_method": self.morph_method.name.lower(),
        }
