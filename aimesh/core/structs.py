from __future__ import annotations

from ctypes import POINTER, Structure, c_char, c_float, c_uint, c_void_p

from ..config import AI_MAX_NUMBER_OF_COLOR_SETS, AI_MAX_NUMBER_OF_TEXTURECOORDS, MAXLEN

# ai_real is a float unless assimp was built with ASSIMP_DOUBLE_PRECISION
ai_real = c_float


class aiVector3D(Structure):
    _fields_ = [("x", ai_real), ("y", ai_real), ("z", ai_real)]


class aiColor4D(Structure):
    _fields_ = [("r", ai_real), ("g", ai_real), ("b", ai_real), ("a", ai_real)]


class aiString(Structure):
    """
    Fixed-capacity string. `length` counts bytes, excluding the terminating NUL.
    """
    _fields_ = [("length", c_uint), ("data", c_char * MAXLEN)]

    @classmethod
    def from_text(cls, text: str) -> "aiString":
        raw = text.encode("utf-8")[: MAXLEN - 1]
        return cls(len(raw), raw)


class aiFace(Structure):
    _fields_ = [("mNumIndices", c_uint), ("mIndices", POINTER(c_uint))]


class aiAABB(Structure):
    _fields_ = [("mMin", aiVector3D), ("mMax", aiVector3D)]


class aiMesh(Structure):
    """
    Mirror of `struct aiMesh` (include/assimp/mesh.h, assimp >= 5.1).

    Bones and anim meshes are only counted by the projection, so their
    pointer arrays are declared opaque.
    """
    _fields_ = [
        ("mPrimitiveTypes", c_uint),
        ("mNumVertices", c_uint),
        ("mNumFaces", c_uint),
        ("mVertices", POINTER(aiVector3D)),
        ("mNormals", POINTER(aiVector3D)),
        ("mTangents", POINTER(aiVector3D)),
        ("mBitangents", POINTER(aiVector3D)),
        ("mColors", POINTER(aiColor4D) * AI_MAX_NUMBER_OF_COLOR_SETS),
        ("mTextureCoords", POINTER(aiVector3D) * AI_MAX_NUMBER_OF_TEXTURECOORDS),
        ("mNumUVComponents", c_uint * AI_MAX_NUMBER_OF_TEXTURECOORDS),
        ("mFaces", POINTER(aiFace)),
        ("mNumBones", c_uint),
        ("mBones", POINTER(c_void_p)),
        ("mMaterialIndex", c_uint),
        ("mName", aiString),
        ("mNumAnimMeshes", c_uint),
        ("mAnimMeshes", POINTER(c_void_p)),
        ("mMethod", c_uint),
        ("mAABB", aiAABB),
        ("mTextureCoordsNames", POINTER(POINTER(aiString))),
    ]


__all__ = [
    "ai_real",
    "aiVector3D",
    "aiColor4D",
    "aiString",
    "aiFace",
    "aiAABB",
    "aiMesh",
]
