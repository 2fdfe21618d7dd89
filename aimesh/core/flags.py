from __future__ import annotations

from enum import IntEnum, IntFlag


class PrimitiveType(IntFlag):
    """
    Bitwise combination of the assimp `aiPrimitiveType` members.

    Specifies which kinds of primitives are present in a mesh. Unknown bits
    are kept, so `int(flags)` always equals the raw foreign bitmask.
    """
    POINT = 0x1
    LINE = 0x2
    TRIANGLE = 0x4
    POLYGON = 0x8
    # set by the triangulation step when polygons were split into triangles
    NGON_ENCODING_FLAG = 0x10

    @classmethod
    def from_raw(cls, raw: int) -> "PrimitiveType":
        return cls(int(raw))

    def names(self) -> list[str]:
        return [m.name.lower() for m in PrimitiveType if m.value & self.value]


class MorphingMethod(IntEnum):
    """Method of morphing when anim meshes are specified (`aiMorphingMethod`)."""
    UNKNOWN = 0x0
    VERTEX_BLEND = 0x1
    MORPH_NORMALIZED = 0x2
    MORPH_RELATIVE = 0x3

    @classmethod
    def from_raw(cls, raw: int) -> "MorphingMethod":
        try:
            return cls(int(raw))
        except ValueError:
            return cls.UNKNOWN
