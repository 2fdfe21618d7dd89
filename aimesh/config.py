"""
Configuration & constants
=========================
Central registry for the assimp ABI constants mirrored by ``aimesh.core.structs``
and for environment-driven defaults.

Exports:
    AI_MAX_NUMBER_OF_COLOR_SETS (int): color-set slots per mesh.
    AI_MAX_NUMBER_OF_TEXTURECOORDS (int): UV-channel slots per mesh.
    MAXLEN (int): capacity of the ``aiString`` character buffer.
    MAX_UV_COMPONENTS (int): highest supported component count of a UV channel.
    DEFAULT_LOG_LEVEL (int): level used by ``setup_logging`` when none is given.
"""
import logging
import os

# include/assimp/mesh.h
AI_MAX_NUMBER_OF_COLOR_SETS: int = 0x8
AI_MAX_NUMBER_OF_TEXTURECOORDS: int = 0x8

# include/assimp/types.h
MAXLEN: int = 1024

# UVW; 4D coords are not supported by assimp
MAX_UV_COMPONENTS: int = 3


def _level_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var, "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


DEFAULT_LOG_LEVEL: int = _level_from_env("AIMESH_LOG_LEVEL", logging.WARNING)
