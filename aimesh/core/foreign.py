from __future__ import annotations

import ctypes
import logging
from typing import Any, Optional

import numpy as np

from ..config import MAXLEN
from .errors import MeshInvariantError

logger = logging.getLogger(__name__)


def is_present(ptr: Any) -> bool:
    """True if a ctypes pointer is non-NULL."""
    return ptr is not None and bool(ptr)


def copy_float_records(ptr: Any, count: int, width: int) -> np.ndarray:
    """
    Copy `count` records of `width` packed float32 values out of foreign memory.

    Returns an owned (count, width) float32 array. The copy is a raw memory
    copy, so NaN payloads survive bit-for-bit. A NULL pointer or a zero count
    gives an empty (0, width) array.
    """
    count = int(count)
    if count <= 0 or not is_present(ptr):
        return np.empty((0, width), dtype=np.float32)
    flat = ctypes.cast(ptr, ctypes.POINTER(ctypes.c_float))
    view = np.ctypeslib.as_array(flat, shape=(count * width,))
    return view.reshape(count, width).copy()


def copy_uint_array(ptr: Any, count: int) -> np.ndarray:
    """Copy `count` unsigned ints out of foreign memory as an owned uint32 array."""
    count = int(count)
    if count <= 0 or not is_present(ptr):
        return np.empty((0,), dtype=np.uint32)
    flat = ctypes.cast(ptr, ctypes.POINTER(ctypes.c_uint))
    return np.ctypeslib.as_array(flat, shape=(count,)).copy()


def decode_ai_string(value: Any) -> str:
    """
    Decode an `aiString` (or a struct with the same `length` / `data` layout).

    An empty or unset string decodes to "".
    """
    if value is None:
        return ""
    length = int(getattr(value, "length", 0) or 0)
    if length <= 0:
        return ""
    if length >= MAXLEN:
        logger.warning("aiString length %d exceeds buffer capacity; truncating", length)
        length = MAXLEN - 1
    raw = ctypes.string_at(ctypes.addressof(value) + type(value).data.offset, length)
    return raw.decode("utf-8", errors="replace")


def resolve_record(record: Any, struct_type: Optional[type] = None) -> Any:
    """
    Accept a ctypes structure, a ctypes pointer to one, or (with `struct_type`)
    a raw integer address, and return the structure itself.
    """
    if isinstance(record, ctypes._Pointer):
        if not record:
            raise MeshInvariantError("NULL mesh record pointer", field="record")
        return record.contents
    if isinstance(record, ctypes.Structure):
        return record
    if isinstance(record, int) and not isinstance(record, bool) and struct_type is not None:
        if record == 0:
            raise MeshInvariantError("NULL mesh record address", field="record")
        return struct_type.from_address(record)
    raise TypeError(f"Unsupported mesh record type: {type(record).__name__}")


def freeze(arr: np.ndarray) -> np.ndarray:
    """Mark an owned array read-only so projections stay immutable values."""
    arr.flags.writeable = False
    return arr
