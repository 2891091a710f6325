"""
Exact integer 3-vectors backed by numpy int64 arrays.
"""

from __future__ import annotations

from typing import Any

import numpy as np

Vector3 = np.ndarray
VECTOR_DTYPE = np.int64


def zero() -> Vector3:
    return np.zeros(3, dtype=VECTOR_DTYPE)


def vector3(values: Any) -> Vector3:
    """
    Coerce a 3-element sequence of whole numbers into a Vector3.

    Floats are accepted only when they hold an integral value, so ``2.0``
    becomes ``2`` but ``2.5`` is rejected.
    """
    arr = np.asarray(values)
    if arr.shape != (3,):
        raise ValueError(f"Cannot coerce {values!r} to a 3-element vector")
    if arr.dtype.kind in "iu":
        return arr.astype(VECTOR_DTYPE)
    if arr.dtype.kind == "f" and np.all(np.isfinite(arr)) and np.all(arr == np.round(arr)):
        return arr.astype(VECTOR_DTYPE)
    raise ValueError(f"Vector components must be integers, got {values!r}")


def add_assign(target: Vector3, other: Vector3) -> None:
    """Component-wise ``target += other``, stored in place."""
    target += other


def signum(vector: Vector3) -> Vector3:
    return np.sign(vector).astype(VECTOR_DTYPE)
