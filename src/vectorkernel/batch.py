"""Array-level helpers for solvers working on collections of vectors.

Each operation has its own policy for ``None`` slots:

* ``sum_vectors``: an absent array or slot counts as zero.
* ``average_vectors``: same as the sum, divided by ``len(arr)``; absent slots
  still count toward the divisor.
* ``scale_all`` and ``normalize_all``: absent slots are skipped, an absent
  array is a no-op.
* ``lerp_all``: an absent input slot counts as zero, an absent output slot
  gets a fresh vector, an absent array raises ValueError.
* ``add_scaled``: any absent array or slot raises ValueError.

``lerp_all`` and ``add_scaled`` read all of their inputs before writing any
output, so an output list may share vector objects with its inputs.
"""
from typing import Iterable, MutableSequence, Sequence, TypeVar

import numpy as np
from numpy.typing import NDArray

from vectorkernel import kernels, logger
from vectorkernel.base import Vec2Base
from vectorkernel.vec2d import Vec2D
from vectorkernel.vec2f import Vec2F
from vectorkernel.vec2i import Vec2I

V = TypeVar("V", Vec2I, Vec2F, Vec2D)

## Element type used when an array holds no vector to infer it from.
DEFAULT_VTYPE = Vec2D

BATCH_TYPES = (Vec2I, Vec2F, Vec2D)


def element_type(arrays:Iterable[Iterable|None], vtype:type|None=None) -> type:
    """The vector type a batch call works in.

    An explicit vtype wins, otherwise the type of the first present element,
    otherwise DEFAULT_VTYPE.
    """
    if vtype is None:
        for arr in arrays:
            if arr is None:
                continue
            vtype = next((type(v) for v in arr if v is not None), None)
            if vtype is not None:
                break
        else:
            vtype = DEFAULT_VTYPE

    if vtype not in BATCH_TYPES:
        raise TypeError(f"Batch operations support {', '.join(t.__name__ for t in BATCH_TYPES)}, got {vtype.__name__}")
    return vtype


def require_present(arr:Sequence|None, name:str):
    if arr is None:
        logger.debug("Rejecting absent array %s", name)
        raise ValueError(f"{name} must not be None")
    for i, v in enumerate(arr):
        if v is None:
            logger.debug("Rejecting absent element %s[%s]", name, i)
            raise ValueError(f"{name}[{i}] must not be None")


def pack(arr:Sequence|None, vtype:type) -> tuple[NDArray, NDArray[np.bool_]]:
    """Copy vectors into an ``(N, 2)`` array of the type's dtype.

    Returns the values and a presence mask; absent slots hold zeros.
    """
    n = 0 if arr is None else len(arr)
    values = np.zeros((n, 2), dtype=vtype.kind.dtype)
    present = np.zeros(n, dtype=np.bool_)
    for i in range(n):
        v = arr[i]
        if v is None:
            continue
        if not isinstance(v, vtype):
            raise TypeError(f"Element {i} is {type(v).__name__}, expected {vtype.__name__}")
        values[i, 0] = v.x
        values[i, 1] = v.y
        present[i] = True
    return values, present


def _trunc_div(a:int, n:int) -> int:
    q = abs(a) // n
    return -q if a < 0 else q


def _sum(arr, vtype) -> tuple[Vec2Base, int]:
    if arr is None or len(arr) == 0:
        return vtype(), 0
    values, present = pack(arr, vtype)
    total = np.zeros(2, dtype=vtype.kind.dtype)
    kernels.sum_rows(values, present, total)
    return vtype(total[0], total[1]), int(present.sum())


def sum_vectors(arr:Sequence[V|None]|None, vtype:type[V]|None=None) -> V:
    """Sum of all present vectors. Empty or absent arrays sum to zero."""
    vtype = element_type([arr], vtype)
    total, _ = _sum(arr, vtype)
    return total


def average_vectors(arr:Sequence[V|None]|None, vtype:type[V]|None=None) -> V:
    """Sum divided by ``len(arr)``.

    Absent slots add nothing but still count toward the divisor, so
    ``[v, None]`` averages to ``v / 2``. Integer averages truncate toward
    zero.
    """
    vtype = element_type([arr], vtype)
    total, num_present = _sum(arr, vtype)
    if num_present == 0:
        return vtype()

    n = len(arr)
    if num_present < n:
        logger.debug("Averaging %s slots, %s absent", n, n - num_present)

    if vtype is Vec2I:
        return Vec2I(_trunc_div(total.x, n), _trunc_div(total.y, n))
    s = vtype.kind.coerce(n)
    return vtype(total.x / s, total.y / s)


def scale_all(arr:Sequence[Vec2Base|None]|None, s) -> None:
    """Scale every present vector in place."""
    if arr is None:
        return
    for v in arr:
        if v is not None:
            v.scale(s)


def normalize_all(arr:Sequence[Vec2F|Vec2D|None]|None) -> None:
    """Normalize every present vector in place with its own zero-length policy."""
    if arr is None:
        return
    for v in arr:
        if isinstance(v, Vec2I):
            raise TypeError("Vec2I vectors cannot be normalized")
    for v in arr:
        if v is not None:
            v.normalize()


def lerp_all(
    a:Sequence[V|None],
    b:Sequence[V|None],
    out:MutableSequence[V|None],
    t:float,
    vtype:type[V]|None=None,
) -> None:
    """out[i] = a[i] + (b[i] - a[i]) * t for every slot.

    Raises:
        ValueError: If an array is None or the lengths differ.
        TypeError: For Vec2I arrays.
    """
    if a is None or b is None or out is None:
        logger.debug("lerp_all called with an absent array")
        raise ValueError("arrays must not be None")
    if len(a) != len(b) or len(a) != len(out):
        logger.debug("lerp_all length mismatch: a=%s b=%s out=%s", len(a), len(b), len(out))
        raise ValueError(f"array lengths must match (a={len(a)}, b={len(b)}, out={len(out)})")

    vtype = element_type([a, b, out], vtype)
    if vtype is Vec2I:
        raise TypeError("Vec2I vectors cannot be interpolated")

    # out is checked in full before any slot is written
    pack(out, vtype)
    a_values, _ = pack(a, vtype)
    b_values, _ = pack(b, vtype)
    out_values = np.empty_like(a_values)
    kernels.lerp_rows(a_values, b_values, vtype.kind.dtype(t), out_values)

    for i in range(len(out)):
        if out[i] is None:
            out[i] = vtype()
        out[i].set(out_values[i, 0], out_values[i, 1])


def add_scaled(dst:Sequence[V], src:Sequence[V], scale) -> None:
    """dst[i] += src[i] * scale for every slot.

    Raises:
        ValueError: If an array or one of its elements is None, or the lengths differ.
    """
    require_present(dst, "dst")
    require_present(src, "src")
    if len(dst) != len(src):
        logger.debug("add_scaled length mismatch: dst=%s src=%s", len(dst), len(src))
        raise ValueError(f"array lengths must match (dst={len(dst)}, src={len(src)})")

    vtype = element_type([dst, src])
    dst_values, _ = pack(dst, vtype)
    src_values, _ = pack(src, vtype)
    kernels.add_scaled_rows(dst_values, src_values, vtype.kind.dtype(vtype.kind.coerce(scale)))

    for i, v in enumerate(dst):
        v.set(dst_values[i, 0], dst_values[i, 1])
