"""Loops over packed ``(N, 2)`` component arrays.

Arithmetic happens in the array dtype: float32 rows accumulate in float32
and int32 stores wrap, matching the scalar vector types. ``fastmath`` stays
off so summation order and rounding match the per-vector operations exactly.
"""
import numpy as np
from numba import njit
from numpy.typing import NDArray


@njit(cache=True)
def sum_rows(
    values_in: NDArray,
    present_in: NDArray[np.bool_],
    total_out: NDArray,
):
    for i in range(values_in.shape[0]):
        if not present_in[i]:
            continue
        total_out[0] = total_out[0] + values_in[i, 0]
        total_out[1] = total_out[1] + values_in[i, 1]


@njit(cache=True)
def lerp_rows(
    a_in: NDArray,
    b_in: NDArray,
    t,
    values_out: NDArray,
):
    for i in range(values_out.shape[0]):
        for k in range(2):
            if t == 1:
                values_out[i, k] = b_in[i, k]
            else:
                values_out[i, k] = a_in[i, k] + (b_in[i, k] - a_in[i, k]) * t


@njit(cache=True)
def add_scaled_rows(
    dst: NDArray,
    src_in: NDArray,
    scale,
):
    for i in range(dst.shape[0]):
        dst[i, 0] = dst[i, 0] + src_in[i, 0] * scale
        dst[i, 1] = dst[i, 1] + src_in[i, 1] * scale
