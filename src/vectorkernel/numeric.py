import contextlib
import functools
import math
import operator
from dataclasses import dataclass
from typing import Any, Callable, ContextManager

import numpy as np

## Squared-length / length threshold below which a double precision vector
## is treated as having no direction.
EPS = 1e-9

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


def wrap_i32(value) -> int:
    """Wrap an integer into the signed 32-bit range (two's complement)."""
    return ((operator.index(value) - INT32_MIN) & 0xFFFFFFFF) + INT32_MIN


def trunc_i32(value) -> int:
    """Narrow a float to int32, truncating toward zero.

    NaN becomes 0 and out-of-range values saturate. Never raises.
    """
    value = float(value)
    if math.isnan(value):
        return 0
    if value >= INT32_MAX:
        return INT32_MAX
    if value <= INT32_MIN:
        return INT32_MIN
    return int(value)


def narrow_f32(value) -> np.float32:
    """Narrow to single precision. Values beyond float32 range become infinite."""
    with np.errstate(over="ignore"):
        return np.float32(value)


def round_half_up(value: float) -> float:
    """Round to the nearest integer, ties toward positive infinity."""
    if not math.isfinite(value) or abs(value) >= 2.0**52:
        return value
    f = float(math.floor(value))
    return f + 1.0 if value - f >= 0.5 else f


def signum(value: float) -> float:
    if value != value or value == 0.0:
        return value
    return math.copysign(1.0, value)


def same_double(a:float, b:float) -> bool:
    """Bit-level equality: 0.0 and -0.0 differ, every NaN equals every NaN."""
    if a != a:
        return b != b
    return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)


def double_key(value:float) -> tuple|None:
    """Hashable stand-in for a double that agrees with ``same_double``."""
    if value != value:
        return None
    return (value, math.copysign(1.0, value))


def _sqrt_f32(value) -> np.float32:
    with np.errstate(over="ignore", invalid="ignore"):
        return np.sqrt(np.float32(value))


@dataclass(frozen=True)
class NumericKind:
    """The numeric domain a vector type stores its components in.

    ``quiet`` returns the context that arithmetic in this domain runs under.
    float32 overflow goes to infinity silently instead of warning.
    """
    name: str
    dtype: Any
    coerce: Callable[[Any], Any]
    sqrt: Callable[[Any], Any]
    quiet: Callable[[], ContextManager] = contextlib.nullcontext


INT32 = NumericKind("int32", np.int32, wrap_i32, math.sqrt)
FLOAT32 = NumericKind(
    "float32", np.float32, narrow_f32, _sqrt_f32,
    quiet=functools.partial(np.errstate, over="ignore", invalid="ignore"),
)
FLOAT64 = NumericKind("float64", np.float64, float, math.sqrt)
