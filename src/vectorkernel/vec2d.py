import json
import math
from typing import Callable, Sequence

import numpy as np
from numpy.typing import NDArray

from vectorkernel import vecmath
from vectorkernel.base import Vec2Base, constant
from vectorkernel.numeric import EPS, FLOAT64, round_half_up, same_double, signum


class Vec2D(Vec2Base):
    """Mutable double precision vector.

    Equality is bit-exact per component; use ``approx_equals`` for a
    tolerance. Ordering compares squared length only, so two different
    vectors of the same length are neither less nor greater than each other.

    Degenerate inputs never raise and never produce NaN:

    * ``normalized`` returns zero when length <= EPS while
      ``normalize_in_place`` leaves the vector untouched.
    * ``safe_div`` / ``safe_div_in_place`` fall back on a zero divisor.
    * ``snapped`` with a non-positive grid returns an unchanged copy.

    ``div``/``divided`` are the unguarded forms and raise ZeroDivisionError.
    """

    __slots__ = ()

    kind = FLOAT64

    ZERO = constant(0.0, 0.0)
    ONE = constant(1.0, 1.0)
    UNIT_X = constant(1.0, 0.0)
    UNIT_Y = constant(0.0, 1.0)
    NEG_ONE = constant(-1.0, -1.0)

    EPS = EPS

    clamp01 = staticmethod(vecmath.clamp01)
    smooth_step = staticmethod(vecmath.smooth_step)

    @classmethod
    def of(cls, x:float, y:float) -> "Vec2D":
        return cls(x, y)

    @classmethod
    def from_complex(cls, z:complex) -> "Vec2D":
        """Build from a point in the complex plane (X+Yj)."""
        return cls(z.real, z.imag)

    def to_complex(self) -> complex:
        return complex(self.x, self.y)

    # ---------------------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------------------

    mul = Vec2Base.scale
    subtracted = Vec2Base.subbed
    multiplied = Vec2Base.scaled

    def div(self, s:float) -> "Vec2D":
        self.x /= s
        self.y /= s
        return self

    def hadamard(self, o:"Vec2D") -> "Vec2D":
        self.x *= o.x
        self.y *= o.y
        return self

    def add_scalar(self, s:float) -> "Vec2D":
        self.x += s
        self.y += s
        return self

    def sub_scalar(self, s:float) -> "Vec2D":
        self.x -= s
        self.y -= s
        return self

    def divided(self, s:float) -> "Vec2D":
        return Vec2D(self.x / s, self.y / s)

    def hadamarded(self, o:"Vec2D") -> "Vec2D":
        return Vec2D(self.x * o.x, self.y * o.y)

    def added_scalar(self, s:float) -> "Vec2D":
        return Vec2D(self.x + s, self.y + s)

    def subtracted_scalar(self, s:float) -> "Vec2D":
        return Vec2D(self.x - s, self.y - s)

    # ---------------------------------------------------------------------
    # Length / normalization
    # ---------------------------------------------------------------------

    def inv_length(self) -> float:
        """1/length, or 0.0 when the squared length is <= EPS."""
        ls = self.length_squared()
        return 0.0 if ls <= EPS else 1.0 / math.sqrt(ls)

    inv_sqrt = inv_length

    def normalized(self) -> "Vec2D":
        n = self.length()
        if n <= EPS:
            return Vec2D()
        return Vec2D(self.x / n, self.y / n)

    def normalize_in_place(self) -> "Vec2D":
        # Too short to have a direction: keep the old components.
        n = self.length()
        if n <= EPS:
            return self
        self.x /= n
        self.y /= n
        return self

    normalize = normalize_in_place

    def safe_normalized(self, fallback:"Vec2D|None"=None) -> "Vec2D":
        """Like ``normalized`` but returns a copy of fallback for short vectors."""
        n = self.length()
        if n <= EPS:
            return Vec2D() if fallback is None else fallback.clone()
        return Vec2D(self.x / n, self.y / n)

    # ---------------------------------------------------------------------
    # Algebra & comparisons
    # ---------------------------------------------------------------------

    def cross(self, o:"Vec2D") -> float:
        """2D cross product (z-component)."""
        return self.x * o.y - self.y * o.x

    def project(self, axis:"Vec2D") -> float:
        """Scalar projection onto axis. The axis is used as given, not normalized."""
        return self.dot(axis)

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0

    def approx_equals(self, o:"Vec2D", eps:float=EPS) -> bool:
        return abs(self.x - o.x) <= eps and abs(self.y - o.y) <= eps

    equals_epsilon = approx_equals

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)

    # ---------------------------------------------------------------------
    # Interpolation
    # ---------------------------------------------------------------------

    def lerped(self, other:"Vec2D", t:float) -> "Vec2D":
        return Vec2D(vecmath.lerp(self.x, other.x, t), vecmath.lerp(self.y, other.y, t))

    def lerp_in_place(self, other:"Vec2D", t:float) -> "Vec2D":
        self.x = vecmath.lerp(self.x, other.x, t)
        self.y = vecmath.lerp(self.y, other.y, t)
        return self

    lerp = lerp_in_place
    mix = lerped

    # ---------------------------------------------------------------------
    # Rounding / snapping
    # ---------------------------------------------------------------------

    def floored(self) -> "Vec2D":
        return Vec2D(np.floor(self.x), np.floor(self.y))

    def ceiled(self) -> "Vec2D":
        return Vec2D(np.ceil(self.x), np.ceil(self.y))

    def rounded(self) -> "Vec2D":
        return Vec2D(round_half_up(self.x), round_half_up(self.y))

    def signed(self) -> "Vec2D":
        return Vec2D(signum(self.x), signum(self.y))

    def swapped(self) -> "Vec2D":
        return Vec2D(self.y, self.x)

    def snapped(self, grid_size:float) -> "Vec2D":
        """Round each component to the nearest multiple of grid_size."""
        if grid_size <= 0.0:
            return self.clone()
        return Vec2D(
            round_half_up(self.x / grid_size) * grid_size,
            round_half_up(self.y / grid_size) * grid_size,
        )

    def snap_to_grid_in_place(self, grid_size:float) -> "Vec2D":
        if grid_size <= 0.0:
            return self
        self.x = round_half_up(self.x / grid_size) * grid_size
        self.y = round_half_up(self.y / grid_size) * grid_size
        return self

    # ---------------------------------------------------------------------
    # Safe division & mapping
    # ---------------------------------------------------------------------

    def safe_div(self, s:float, default_value:float) -> "Vec2D":
        if s == 0.0:
            return Vec2D(default_value, default_value)
        return Vec2D(self.x / s, self.y / s)

    def safe_div_in_place(self, s:float) -> "Vec2D":
        if s == 0.0:
            return self
        self.x /= s
        self.y /= s
        return self

    def map(self, fn:Callable[[float], float]) -> "Vec2D":
        return Vec2D(fn(self.x), fn(self.y))

    def map_in_place(self, fn:Callable[[float], float]) -> "Vec2D":
        return self.set(fn(self.x), fn(self.y))

    # ---------------------------------------------------------------------
    # Length clamp
    # ---------------------------------------------------------------------

    def clamped_length(self, max_length:float) -> "Vec2D":
        ls = self.length_squared()
        if ls <= max_length * max_length:
            return self.clone()
        inv = 1.0 / math.sqrt(ls)
        return Vec2D(self.x * inv * max_length, self.y * inv * max_length)

    def clamp_length_in_place(self, max_length:float) -> "Vec2D":
        ls = self.length_squared()
        if ls <= max_length * max_length:
            return self
        inv = 1.0 / math.sqrt(ls)
        self.x *= inv * max_length
        self.y *= inv * max_length
        return self

    # ---------------------------------------------------------------------
    # Statistics
    # ---------------------------------------------------------------------

    def component_sum(self) -> float:
        return self.x + self.y

    def component_product(self) -> float:
        return self.x * self.y

    def component_average(self) -> float:
        return (self.x + self.y) * 0.5

    def magnitude_max(self) -> float:
        return max(abs(self.x), abs(self.y))

    def magnitude_min(self) -> float:
        return min(abs(self.x), abs(self.y))

    # ---------------------------------------------------------------------
    # Text / array export & conversion
    # ---------------------------------------------------------------------

    def to_csv(self) -> str:
        return f"{self.x},{self.y}"

    def to_json(self) -> str:
        return json.dumps({"x": self.x, "y": self.y}, separators=(",", ":"))

    def to_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    def to_float(self):
        from vectorkernel import convert
        return convert.to_float(self)

    def to_int(self):
        from vectorkernel import convert
        return convert.to_int(self)

    def to_frozen(self):
        from vectorkernel import convert
        return convert.to_frozen(self)

    to_record = to_frozen

    # ---------------------------------------------------------------------
    # Array statics
    # ---------------------------------------------------------------------

    @staticmethod
    def add_scaled(dst:"Sequence[Vec2D]", src:"Sequence[Vec2D]", scale:float) -> None:
        """dst[i] += src[i] * scale for every i. Arrays must match in length."""
        from vectorkernel import batch
        batch.add_scaled(dst, src, scale)

    @staticmethod
    def scale_all(arr:"Sequence[Vec2D]|None", s:float) -> None:
        """Scale every vector in place. Unlike ``batch.scale_all`` an absent element is an error."""
        from vectorkernel import batch
        if arr is None:
            return
        batch.require_present(arr, "arr")
        batch.scale_all(arr, s)

    @staticmethod
    def sum_of(arr:"Sequence[Vec2D|None]|None") -> "Vec2D":
        from vectorkernel import batch
        return batch.sum_vectors(arr, Vec2D)

    @staticmethod
    def average_of(arr:"Sequence[Vec2D|None]|None") -> "Vec2D":
        from vectorkernel import batch
        return batch.average_vectors(arr, Vec2D)

    # ---------------------------------------------------------------------
    # Equality & ordering
    # ---------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Vec2D):
            return NotImplemented
        return same_double(self.x, other.x) and same_double(self.y, other.y)

    __hash__ = None  # type: ignore[assignment]

    def compare_to(self, o:"Vec2D") -> int:
        a, b = self.length_squared(), o.length_squared()
        return (a > b) - (a < b)

    def __lt__(self, o:"Vec2D") -> bool:
        return self.length_squared() < o.length_squared()

    def __le__(self, o:"Vec2D") -> bool:
        return self.length_squared() <= o.length_squared()

    def __gt__(self, o:"Vec2D") -> bool:
        return self.length_squared() > o.length_squared()

    def __ge__(self, o:"Vec2D") -> bool:
        return self.length_squared() >= o.length_squared()
