import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

from vectorkernel import vecmath
from vectorkernel.numeric import double_key, same_double


@dataclass(frozen=True, eq=False, repr=False)
class FrozenVec2:
    """Immutable double precision vector.

    Every operation returns a new instance; assigning to ``x`` or ``y``
    raises ``dataclasses.FrozenInstanceError``. Components compare bit-exactly
    like ``Vec2D`` (``0.0 != -0.0``, NaN equals NaN) and equal vectors hash
    equally, so instances can be used as dict keys.

    ``normalized`` only treats an exactly zero length as degenerate and then
    returns the shared ``ZERO``. This is looser than ``Vec2D``'s EPS guard.
    """
    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["FrozenVec2"]
    ONE: ClassVar["FrozenVec2"]
    UP: ClassVar["FrozenVec2"]
    DOWN: ClassVar["FrozenVec2"]
    LEFT: ClassVar["FrozenVec2"]
    RIGHT: ClassVar["FrozenVec2"]
    UNIT_X: ClassVar["FrozenVec2"]
    UNIT_Y: ClassVar["FrozenVec2"]
    NEG_ONE: ClassVar["FrozenVec2"]

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    # ---- pure operations ----

    def added(self, v:"FrozenVec2") -> "FrozenVec2":
        return FrozenVec2(self.x + v.x, self.y + v.y)

    def subbed(self, v:"FrozenVec2") -> "FrozenVec2":
        return FrozenVec2(self.x - v.x, self.y - v.y)

    def scaled(self, s:float) -> "FrozenVec2":
        return FrozenVec2(self.x * s, self.y * s)

    def negated(self) -> "FrozenVec2":
        return FrozenVec2(-self.x, -self.y)

    def absed(self) -> "FrozenVec2":
        return FrozenVec2(abs(self.x), abs(self.y))

    def clamped(self, lo:float, hi:float) -> "FrozenVec2":
        return FrozenVec2(vecmath.clamp(self.x, lo, hi), vecmath.clamp(self.y, lo, hi))

    def lerped(self, target:"FrozenVec2", t:float) -> "FrozenVec2":
        return FrozenVec2(vecmath.lerp(self.x, target.x, t), vecmath.lerp(self.y, target.y, t))

    # ---- math ----

    def dot(self, v:"FrozenVec2") -> float:
        return self.x * v.x + self.y * v.y

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance_squared(self, v:"FrozenVec2") -> float:
        return vecmath.distance_squared(self.x, self.y, v.x, v.y)

    def distance(self, v:"FrozenVec2") -> float:
        return math.sqrt(self.distance_squared(v))

    def normalized(self) -> "FrozenVec2":
        n = self.length()
        if n == 0.0:
            return FrozenVec2.ZERO
        return FrozenVec2(self.x / n, self.y / n)

    # ---- conversion ----

    def to_mutable_d(self):
        from vectorkernel import convert
        return convert.to_double(self)

    def to_mutable_f(self):
        from vectorkernel import convert
        return convert.to_float(self)

    def to_mutable_i(self):
        from vectorkernel import convert
        return convert.to_int(self)

    def __eq__(self, other):
        if not isinstance(other, FrozenVec2):
            return NotImplemented
        return same_double(self.x, other.x) and same_double(self.y, other.y)

    def __hash__(self) -> int:
        return hash((double_key(self.x), double_key(self.y)))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, v):
        return self.added(v)

    def __sub__(self, v):
        return self.subbed(v)

    def __mul__(self, s):
        return self.scaled(s)

    __rmul__ = __mul__

    def __neg__(self):
        return self.negated()

    def __repr__(self) -> str:
        return f"FrozenVec2({self.x}, {self.y})"


FrozenVec2.ZERO = FrozenVec2(0.0, 0.0)
FrozenVec2.ONE = FrozenVec2(1.0, 1.0)
FrozenVec2.UP = FrozenVec2(0.0, 1.0)
FrozenVec2.DOWN = FrozenVec2(0.0, -1.0)
FrozenVec2.LEFT = FrozenVec2(-1.0, 0.0)
FrozenVec2.RIGHT = FrozenVec2(1.0, 0.0)
FrozenVec2.UNIT_X = FrozenVec2(1.0, 0.0)
FrozenVec2.UNIT_Y = FrozenVec2(0.0, 1.0)
FrozenVec2.NEG_ONE = FrozenVec2(-1.0, -1.0)
