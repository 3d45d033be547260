import numpy as np

from vectorkernel.base import Vec2Base, constant
from vectorkernel.numeric import FLOAT32


class Vec2F(Vec2Base):
    """Single precision vector for tight loops.

    Components are ``numpy.float32`` and all arithmetic stays in float32.
    """

    __slots__ = ()

    kind = FLOAT32

    ZERO = constant(0.0, 0.0)
    ONE = constant(1.0, 1.0)
    UP = constant(0.0, 1.0)
    DOWN = constant(0.0, -1.0)
    LEFT = constant(-1.0, 0.0)
    RIGHT = constant(1.0, 0.0)

    def lerped(self, target:"Vec2F", t) -> "Vec2F":
        """Interpolate toward target as ``a + (b - a) * t``.

        ``t`` is narrowed to float32 first; a t that narrows to 1 returns
        the target exactly.
        """
        t = np.float32(t)
        if t == 1:
            return target.clone()
        with self.kind.quiet():
            return Vec2F(
                self.x + (target.x - self.x) * t,
                self.y + (target.y - self.y) * t,
            )

    def lerp(self, target:"Vec2F", t) -> "Vec2F":
        t = np.float32(t)
        if t == 1:
            return self.set_from(target)
        with self.kind.quiet():
            return self.set(
                self.x + (target.x - self.x) * t,
                self.y + (target.y - self.y) * t,
            )

    def normalize(self) -> "Vec2F":
        # A zero vector stays as it is instead of dividing by zero.
        n = self.length()
        if n == 0:
            return self
        with self.kind.quiet():
            return self.set(self.x / n, self.y / n)

    def normalized(self) -> "Vec2F":
        n = self.length()
        if n == 0:
            return Vec2F()
        with self.kind.quiet():
            return Vec2F(self.x / n, self.y / n)

    def to_double(self):
        from vectorkernel import convert
        return convert.to_double(self)

    def to_int(self):
        from vectorkernel import convert
        return convert.to_int(self)

    def to_frozen(self):
        from vectorkernel import convert
        return convert.to_frozen(self)
