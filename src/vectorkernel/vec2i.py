from vectorkernel.base import Vec2Base, constant
from vectorkernel.numeric import INT32


class Vec2I(Vec2Base):
    """Exact integer vector.

    Components are int32 and wrap on overflow. ``dot``, ``length_squared``
    and ``distance_squared`` are computed exactly and are not wrapped;
    ``length`` and ``distance`` are floats. Scalars must be integral, a
    float scalar raises TypeError.
    """

    __slots__ = ()

    kind = INT32

    ZERO = constant(0, 0)
    ONE = constant(1, 1)
    UP = constant(0, 1)
    DOWN = constant(0, -1)
    LEFT = constant(-1, 0)
    RIGHT = constant(1, 0)

    def to_float(self):
        from vectorkernel import convert
        return convert.to_float(self)

    def to_double(self):
        from vectorkernel import convert
        return convert.to_double(self)

    def to_frozen(self):
        from vectorkernel import convert
        return convert.to_frozen(self)
