from typing import ClassVar, Iterator, TypeVar

from vectorkernel.numeric import NumericKind

V = TypeVar("V", bound="Vec2Base")


class constant:
    """Class-level named vector.

    Every access builds a fresh instance of the owning class, so callers can
    mutate what they get without touching anybody else's ZERO.
    """

    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, obj, owner):
        return owner(self.x, self.y)


class Vec2Base:
    """Mutable 2-component vector over one NumericKind.

    Pure operations (past participle: ``added``, ``scaled``...) return a new
    vector. Mutating operations (imperative: ``add``, ``scale``...) change
    the receiver and return it for chaining. Every stored component goes
    through ``kind.coerce``.
    """

    __slots__ = ("x", "y")

    kind: ClassVar[NumericKind]

    def __init__(self, x=0, y=0):
        c = self.kind.coerce
        self.x = c(x)
        self.y = c(y)

    def _bounds(self, lo, hi):
        c = self.kind.coerce
        lo, hi = c(lo), c(hi)
        if lo > hi:
            raise ValueError(f"clamp bounds are inverted: min={lo} > max={hi}")
        return lo, hi

    def clone(self:V) -> V:
        return type(self)(self.x, self.y)

    # ---- pure ----

    def added(self:V, o:V) -> V:
        with self.kind.quiet():
            return type(self)(self.x + o.x, self.y + o.y)

    def subbed(self:V, o:V) -> V:
        with self.kind.quiet():
            return type(self)(self.x - o.x, self.y - o.y)

    def scaled(self:V, s) -> V:
        s = self.kind.coerce(s)
        with self.kind.quiet():
            return type(self)(self.x * s, self.y * s)

    def negated(self:V) -> V:
        return type(self)(-self.x, -self.y)

    def absed(self:V) -> V:
        return type(self)(abs(self.x), abs(self.y))

    def clamped(self:V, lo, hi) -> V:
        lo, hi = self._bounds(lo, hi)
        return type(self)(max(lo, min(hi, self.x)), max(lo, min(hi, self.y)))

    # ---- mutating ----

    def set(self:V, x, y) -> V:
        c = self.kind.coerce
        self.x = c(x)
        self.y = c(y)
        return self

    def set_from(self:V, o:V) -> V:
        return self.set(o.x, o.y)

    def reset(self:V) -> V:
        return self.set(0, 0)

    def add(self:V, o:V) -> V:
        with self.kind.quiet():
            return self.set(self.x + o.x, self.y + o.y)

    def sub(self:V, o:V) -> V:
        with self.kind.quiet():
            return self.set(self.x - o.x, self.y - o.y)

    def scale(self:V, s) -> V:
        s = self.kind.coerce(s)
        with self.kind.quiet():
            return self.set(self.x * s, self.y * s)

    def negate(self:V) -> V:
        return self.set(-self.x, -self.y)

    def abs(self:V) -> V:
        return self.set(abs(self.x), abs(self.y))

    def clamp(self:V, lo, hi) -> V:
        lo, hi = self._bounds(lo, hi)
        return self.set(max(lo, min(hi, self.x)), max(lo, min(hi, self.y)))

    # ---- scalar ----

    def dot(self, o):
        with self.kind.quiet():
            return self.x * o.x + self.y * o.y

    def length_squared(self):
        with self.kind.quiet():
            return self.x * self.x + self.y * self.y

    def length(self):
        return self.kind.sqrt(self.length_squared())

    def distance_squared(self, o):
        with self.kind.quiet():
            dx = o.x - self.x
            dy = o.y - self.y
            return dx * dx + dy * dy

    def distance(self, o):
        return self.kind.sqrt(self.distance_squared(o))

    # ---- protocol ----

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator:
        yield self.x
        yield self.y

    def __add__(self, o):
        return self.added(o)

    def __sub__(self, o):
        return self.subbed(o)

    def __mul__(self, s):
        return self.scaled(s)

    __rmul__ = __mul__

    def __neg__(self):
        return self.negated()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y})"
