"""Conversions between the four vector representations.

Every conversion builds a new vector and none of them raise for a supported
input. Precision loss is silent:

* float/double -> int truncates toward zero (NaN -> 0, out-of-range values
  saturate to the int32 limits),
* double -> float rounds to the nearest float32 (overflow -> infinity),
* int -> float/double and float -> double widen exactly (int -> float is
  exact only up to 2**24).

An unsupported source type raises TypeError.
"""
from functools import singledispatch

from vectorkernel.frozen import FrozenVec2
from vectorkernel.numeric import narrow_f32, trunc_i32
from vectorkernel.vec2d import Vec2D
from vectorkernel.vec2f import Vec2F
from vectorkernel.vec2i import Vec2I


def _unsupported(v, target:str):
    raise TypeError(f"Cannot convert {type(v).__name__} to {target}")


@singledispatch
def to_int(v) -> Vec2I:
    _unsupported(v, "Vec2I")

@to_int.register
def _(v:Vec2I) -> Vec2I:
    return v.clone()

@to_int.register(Vec2F)
@to_int.register(Vec2D)
@to_int.register(FrozenVec2)
def _(v) -> Vec2I:
    return Vec2I(trunc_i32(v.x), trunc_i32(v.y))


@singledispatch
def to_float(v) -> Vec2F:
    _unsupported(v, "Vec2F")

@to_float.register
def _(v:Vec2F) -> Vec2F:
    return v.clone()

@to_float.register(Vec2I)
@to_float.register(Vec2D)
@to_float.register(FrozenVec2)
def _(v) -> Vec2F:
    return Vec2F(narrow_f32(v.x), narrow_f32(v.y))


@singledispatch
def to_double(v) -> Vec2D:
    _unsupported(v, "Vec2D")

@to_double.register(Vec2I)
@to_double.register(Vec2F)
@to_double.register(Vec2D)
@to_double.register(FrozenVec2)
def _(v) -> Vec2D:
    return Vec2D(float(v.x), float(v.y))


@singledispatch
def to_frozen(v) -> FrozenVec2:
    _unsupported(v, "FrozenVec2")

@to_frozen.register
def _(v:FrozenVec2) -> FrozenVec2:
    return v

@to_frozen.register(Vec2I)
@to_frozen.register(Vec2F)
@to_frozen.register(Vec2D)
def _(v) -> FrozenVec2:
    return FrozenVec2(float(v.x), float(v.y))
