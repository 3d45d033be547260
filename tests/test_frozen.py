from __future__ import annotations

import dataclasses
import math

import pytest

from vectorkernel import FrozenVec2, Vec2D, Vec2F, Vec2I


def test_cannot_be_mutated() -> None:
    v = FrozenVec2(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0  # type: ignore[misc]
    assert v == FrozenVec2(1.0, 2.0)


def test_components_are_floats() -> None:
    v = FrozenVec2(1, 2)
    assert type(v.x) is float
    assert type(v.y) is float


def test_equality_and_hash_agree() -> None:
    a = FrozenVec2(1.0, 2.0)
    b = FrozenVec2(1, 2)
    assert a == b
    assert hash(a) == hash(b)
    assert {a: "seen"}[b] == "seen"
    assert len({a, b, FrozenVec2(2.0, 1.0)}) == 2


def test_equality_is_bit_exact() -> None:
    assert FrozenVec2(0.0, 0.0) != FrozenVec2(-0.0, 0.0)
    assert FrozenVec2(1.0, -0.0) != FrozenVec2(1.0, 0.0)
    assert FrozenVec2(math.nan, 1.0) == FrozenVec2(math.nan, 1.0)
    assert FrozenVec2(math.nan, 1.0) != FrozenVec2(1.0, 1.0)


def test_double_negation_round_trips_nan_and_signed_zero() -> None:
    for v in (FrozenVec2(math.nan, 1.0), FrozenVec2(-0.0, 5.0), FrozenVec2(0.1, -0.2)):
        assert v.negated().negated() == v


def test_hash_agrees_with_bit_exact_equality() -> None:
    a = FrozenVec2(math.nan, -0.0)
    b = FrozenVec2(float("nan"), -0.0)
    assert a == b
    assert hash(a) == hash(b)
    assert {a: "seen"}[b] == "seen"
    assert len({FrozenVec2(0.0, 0.0), FrozenVec2(-0.0, 0.0)}) == 2


def test_operations_return_new_instances() -> None:
    v = FrozenVec2(3.0, -4.0)
    w = FrozenVec2(1.0, 1.0)
    assert v.added(w) == FrozenVec2(4.0, -3.0)
    assert v.subbed(w) == FrozenVec2(2.0, -5.0)
    assert v.scaled(2.0) == FrozenVec2(6.0, -8.0)
    assert v.negated() == FrozenVec2(-3.0, 4.0)
    assert v.absed() == FrozenVec2(3.0, 4.0)
    assert v.clamped(-1.0, 1.0) == FrozenVec2(1.0, -1.0)
    assert v.lerped(w, 0.5) == FrozenVec2(2.0, -1.5)
    assert v == FrozenVec2(3.0, -4.0)

    assert v + w == FrozenVec2(4.0, -3.0)
    assert v - w == FrozenVec2(2.0, -5.0)
    assert 2 * w == FrozenVec2(2.0, 2.0)
    assert -w == FrozenVec2(-1.0, -1.0)


def test_clamped_rejects_inverted_bounds() -> None:
    with pytest.raises(ValueError):
        FrozenVec2(1.0, 1.0).clamped(1.0, 0.0)


def test_lerp_endpoints_are_exact() -> None:
    a = FrozenVec2(1e20, 0.1)
    b = FrozenVec2(1.0, 0.3)
    assert a.lerped(b, 0.0) == a
    assert a.lerped(b, 1.0) == b


def test_scalar_math() -> None:
    v = FrozenVec2(3.0, 4.0)
    assert v.dot(FrozenVec2(1.0, 2.0)) == 11.0
    assert v.length_squared() == 25.0
    assert v.length() == 5.0
    assert v.distance_squared(FrozenVec2(0.0, 0.0)) == 25.0
    assert v.distance(FrozenVec2(0.0, 0.0)) == 5.0


def test_normalized_returns_shared_zero_only_for_exact_zero() -> None:
    assert FrozenVec2(0.0, 0.0).normalized() is FrozenVec2.ZERO

    # Below Vec2D's epsilon but still a direction here.
    tiny = FrozenVec2(2.0**-40, 0.0).normalized()
    assert tiny == FrozenVec2(1.0, 0.0)
    assert Vec2D(2.0**-40, 0.0).normalized() == Vec2D(0.0, 0.0)

    n = FrozenVec2(3.0, 4.0).normalized()
    assert n.length() == pytest.approx(1.0)


def test_constants_are_shared() -> None:
    assert FrozenVec2.ZERO is FrozenVec2.ZERO
    assert FrozenVec2.ONE == FrozenVec2(1.0, 1.0)
    assert FrozenVec2.UP == FrozenVec2(0.0, 1.0)
    assert FrozenVec2.DOWN == FrozenVec2(0.0, -1.0)
    assert FrozenVec2.LEFT == FrozenVec2(-1.0, 0.0)
    assert FrozenVec2.RIGHT == FrozenVec2(1.0, 0.0)
    assert FrozenVec2.UNIT_X == FrozenVec2(1.0, 0.0)
    assert FrozenVec2.UNIT_Y == FrozenVec2(0.0, 1.0)
    assert FrozenVec2.NEG_ONE == FrozenVec2(-1.0, -1.0)


def test_repr() -> None:
    assert repr(FrozenVec2(1.5, -2.0)) == "FrozenVec2(1.5, -2.0)"


def test_conversions_to_mutable_types() -> None:
    v = FrozenVec2(-1.9, 2.5)

    d = v.to_mutable_d()
    assert d == Vec2D(-1.9, 2.5)
    d.add(Vec2D(1.0, 1.0))
    assert v == FrozenVec2(-1.9, 2.5)

    assert v.to_mutable_f() == Vec2F(-1.9, 2.5)
    assert v.to_mutable_i() == Vec2I(-1, 2)
