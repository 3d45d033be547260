from __future__ import annotations

import math

import numpy as np
import pytest

from vectorkernel import vecmath
from vectorkernel.numeric import (
    INT32_MAX,
    INT32_MIN,
    narrow_f32,
    double_key,
    round_half_up,
    same_double,
    signum,
    trunc_i32,
    wrap_i32,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, 0),
        (INT32_MAX, INT32_MAX),
        (INT32_MAX + 1, INT32_MIN),
        (INT32_MIN - 1, INT32_MAX),
        (1 << 32, 0),
        (np.int64(-5), -5),
    ],
)
def test_wrap_i32_is_twos_complement(value, expected) -> None:
    assert wrap_i32(value) == expected


def test_wrap_i32_rejects_floats() -> None:
    with pytest.raises(TypeError):
        wrap_i32(1.5)


@pytest.mark.parametrize(
    "value, expected",
    [
        (2.9, 2),
        (-2.9, -2),
        (-0.5, 0),
        (float("nan"), 0),
        (1e20, INT32_MAX),
        (float("-inf"), INT32_MIN),
    ],
)
def test_trunc_i32_truncates_toward_zero_and_saturates(value, expected) -> None:
    assert trunc_i32(value) == expected


def test_narrow_f32_overflows_to_infinity_silently() -> None:
    assert math.isinf(narrow_f32(1e300))
    assert narrow_f32(0.1) == np.float32(0.1)


@pytest.mark.parametrize(
    "value, expected",
    [
        (2.5, 3.0),
        (-2.5, -2.0),
        (-0.2, 0.0),
        (1.49, 1.0),
        # 0.49999999999999994 + 0.5 rounds up to 1.0 in binary64; the
        # nearest integer is still 0.
        (0.49999999999999994, 0.0),
        (2.0**53 + 2, 2.0**53 + 2),
    ],
)
def test_round_half_up(value, expected) -> None:
    assert round_half_up(value) == expected


def test_signum_keeps_signed_zero_and_nan() -> None:
    assert signum(-3.5) == -1.0
    assert signum(7.0) == 1.0
    assert math.copysign(1.0, signum(-0.0)) == -1.0
    assert math.isnan(signum(float("nan")))


def test_vecmath_component_helpers() -> None:
    assert vecmath.dot(1, 2, 3, 4) == 11
    assert vecmath.length(3, 4) == 5.0
    assert vecmath.length_squared(3, 4) == 25
    assert vecmath.distance(1, 1, 4, 5) == 5.0
    assert vecmath.distance_squared(1, 1, 4, 5) == 25
    assert vecmath.clamp(5.0, 0.0, 2.0) == 2.0
    assert vecmath.clamp(-5.0, 0.0, 2.0) == 0.0


def test_vecmath_clamp_rejects_inverted_bounds() -> None:
    with pytest.raises(ValueError):
        vecmath.clamp(1.0, 2.0, 0.0)


def test_lerp_endpoints_are_exact() -> None:
    a, b = 1e20, 0.1
    assert vecmath.lerp(a, b, 0.0) == a
    assert vecmath.lerp(a, b, 1.0) == b
    assert vecmath.lerp(2.0, 4.0, 0.5) == 3.0


@pytest.mark.parametrize("t, expected", [(-1.0, 0.0), (0.0, 0.0), (0.25, 0.25), (1.0, 1.0), (3.0, 1.0)])
def test_clamp01(t, expected) -> None:
    assert vecmath.clamp01(t) == expected


def test_smooth_step_is_cubic_hermite() -> None:
    assert vecmath.smooth_step(-2.0) == 0.0
    assert vecmath.smooth_step(0.5) == 0.5
    assert vecmath.smooth_step(2.0) == 1.0
    t = 0.25
    assert vecmath.smooth_step(t) == pytest.approx(3 * t**2 - 2 * t**3)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (1.5, 1.5, True),
        (0.0, -0.0, False),
        (math.nan, math.nan, True),
        (math.nan, 1.0, False),
        (math.inf, math.inf, True),
    ],
)
def test_same_double(a, b, expected) -> None:
    assert same_double(a, b) is expected
    assert (double_key(a) == double_key(b)) is expected
