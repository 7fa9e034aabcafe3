"""
Tests for the free functions and for generic code written against them.
"""

import math

import numpy as np
import pytest

from genfloat import (
    FP32,
    FP64,
    Float,
    Float32,
    Float64,
    UnsupportedWidthError,
    from_f32,
    from_f64,
    from_i32,
    from_isize,
    from_u32,
    one,
    ops,
    pi,
    zero,
)
from genfloat.capabilities import FloatT


def lerp(a: FloatT, b: FloatT, t: FloatT) -> FloatT:
    return a + (b - a) * t


def distance(x0: Float, y0: Float, x1: Float, y1: Float) -> Float:
    dx, dy = x1 - x0, y1 - y0
    return ops.sqrt(dx * dx + dy * dy)


def clamp(x: Float, low: Float, high: Float) -> Float:
    return ops.min(ops.max(x, low), high)


def polar(x: Float, y: Float):
    return distance(type(x).zero(), type(x).zero(), x, y), ops.atan2(y, x).rad_to_deg()


class TestFreeFunctions:
    def test_examples(self, cls) -> None:
        assert ops.min(cls(3.0), cls(5.0)) == 3.0
        assert ops.max(cls(3.0), cls(5.0)) == 5.0
        assert ops.signum(cls(-7.5)) == -1.0
        assert ops.powf(cls(2.0), cls(10.0)) == 1024.0
        assert ops.sqrt(cls(4.0)) == 2.0

    @pytest.mark.parametrize(
        "name",
        ["sin", "cos", "tan", "asin", "acos", "atan", "sinh", "cosh", "tanh", "asinh", "atanh"],
    )
    def test_trig_forwards_to_method(self, cls, name) -> None:
        x = cls(0.25)
        assert getattr(ops, name)(x) == getattr(x, name)()

    def test_acosh_and_atan2(self, cls) -> None:
        assert ops.acosh(cls(2.0)) == cls(2.0).acosh()
        assert ops.atan2(cls(1.0), cls(2.0)) == cls(1.0).atan2(cls(2.0))

    def test_radians(self, cls) -> None:
        assert ops.deg_to_rad(cls(180.0)) == cls(180.0).deg_to_rad()
        assert ops.rad_to_deg(cls(1.0)) == cls(1.0).rad_to_deg()

    def test_cast(self) -> None:
        assert type(ops.cast(Float32(1.0), FP64)) is Float64
        assert type(ops.cast(Float64(1.0), Float32)) is Float32


class TestWidthLevelConstructors:
    @pytest.mark.parametrize("target", [FP32, Float32, np.float32])
    def test_targets(self, target) -> None:
        assert type(zero(target)) is Float32
        assert type(one(target)) is Float32

    def test_constants(self) -> None:
        assert zero(FP64) == 0.0
        assert one(FP64) == 1.0
        assert pi(FP64) == math.pi
        assert pi(FP32) == Float32.half_turn()
        assert ops.quarter_turn(FP64) == math.pi / 2
        assert ops.half_turn(FP32) == Float32.half_turn()
        assert ops.full_turn(FP64) == math.tau

    def test_conversions(self) -> None:
        assert from_f64(FP32, 0.1).value == np.float32(0.1)
        assert float(from_f32(FP64, 0.1)) == float(np.float32(0.1))
        assert from_i32(FP32, -4) == -4.0
        assert from_isize(FP64, 12) == 12.0
        assert from_u32(FP64, 3) == 3.0

    def test_unknown_width(self) -> None:
        with pytest.raises(UnsupportedWidthError):
            zero(np.float16)


class TestGenericConsumers:
    """One implementation, both widths"""

    def test_lerp(self, cls) -> None:
        assert lerp(cls(0.0), cls(10.0), cls(0.25)) == 2.5

    def test_distance(self, cls) -> None:
        d = distance(cls(1.0), cls(1.0), cls(4.0), cls(5.0))
        assert type(d) is cls
        assert d == 5.0

    def test_clamp(self, cls) -> None:
        assert clamp(cls(12.0), cls(0.0), cls(10.0)) == 10.0
        assert clamp(cls(-1.0), cls(0.0), cls(10.0)) == 0.0
        assert clamp(cls(math.nan), cls(0.0), cls(10.0)) == 0.0

    def test_polar(self, cls) -> None:
        r, theta = polar(cls(0.0), cls(2.0))
        assert r == 2.0
        assert abs(float(theta) - 90.0) <= 8 * float(cls.width.epsilon) * 90.0

    def test_widths_agree_within_narrow_precision(self) -> None:
        narrow = distance(Float32(0.1), Float32(0.2), Float32(3.7), Float32(9.1))
        wide = distance(Float64(0.1), Float64(0.2), Float64(3.7), Float64(9.1))
        assert abs(float(narrow) - float(wide)) <= 8 * float(FP32.epsilon) * float(wide)
