"""Free functions over the capability protocols.

Each function is bound on the narrowest protocol it needs, so generic
helpers can be written against, say, ``Sqrt`` alone:

    >>> from genfloat import FP32, Float32, ops
    >>> ops.sqrt(Float32(4.0))
    Float32(2.0)
    >>> ops.zero(FP32)
    Float32(0.0)

Width-level constructors take a ``Width`` or a value class as their first
argument, in the style of ``pi(FP32)``.
"""

from typing import TypeVar

from ._width import width_of
from .capabilities import (
    Cast,
    Max,
    Min,
    Powf,
    Radians,
    Signum,
    Sqrt,
    Trig,
)

MinT = TypeVar("MinT", bound=Min)
MaxT = TypeVar("MaxT", bound=Max)
SignumT = TypeVar("SignumT", bound=Signum)
PowfT = TypeVar("PowfT", bound=Powf)
SqrtT = TypeVar("SqrtT", bound=Sqrt)
TrigT = TypeVar("TrigT", bound=Trig)
RadiansT = TypeVar("RadiansT", bound=Radians)

__all__ = [
    "min",
    "max",
    "signum",
    "powf",
    "sqrt",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "atan2",
    "sinh",
    "cosh",
    "tanh",
    "asinh",
    "acosh",
    "atanh",
    "deg_to_rad",
    "rad_to_deg",
    "cast",
    "zero",
    "one",
    "pi",
    "quarter_turn",
    "half_turn",
    "full_turn",
    "from_f64",
    "from_f32",
    "from_isize",
    "from_u32",
    "from_i32",
]


def min(a: MinT, b: MinT) -> MinT:
    return a.min(b)


def max(a: MaxT, b: MaxT) -> MaxT:
    return a.max(b)


def signum(a: SignumT) -> SignumT:
    return a.signum()


def powf(a: PowfT, b: PowfT) -> PowfT:
    return a.powf(b)


def sqrt(a: SqrtT) -> SqrtT:
    return a.sqrt()


def sin(a: TrigT) -> TrigT:
    return a.sin()


def cos(a: TrigT) -> TrigT:
    return a.cos()


def tan(a: TrigT) -> TrigT:
    return a.tan()


def asin(a: TrigT) -> TrigT:
    return a.asin()


def acos(a: TrigT) -> TrigT:
    return a.acos()


def atan(a: TrigT) -> TrigT:
    return a.atan()


def atan2(y: TrigT, x: TrigT) -> TrigT:
    """Four quadrant arctangent of y and x."""
    return y.atan2(x)


def sinh(a: TrigT) -> TrigT:
    return a.sinh()


def cosh(a: TrigT) -> TrigT:
    return a.cosh()


def tanh(a: TrigT) -> TrigT:
    return a.tanh()


def asinh(a: TrigT) -> TrigT:
    return a.asinh()


def acosh(a: TrigT) -> TrigT:
    return a.acosh()


def atanh(a: TrigT) -> TrigT:
    return a.atanh()


def deg_to_rad(a: RadiansT) -> RadiansT:
    return a.deg_to_rad()


def rad_to_deg(a: RadiansT) -> RadiansT:
    return a.rad_to_deg()


def cast(a: Cast, target):
    """Convert ``a`` into the width (or value class) ``target``."""
    return a.cast(target)


def _type(target):
    return width_of(target).type


def zero(target):
    return _type(target).zero()


def one(target):
    return _type(target).one()


def quarter_turn(target):
    return _type(target).quarter_turn()


def half_turn(target):
    return _type(target).half_turn()


def full_turn(target):
    return _type(target).full_turn()


def pi(target):
    """The width's pi; the same value as ``half_turn``."""
    return half_turn(target)


def from_f64(target, t):
    return _type(target).from_f64(t)


def from_f32(target, t):
    return _type(target).from_f32(t)


def from_isize(target, t):
    return _type(target).from_isize(t)


def from_u32(target, t):
    return _type(target).from_u32(t)


def from_i32(target, t):
    return _type(target).from_i32(t)
