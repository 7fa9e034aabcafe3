"""Capability protocols.

Each protocol names one narrow capability so generic code can ask for only
what it uses. ``Float`` bundles all of them with the arithmetic and
comparison operators; a function bound on ``Float`` can use any of it.

The protocols are structural: ``Float32`` and ``Float64`` satisfy them
without inheriting from them, and so does any other class that provides
the same methods.

    >>> from genfloat import Float32
    >>> from genfloat.capabilities import Float, Sqrt
    >>> isinstance(Float32(2.0), Sqrt)
    True
    >>> isinstance(Float32(2.0), Float)
    True
"""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Min(Protocol):
    def min(self: T, other: T) -> T:
        """Return the lesser of self and other."""
        ...


@runtime_checkable
class Max(Protocol):
    def max(self: T, other: T) -> T:
        """Return the greater of self and other."""
        ...


@runtime_checkable
class Signum(Protocol):
    def signum(self: T) -> T:
        """Return a number representing the sign of self."""
        ...


@runtime_checkable
class Powf(Protocol):
    def powf(self: T, other: T) -> T:
        """Return self raised to the floating-point power other."""
        ...


@runtime_checkable
class Sqrt(Protocol):
    def sqrt(self: T) -> T: ...


@runtime_checkable
class Trig(Protocol):
    """Basic trigonometry functions."""

    def sin(self: T) -> T: ...

    def cos(self: T) -> T: ...

    def tan(self: T) -> T: ...

    def asin(self: T) -> T: ...

    def acos(self: T) -> T: ...

    def atan(self: T) -> T: ...

    def atan2(self: T, other: T) -> T:
        """Four quadrant arctangent of self (y) and other (x)."""
        ...

    def sinh(self: T) -> T: ...

    def cosh(self: T) -> T: ...

    def tanh(self: T) -> T: ...

    def asinh(self: T) -> T: ...

    def acosh(self: T) -> T: ...

    def atanh(self: T) -> T: ...


@runtime_checkable
class Radians(Protocol):
    """Turn constants in radians and degree conversion."""

    @classmethod
    def quarter_turn(cls: type[T]) -> T:
        """Radians corresponding to 90 degrees."""
        ...

    @classmethod
    def half_turn(cls: type[T]) -> T:
        """Radians corresponding to 180 degrees."""
        ...

    @classmethod
    def full_turn(cls: type[T]) -> T:
        """Radians corresponding to 360 degrees."""
        ...

    def deg_to_rad(self: T) -> T:
        """Equivalent to ``self * (pi / 180)``."""
        ...

    def rad_to_deg(self: T) -> T:
        """Equivalent to ``self * (180 / pi)``."""
        ...


@runtime_checkable
class One(Protocol):
    @classmethod
    def one(cls: type[T]) -> T: ...


@runtime_checkable
class Zero(Protocol):
    @classmethod
    def zero(cls: type[T]) -> T: ...


@runtime_checkable
class FromPrimitive(Protocol):
    """Construction from other numeric primitives."""

    @classmethod
    def from_f64(cls: type[T], t: float) -> T: ...

    @classmethod
    def from_f32(cls: type[T], t: float) -> T: ...

    @classmethod
    def from_isize(cls: type[T], t: int) -> T: ...

    @classmethod
    def from_u32(cls: type[T], t: int) -> T: ...

    @classmethod
    def from_i32(cls: type[T], t: int) -> T: ...


@runtime_checkable
class Cast(Protocol):
    def cast(self, target):
        """Convert into the width (or value class) ``target``."""
        ...


@runtime_checkable
class Float(
    Radians,
    One,
    Zero,
    Sqrt,
    FromPrimitive,
    Min,
    Max,
    Signum,
    Powf,
    Trig,
    Cast,
    Protocol,
):
    """Convenience protocol for floats: every capability plus operators."""

    def __eq__(self, other: object) -> bool: ...

    def __ne__(self, other: object) -> bool: ...

    def __lt__(self: T, other: T) -> bool: ...

    def __le__(self: T, other: T) -> bool: ...

    def __gt__(self: T, other: T) -> bool: ...

    def __ge__(self: T, other: T) -> bool: ...

    def __add__(self: T, other: T) -> T: ...

    def __iadd__(self: T, other: T) -> T: ...

    def __sub__(self: T, other: T) -> T: ...

    def __isub__(self: T, other: T) -> T: ...

    def __mul__(self: T, other: T) -> T: ...

    def __imul__(self: T, other: T) -> T: ...

    def __truediv__(self: T, other: T) -> T: ...

    def __itruediv__(self: T, other: T) -> T: ...

    def __mod__(self: T, other: T) -> T: ...

    def __imod__(self: T, other: T) -> T: ...

    def __neg__(self: T) -> T: ...


FloatT = TypeVar("FloatT", bound=Float)
