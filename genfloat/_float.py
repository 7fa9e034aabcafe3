"""Float values of a fixed native width.

``NativeFloat`` implements every capability once; the concrete classes only
pick the width. All numeric work happens in numpy on the width's scalar
type, so a ``Float32`` is computed in single precision throughout.
"""

import numbers
import operator

import numpy as np

from . import _width
from ._width import FP32, FP64, width_of


def _quiet():
    return np.errstate(all="ignore")


def _unary(ufunc, doc):
    def method(self):
        with _quiet():
            return self._new(ufunc(self._value))

    method.__doc__ = doc
    return method


def _binary(op):
    def method(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        with _quiet():
            return self._new(op(self._value, other))

    return method


def _reflected(op):
    def method(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        with _quiet():
            return self._new(op(other, self._value))

    return method


def _compare(op):
    def method(self, other):
        if isinstance(other, NativeFloat) or type(other) is self.width.native:
            other = self._coerce(other)
            if other is NotImplemented:
                return NotImplemented
            return bool(op(self._value, other))
        if isinstance(other, np.integer):
            other = int(other)
        elif isinstance(other, np.floating):
            other = float(other)
        if isinstance(other, numbers.Real):
            # Exact comparison at the operand's own precision.
            return op(float(self._value), other)
        return NotImplemented

    return method


class NativeFloat:
    """An immutable float of the width given by the class attribute ``width``.

    In arithmetic, operands may be values of the same class, Python numbers
    or numpy integers, which are converted to the width like literals.
    Comparisons with numbers are exact and never narrow the number, so
    ``Float32(0.1) != 0.1``. Values of another width must be converted with
    ``cast`` first.
    """

    __slots__ = ("_value",)

    width = None

    # Keep numpy scalars from treating values as object arrays.
    __array_ufunc__ = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("width") is not None:
            _width.register(cls.width, cls)

    def __init__(self, value=0.0):
        if self.width is None:
            raise TypeError(
                "%s has no width; use Float32 or Float64" % type(self).__name__
            )
        if isinstance(value, NativeFloat):
            if value.width is not self.width:
                raise TypeError(
                    "cannot build %s from %s, use cast()"
                    % (type(self).__name__, type(value).__name__)
                )
            value = value._value
        self._value = self.width.native_value(value)

    @classmethod
    def _new(cls, native):
        obj = object.__new__(cls)
        obj._value = cls.width.native(native)
        return obj

    def _coerce(self, other):
        if isinstance(other, NativeFloat):
            if other.width is self.width:
                return other._value
            return NotImplemented
        if isinstance(other, np.integer) or (
            isinstance(other, numbers.Real) and not isinstance(other, np.generic)
        ):
            return self.width.native_value(other)
        if isinstance(other, np.generic) and type(other) is self.width.native:
            return other
        return NotImplemented

    @property
    def value(self):
        """The underlying numpy scalar."""
        return self._value

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, float(self._value))

    def __str__(self):
        return str(self._value)

    def __float__(self):
        return float(self._value)

    def __int__(self):
        return int(self._value)

    def __bool__(self):
        return bool(self._value)

    def __hash__(self):
        return hash(float(self._value))

    def __reduce__(self):
        return (type(self), (float(self._value),))

    # Comparison

    __eq__ = _compare(operator.eq)
    __ne__ = _compare(operator.ne)
    __lt__ = _compare(operator.lt)
    __le__ = _compare(operator.le)
    __gt__ = _compare(operator.gt)
    __ge__ = _compare(operator.ge)

    # Arithmetic

    __add__ = __iadd__ = _binary(np.add)
    __sub__ = __isub__ = _binary(np.subtract)
    __mul__ = __imul__ = _binary(np.multiply)
    __truediv__ = __itruediv__ = _binary(np.divide)
    __mod__ = __imod__ = _binary(np.remainder)
    __pow__ = _binary(np.power)

    __radd__ = _reflected(np.add)
    __rsub__ = _reflected(np.subtract)
    __rmul__ = _reflected(np.multiply)
    __rtruediv__ = _reflected(np.divide)
    __rmod__ = _reflected(np.remainder)
    __rpow__ = _reflected(np.power)

    __neg__ = _unary(np.negative, None)
    __pos__ = _unary(np.positive, None)
    __abs__ = _unary(np.absolute, None)

    # Min, Max, Signum, Powf, Sqrt

    def min(self, other):
        """Return the lesser of self and other.

        If exactly one of them is NaN the other is returned.
        """
        return self._new(np.fmin(self._value, self._coerce_strict(other)))

    def max(self, other):
        """Return the greater of self and other.

        If exactly one of them is NaN the other is returned.
        """
        return self._new(np.fmax(self._value, self._coerce_strict(other)))

    signum = _unary(
        np.sign,
        """Return 1.0, -1.0, or NaN for NaN.

        Both signed zeros give 0.0, as numpy.sign does. Rust's f64::signum
        and copysign-based ports return +-1.0 for +-0.0 instead.
        """,
    )

    def powf(self, other):
        """Return self raised to the floating-point power other."""
        other = self._coerce_strict(other)
        with _quiet():
            return self._new(np.power(self._value, other))

    sqrt = _unary(np.sqrt, "Return the square root; NaN for negative input.")

    # Trig

    sin = _unary(np.sin, "Return the sine of self.")
    cos = _unary(np.cos, "Return the cosine of self.")
    tan = _unary(np.tan, "Return the tangent of self.")
    asin = _unary(np.arcsin, "Return the inverse sine of self.")
    acos = _unary(np.arccos, "Return the inverse cosine of self.")
    atan = _unary(np.arctan, "Return the inverse tangent of self.")
    sinh = _unary(np.sinh, "Return the hyperbolic sine of self.")
    cosh = _unary(np.cosh, "Return the hyperbolic cosine of self.")
    tanh = _unary(np.tanh, "Return the hyperbolic tangent of self.")
    asinh = _unary(np.arcsinh, "Return the inverse hyperbolic sine of self.")
    acosh = _unary(np.arccosh, "Return the inverse hyperbolic cosine of self.")
    atanh = _unary(np.arctanh, "Return the inverse hyperbolic tangent of self.")

    def atan2(self, other):
        """Return the four quadrant arctangent of self (y) and other (x)."""
        other = self._coerce_strict(other)
        with _quiet():
            return self._new(np.arctan2(self._value, other))

    # Radians

    @classmethod
    def quarter_turn(cls):
        return cls._new(cls.width.pi / 2)

    @classmethod
    def half_turn(cls):
        return cls._new(cls.width.pi)

    @classmethod
    def full_turn(cls):
        return cls._new(cls.width.pi * 2)

    def deg_to_rad(self):
        """Convert degrees to radians, ``self * (pi / 180)``."""
        native = self.width.native
        with _quiet():
            return self._new(self._value * (self.width.pi / native(180)))

    def rad_to_deg(self):
        """Convert radians to degrees, ``self * (180 / pi)``."""
        native = self.width.native
        with _quiet():
            return self._new(self._value * (native(180) / self.width.pi))

    # One, Zero

    @classmethod
    def one(cls):
        return cls._new(1.0)

    @classmethod
    def zero(cls):
        return cls._new(0.0)

    # FromPrimitive

    # The source is first taken as the named primitive, so a Python int
    # outside its range is rejected by numpy with OverflowError.

    @classmethod
    def from_f64(cls, t):
        return cls._from_primitive(np.float64, t)

    @classmethod
    def from_f32(cls, t):
        return cls._from_primitive(np.float32, t)

    @classmethod
    def from_isize(cls, t):
        return cls._from_primitive(np.intp, t)

    @classmethod
    def from_u32(cls, t):
        return cls._from_primitive(np.uint32, t)

    @classmethod
    def from_i32(cls, t):
        return cls._from_primitive(np.int32, t)

    @classmethod
    def _from_primitive(cls, primitive, t):
        with _quiet():
            source = primitive(t)
        return cls(source)

    # Cast

    def cast(self, target):
        """Convert into ``target``, a width or a value class.

        Casting to the own width returns self. Narrowing rounds to nearest
        and overflows to +-Inf.
        """
        width = width_of(target)
        if width is self.width:
            return self
        return width.type(self._value)

    def _coerce_strict(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            raise TypeError(
                "expected %s or a Python number, got %s"
                % (type(self).__name__, type(other).__name__)
            )
        return value


class Float32(NativeFloat):
    """Single-precision float."""

    __slots__ = ()
    width = FP32


class Float64(NativeFloat):
    """Double-precision float."""

    __slots__ = ()
    width = FP64
