"""Float width descriptors.

A ``Width`` plays the role arpfloat's ``Semantics`` plays there: it names a
floating-point format. Here the formats are fixed to the two native widths
numpy exposes as scalar types, and each width is bound to the value class
that implements the capabilities for it.
"""

import logging

import numpy as np

from .errors import UnsupportedWidthError

logger = logging.getLogger(__name__)


class Width:
    """A native floating-point width backed by a numpy scalar type."""

    __slots__ = ("_name", "_native", "_finfo")

    def __init__(self, name, native):
        self._name = name
        self._native = np.dtype(native).type
        self._finfo = np.finfo(self._native)

    @property
    def name(self) -> str:
        return self._name

    @property
    def native(self) -> type:
        """The numpy scalar type, e.g. ``numpy.float32``."""
        return self._native

    @property
    def bits(self) -> int:
        return self._finfo.bits

    @property
    def precision(self) -> int:
        """Significand bits, counting the implicit leading bit."""
        return self._finfo.nmant + 1

    @property
    def exponent(self) -> int:
        return self._finfo.nexp

    @property
    def epsilon(self):
        return self._finfo.eps

    @property
    def max(self):
        return self._finfo.max

    @property
    def min(self):
        return self._finfo.min

    @property
    def pi(self):
        return self._native(np.pi)

    @property
    def type(self):
        """The value class registered for this width."""
        try:
            return _types[self]
        except KeyError:
            raise UnsupportedWidthError(self) from None

    def native_value(self, x):
        """Convert ``x`` to this width's scalar using numpy casting rules.

        Narrowing rounds to nearest and overflows to +-Inf without a warning.
        """
        with np.errstate(all="ignore"):
            return self._native(x)

    def wrap(self, x):
        return self.type(x)

    def __repr__(self):
        return "Width { bits: %d, precision: %d }" % (self.bits, self.precision)

    def __str__(self):
        return self._name

    def __reduce__(self):
        return (width_of, (self._native,))


FP32 = Width("float32", np.float32)  # Single precision
FP64 = Width("float64", np.float64)  # Double precision

_by_native = {FP32.native: FP32, FP64.native: FP64}
_types = {}


def register(width, cls):
    """Bind the value class ``cls`` to ``width``."""
    existing = _types.get(width)
    if existing is not None and existing is not cls:
        raise ValueError(
            "width %s is already implemented by %s" % (width, existing.__name__)
        )
    _types[width] = cls
    logger.debug("Registered %s for width %s", cls.__name__, width)


def widths():
    """Registered widths, narrow to wide."""
    return sorted(_types, key=lambda w: w.bits)


def width_of(obj):
    """Resolve ``obj`` to a ``Width``.

    Accepts a width, a value class or value, a numpy dtype or scalar type,
    a numpy scalar, or a Python float (which is double precision).
    """
    if isinstance(obj, Width):
        return obj
    width = getattr(obj, "width", None)
    if isinstance(width, Width):
        return width
    if isinstance(obj, float):
        return FP64
    if isinstance(obj, np.generic):
        obj = type(obj)
    if obj is not None and not isinstance(obj, (int, str)):
        try:
            native = np.dtype(obj).type
        except TypeError:
            native = None
        if native in _by_native:
            return _by_native[native]
    logger.debug("Cannot resolve %r to a float width", obj)
    raise UnsupportedWidthError(obj)
