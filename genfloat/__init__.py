#!/usr/bin/env python3
"""
genfloat: Generic Floats for Numeric Code

This library puts single- and double-precision floats behind one set of
capabilities (arithmetic, trigonometry, radians, min/max, sign, power,
square root, primitive conversion and casting) so geometry or game math
can be written once and run at either width. Every operation forwards to
numpy on the width's native scalar type; NaN and Inf follow IEEE 754 and
are never turned into exceptions.

Examples:
    >>> from genfloat import Float, Float32, Float64, FP32, FP64, pi
    >>> x = Float32(2.5)
    >>> x + 1.5
    Float32(4.0)

    >>> Float64(4.0).sqrt()
    Float64(2.0)

    >>> Float64.from_f64(0.1).cast(FP32)
    Float32(0.10000000149011612)

    >>> FP32
    Width { bits: 32, precision: 24 }
    >>> pi(FP32)
    Float32(3.1415927410125732)

Generic code depends on the ``Float`` protocol, or on one narrow capability:

    >>> def hypot(x: Float, y: Float) -> Float:
    ...     return (x * x + y * y).sqrt()
    >>> hypot(Float32(3), Float32(4))
    Float32(5.0)

Constants:
    FP32, FP64: Single and double precision widths
    Float32, Float64: Value classes for each width
    Float: The umbrella capability protocol
    zero, one, pi: Width-level constants
    from_f64, from_f32, from_isize, from_u32, from_i32: Width-level constructors
"""

import logging

from ._width import FP32, FP64, Width, width_of, widths
from ._float import Float32, Float64, NativeFloat
from .capabilities import (
    Cast,
    Float,
    FromPrimitive,
    Max,
    Min,
    One,
    Powf,
    Radians,
    Signum,
    Sqrt,
    Trig,
    Zero,
)
from .errors import UnsupportedWidthError
from . import ops
from .ops import (
    zero,
    one,
    pi,
    from_f64,
    from_f32,
    from_isize,
    from_u32,
    from_i32,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def wrap(x):
    """Wrap a numpy scalar or Python float in the value class of its width."""
    return width_of(x).wrap(x)


version = "0.1.0"
