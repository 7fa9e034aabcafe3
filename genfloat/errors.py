"""Exceptions raised by genfloat.

Numeric operations never raise; floating-point edge cases come back as
NaN or Inf. The only failure is asking for a width that does not exist.
"""


class UnsupportedWidthError(TypeError):
    """An object could not be resolved to a registered float width."""

    def __init__(self, obj):
        self.obj = obj
        super().__init__(
            "no registered float width for %r (supported: float32, float64)" % (obj,)
        )
