"""
Shared fixtures and hypothesis configuration for the genfloat tests.
"""

import os

import pytest
from hypothesis import HealthCheck, settings
from hypothesis import strategies as st

from genfloat import Float32, Float64

settings.register_profile(
    "default",
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile("ci", max_examples=1000, deadline=None)
settings.register_profile("dev", max_examples=25, deadline=None)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


@pytest.fixture(scope="session", params=[Float32, Float64], ids=["f32", "f64"])
def cls(request):
    """Each value class in turn."""
    return request.param


@pytest.fixture(scope="session")
def width(cls):
    return cls.width


def finite_floats(width, **kwargs):
    """Finite floats exactly representable at ``width``."""
    return st.floats(
        width=width.bits, allow_nan=False, allow_infinity=False, **kwargs
    )
