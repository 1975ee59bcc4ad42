"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from utilicurve.core.curves.models import ResponseCurve
from utilicurve.core.curves.shapes import CurveShape


@pytest.fixture
def linear_identity() -> ResponseCurve:
    """Linear curve with identity parameters."""
    return ResponseCurve(shape=CurveShape.LINEAR)


@pytest.fixture
def undefined_sine() -> ResponseCurve:
    """Sine curve whose base (x + xi) is negative with a fractional exponent at x=0.5."""
    return ResponseCurve(shape=CurveShape.SINE, x_intercept=-1.0, exponent=1.5)


@pytest.fixture
def logit_curve() -> ResponseCurve:
    """Logit curve with both mirror flags set."""
    return ResponseCurve(
        shape=CurveShape.LOGIT,
        x_intercept=-0.15,
        y_intercept=-0.25,
        slope=0.3,
        exponent=2.3,
        flip_x=True,
        flip_y=True,
    )
