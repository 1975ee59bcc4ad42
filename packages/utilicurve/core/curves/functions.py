"""Response curve formulas.

One vectorized formula per CurveShape. Every formula takes the (already
x-flipped) input and the four scalar parameters and returns the raw value,
before the y-flip and before clamping. Inputs may be numpy scalars or arrays.

Formulas (xi=x_intercept, yi=y_intercept, s=slope, k=exponent):
    Constant:           yi
    Linear:             s*(x - xi) + yi
    Quadratic:          s*x*|x + xi|^k + yi
    Logistic:           k*(1 / (1 + |1000*s|^(-x + xi + 0.5))) + yi
    Logit:              -ln(1/|x - xi|^k - 1)*0.05*s + 0.5 + yi
    Threshold:          (1 - yi) if x > xi else -(1 - s)
    Sine:               sin(s*(x + xi)^k)*0.5 + 0.5 + yi
    Parabolic:          (s*(x + xi))^2 + k*(x + xi) + yi
    NormalDistribution: (k/sqrt(2*pi)) * 2^(-(1/(|s|*0.01))*(x - (xi + 0.5))^2) + yi
    Bounce:             |sin(6.28*k*(x + xi + 1)^2)*(1 - x)*s| + yi

Power bases are wrapped in abs() only where listed above. Sine keeps a raw
base, so a negative base with a non-integer exponent yields NaN.
"""

from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np

from utilicurve.core.curves.shapes import CurveShape

ShapeFunction = Callable[
    [np.ndarray, np.float64, np.float64, np.float64, np.float64], np.ndarray
]

_INV_SQRT_TWO_PI = 1.0 / math.sqrt(2.0 * math.pi)


def constant(x, xi, yi, s, k):
    """Constant: yi for every input."""
    return np.full_like(x, yi, dtype=np.float64)


def linear(x, xi, yi, s, k):
    """Linear: s*(x - xi) + yi."""
    return s * (x - xi) + yi


def quadratic(x, xi, yi, s, k):
    """Quadratic: s*x*|x + xi|^k + yi."""
    return s * x * np.power(np.abs(x + xi), k) + yi


def logistic(x, xi, yi, s, k):
    """Logistic: k*(1 / (1 + |1000*s|^(-x + xi + 0.5))) + yi.

    The 0.5 keeps the midpoint centred when xi is 0.
    """
    return k * (1.0 / (1.0 + np.power(np.abs(1000.0 * s), -x + xi + 0.5))) + yi


def logit(x, xi, yi, s, k):
    """Logit: -ln(1/|x - xi|^k - 1)*0.05*s + 0.5 + yi."""
    return -np.log(1.0 / np.power(np.abs(x - xi), k) - 1.0) * 0.05 * s + 0.5 + yi


def threshold(x, xi, yi, s, k):
    """Threshold: (1 - yi) above xi, -(1 - s) at or below it."""
    return np.where(x > xi, 1.0 - yi, -(1.0 - s))


def sine(x, xi, yi, s, k):
    """Sine: sin(s*(x + xi)^k)*0.5 + 0.5 + yi.

    The base (x + xi) is not abs-guarded.
    """
    return np.sin(s * np.power(x + xi, k)) * 0.5 + 0.5 + yi


def parabolic(x, xi, yi, s, k):
    """Parabolic: (s*(x + xi))^2 + k*(x + xi) + yi."""
    shifted = x + xi
    return np.square(s * shifted) + k * shifted + yi


def normal_distribution(x, xi, yi, s, k):
    """NormalDistribution: (k/sqrt(2*pi)) * 2^(-(1/(|s|*0.01))*(x - (xi + 0.5))^2) + yi."""
    spread = 1.0 / (np.abs(s) * 0.01)
    return k * _INV_SQRT_TWO_PI * np.power(2.0, -spread * np.square(x - (xi + 0.5))) + yi


def bounce(x, xi, yi, s, k):
    """Bounce: |sin(6.28*k*(x + xi + 1)^2)*(1 - x)*s| + yi."""
    shifted = x + xi + 1.0
    return np.abs(np.sin((6.28 * k) * shifted * shifted) * (1.0 - x) * s) + yi


SHAPE_FUNCTIONS: dict[CurveShape, ShapeFunction] = {
    CurveShape.CONSTANT: constant,
    CurveShape.LINEAR: linear,
    CurveShape.QUADRATIC: quadratic,
    CurveShape.LOGISTIC: logistic,
    CurveShape.LOGIT: logit,
    CurveShape.THRESHOLD: threshold,
    CurveShape.SINE: sine,
    CurveShape.PARABOLIC: parabolic,
    CurveShape.NORMAL_DISTRIBUTION: normal_distribution,
    CurveShape.BOUNCE: bounce,
}

_missing = [shape.value for shape in CurveShape if shape not in SHAPE_FUNCTIONS]
if _missing:
    raise RuntimeError(f"No formula registered for curve shapes: {', '.join(_missing)}")


def raw_value(
    shape: CurveShape,
    x: float | np.ndarray,
    x_intercept: float,
    y_intercept: float,
    slope: float,
    exponent: float,
) -> np.ndarray:
    """Evaluate a shape formula without flipping or clamping.

    Undefined intermediates (negative bases with fractional exponents, logs
    of non-positive values, division by zero) produce NaN or inf rather than
    raising.

    Args:
        shape: Formula to apply.
        x: Input value or array of values.
        x_intercept: Input-axis offset.
        y_intercept: Output-axis offset.
        slope: Scale factor.
        exponent: Power/rate factor.

    Returns:
        Raw float64 value(s), same shape as ``x``.
    """
    fn = SHAPE_FUNCTIONS[shape]
    with np.errstate(all="ignore"):
        return fn(
            np.asarray(x, dtype=np.float64),
            np.float64(x_intercept),
            np.float64(y_intercept),
            np.float64(slope),
            np.float64(exponent),
        )
