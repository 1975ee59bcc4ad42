"""Curve sampling infrastructure.

This module provides functions for sampling response curves at evenly
spaced inputs across the normalized domain.
"""

from __future__ import annotations

import numpy as np

from utilicurve.core.curves.models import CurvePoint, ResponseCurve


def sample_grid(n: int) -> np.ndarray:
    """Generate N evenly-spaced inputs covering [0, 1] inclusive.

    Args:
        n: Number of samples to generate. Must be >= 2.

    Returns:
        float64 array [0.0, 1/(N-1), ..., 1.0].

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_grid(5).tolist()
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return np.linspace(0.0, 1.0, n)


def sample_curve(curve: ResponseCurve, n_samples: int) -> list[CurvePoint]:
    """Sample a curve at evenly-spaced inputs.

    Args:
        curve: Curve to sample.
        n_samples: Number of samples (must be >= 2).

    Returns:
        List of CurvePoints ordered by x.

    Raises:
        ValueError: If n_samples < 2.
    """
    xs = sample_grid(n_samples)
    ys = curve.evaluate_many(xs)
    return [CurvePoint(x=float(x), y=float(y)) for x, y in zip(xs, ys, strict=True)]
