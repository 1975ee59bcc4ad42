"""Math utilities for common operations."""

from __future__ import annotations

import numpy as np


def clamp01(value: float | np.ndarray) -> np.ndarray:
    """Clamp value(s) to the closed range [0, 1].

    Infinities clamp to the nearest bound. NaN maps to 0.0 so the result is
    always inside the range.

    Args:
        value: Scalar or array to clamp

    Returns:
        float64 array (0-d for scalar input) with every element in [0, 1]
    """
    clipped = np.clip(np.asarray(value, dtype=np.float64), 0.0, 1.0)
    return np.where(np.isnan(clipped), 0.0, clipped)
