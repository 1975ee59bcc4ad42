"""Shared utilities for utilicurve."""

from utilicurve.core.utils.math import clamp01

__all__ = [
    "clamp01",
]
