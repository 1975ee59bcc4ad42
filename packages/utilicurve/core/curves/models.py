"""Response curve models.

This module defines the curve primitives:
- ResponseCurve: A shape selector plus four scalars and two mirror flags
- CurvePoint: A single normalized sample (x, y) in [0,1] x [0,1]

ResponseCurve is a mutable value. Evaluation re-reads the current field values
on every call and has no side effects, so a curve may be shared between
threads as long as nobody mutates it meanwhile. Use ``model_copy()`` to take
a private snapshot before handing a curve to other threads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from utilicurve.core.curves.functions import raw_value
from utilicurve.core.curves.shapes import CurveShape
from utilicurve.core.utils.math import clamp01

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


class CurvePoint(BaseModel):
    """A single sample of a response curve.

    Both x and y are normalized to [0, 1].
    This model is immutable (frozen=True).

    Example:
        >>> point = CurvePoint(x=0.5, y=0.7)
        >>> point.y
        0.7
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: float = Field(..., ge=0.0, le=1.0, description="Normalized input [0,1]")
    y: float = Field(..., ge=0.0, le=1.0, description="Normalized output [0,1]")


class ResponseCurve(BaseModel):
    """Parameterized response curve mapping [0,1] inputs to [0,1] outputs.

    Attributes:
        shape: Formula used for evaluation.
        x_intercept: Input-axis offset (meaning depends on shape).
        y_intercept: Output-axis offset (meaning depends on shape).
        slope: Scale factor on steepness.
        exponent: Power/rate factor.
        flip_x: Mirror the input (x -> 1 - x) before evaluation.
        flip_y: Mirror the output (y -> 1 - y) before clamping.

    Example:
        >>> curve = ResponseCurve(shape=CurveShape.LINEAR)
        >>> curve.evaluate(0.25)
        0.25
        >>> curve.flip_y = True
        >>> curve.evaluate(0.25)
        0.75
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    shape: CurveShape = Field(default=CurveShape.LINEAR, description="Curve formula")
    x_intercept: float = Field(default=0.0, description="Input-axis offset")
    y_intercept: float = Field(default=0.0, description="Output-axis offset")
    slope: float = Field(default=1.0, description="Scale factor")
    exponent: float = Field(default=1.0, description="Power/rate factor")
    flip_x: bool = Field(default=False, description="Mirror input as 1 - x")
    flip_y: bool = Field(default=False, description="Mirror output as 1 - y")

    @classmethod
    def from_string(cls, text: str | None) -> ResponseCurve:
        """Build a curve from its text encoding.

        Args:
            text: Line such as ``"Quadratic 0.5 0 0.23 1.3 flipx"``.

        Returns:
            Parsed ResponseCurve.

        Raises:
            CurveParseError: If the line is malformed. The structured
                error is available as ``exc.error``.
        """
        from utilicurve.core.curves.codec import parse_curve

        return parse_curve(text).unwrap()

    def to_string(self) -> str:
        """Encode this curve as a text line accepted by ``from_string``."""
        from utilicurve.core.curves.codec import format_curve

        return format_curve(self)

    def evaluate(self, x: float) -> float:
        """Evaluate the curve at x.

        Never raises: inputs outside [0, 1] and numerically undefined
        intermediates still produce a value in [0, 1].

        Args:
            x: Input value, normally in [0, 1].

        Returns:
            Curve output clamped to [0, 1].
        """
        return float(self.evaluate_many(x))

    def evaluate_raw(self, x: float) -> float:
        """Value after the x-flip and the shape formula, before y-flip and clamping.

        May be NaN, infinite, or outside [0, 1].
        """
        return float(self._raw(np.asarray(x, dtype=np.float64)))

    def evaluate_many(self, xs: ArrayLike) -> np.ndarray:
        """Evaluate the curve elementwise.

        Args:
            xs: Input values (scalar, sequence, or array).

        Returns:
            float64 array of outputs in [0, 1], same shape as ``xs``.
        """
        values = self._raw(np.asarray(xs, dtype=np.float64))
        if self.flip_y:
            with np.errstate(all="ignore"):
                values = 1.0 - values
        return clamp01(values)

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def _raw(self, xs: np.ndarray) -> np.ndarray:
        if self.flip_x:
            with np.errstate(all="ignore"):
                xs = 1.0 - xs
        return raw_value(
            self.shape,
            xs,
            self.x_intercept,
            self.y_intercept,
            self.slope,
            self.exponent,
        )
