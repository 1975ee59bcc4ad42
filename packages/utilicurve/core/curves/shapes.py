"""Response curve shape catalog.

The catalog is closed: every shape listed here has exactly one formula in
``utilicurve.core.curves.functions``. Member values are the exact tokens used
by the text encoding, so lookups are case-sensitive.
"""

from __future__ import annotations

from enum import Enum


class CurveShape(str, Enum):
    """Named formula variants for response curves."""

    CONSTANT = "Constant"
    LINEAR = "Linear"
    QUADRATIC = "Quadratic"
    LOGISTIC = "Logistic"
    LOGIT = "Logit"
    THRESHOLD = "Threshold"
    SINE = "Sine"
    PARABOLIC = "Parabolic"
    NORMAL_DISTRIBUTION = "NormalDistribution"
    BOUNCE = "Bounce"

    @property
    def description(self) -> str:
        """One-line description of the shape."""
        return _DESCRIPTIONS[self]

    @classmethod
    def from_token(cls, token: str) -> CurveShape | None:
        """Look up a shape by its exact encoded name.

        Args:
            token: Shape token as written in a curve line.

        Returns:
            Matching CurveShape, or None when no name matches exactly.

        Example:
            >>> CurveShape.from_token("Logit")
            <CurveShape.LOGIT: 'Logit'>
            >>> CurveShape.from_token("logit") is None
            True
        """
        return _BY_TOKEN.get(token)


_DESCRIPTIONS: dict[CurveShape, str] = {
    CurveShape.CONSTANT: "Fixed value",
    CurveShape.LINEAR: "Standard m(x - c) + b line",
    CurveShape.QUADRATIC: "Power curve",
    CurveShape.LOGISTIC: "Sigmoid",
    CurveShape.LOGIT: "Sigmoid rotated 90 degrees",
    CurveShape.THRESHOLD: "Boolean step",
    CurveShape.SINE: "Sine wave",
    CurveShape.PARABOLIC: "Standard form parabola",
    CurveShape.NORMAL_DISTRIBUTION: "Probability density bell",
    CurveShape.BOUNCE: "Decaying bounce",
}

_BY_TOKEN: dict[str, CurveShape] = {shape.value: shape for shape in CurveShape}
