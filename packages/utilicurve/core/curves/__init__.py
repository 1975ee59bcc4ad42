"""Response curves and their text encoding."""

from utilicurve.core.curves.codec import (
    CurveField,
    CurveParseError,
    ParseError,
    ParseErrorKind,
    ParseResult,
    format_curve,
    parse_curve,
)
from utilicurve.core.curves.models import CurvePoint, ResponseCurve
from utilicurve.core.curves.sampling import sample_curve, sample_grid
from utilicurve.core.curves.shapes import CurveShape

__all__ = [
    "CurveField",
    "CurveParseError",
    "CurvePoint",
    "CurveShape",
    "ParseError",
    "ParseErrorKind",
    "ParseResult",
    "ResponseCurve",
    "format_curve",
    "parse_curve",
    "sample_curve",
    "sample_grid",
]
