"""Text encoding for response curves.

Line format (tokens separated by ASCII spaces, runs of spaces collapse):
    ``Shape X Y Slope Exponent [flipx] [flipy]``

Examples:
    Linear 0 0 1 1
    Quadratic 0.5 0 0.23 1.3 flipx
    Logit -0.15 -0.25 0.3 2.3 flipx flipy

Shape names are case-sensitive. Flag tokens are case-insensitive, and any
other trailing token is ignored. Parsing never raises for malformed text: it
returns a ParseResult whose ``error`` names what went wrong.
"""

from __future__ import annotations

from enum import Enum
import logging
import math
import re

from pydantic import BaseModel, ConfigDict, Field

from utilicurve.core.curves.models import ResponseCurve
from utilicurve.core.curves.shapes import CurveShape

logger = logging.getLogger(__name__)

MIN_TOKENS = 5
FLIP_X_TOKEN = "flipx"
FLIP_Y_TOKEN = "flipy"

# ASCII digits only.
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ParseErrorKind(str, Enum):
    """Reasons a curve line can be rejected."""

    EMPTY_INPUT = "empty_input"
    INSUFFICIENT_TOKENS = "insufficient_tokens"
    UNKNOWN_SHAPE = "unknown_shape"
    INVALID_FIELD = "invalid_field"


class CurveField(str, Enum):
    """Numeric fields of a curve line, in token order."""

    X = "x"
    Y = "y"
    SLOPE = "slope"
    EXPONENT = "exponent"


class ParseError(BaseModel):
    """Structured description of a rejected curve line.

    Attributes:
        kind: Which check failed.
        field: The numeric field that failed (INVALID_FIELD only).
        token: The offending token, when there is one.
        message: Human-readable summary (not part of the matching contract).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ParseErrorKind
    field: CurveField | None = None
    token: str | None = None
    message: str = ""


class CurveParseError(ValueError):
    """Raised when a parse failure is unwrapped."""

    def __init__(self, error: ParseError) -> None:
        super().__init__(error.message)
        self.error = error


class ParseResult(BaseModel):
    """Outcome of parsing a curve line.

    Exactly one of ``curve`` and ``error`` is set.

    Example:
        >>> result = parse_curve("Linear 0 0 1 1")
        >>> result.success
        True
        >>> parse_curve("Linear 0 0").error.kind
        <ParseErrorKind.INSUFFICIENT_TOKENS: 'insufficient_tokens'>
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    success: bool = Field(description="Whether the line parsed")
    curve: ResponseCurve | None = Field(default=None, description="Parsed curve (if success)")
    error: ParseError | None = Field(default=None, description="Failure details (if not)")

    def unwrap(self) -> ResponseCurve:
        """Return the parsed curve.

        Raises:
            CurveParseError: If parsing failed.
            RuntimeError: If the result carries neither a curve nor an error.
        """
        if self.error is not None:
            raise CurveParseError(self.error)
        if self.curve is None:
            raise RuntimeError("ParseResult has neither curve nor error")
        return self.curve


def success_result(curve: ResponseCurve) -> ParseResult:
    """Create success result."""
    return ParseResult(success=True, curve=curve)


def failure_result(
    kind: ParseErrorKind,
    message: str,
    field: CurveField | None = None,
    token: str | None = None,
) -> ParseResult:
    """Create failure result.

    Args:
        kind: Which check failed
        message: Human-readable summary
        field: Offending numeric field, for INVALID_FIELD
        token: Offending token, if any

    Returns:
        ParseResult with success=False
    """
    error = ParseError(kind=kind, field=field, token=token, message=message)
    logger.debug(
        f"Rejected curve line: {kind.value} ({message})",
        extra={
            "error_kind": kind.value,
            "error_field": field.value if field is not None else None,
            "token": token,
        },
    )
    return ParseResult(success=False, error=error)


def tokenize(text: str) -> list[str]:
    """Split a curve line on ASCII spaces, dropping empty tokens.

    Example:
        >>> tokenize("  Linear  0 0 1 1 ")
        ['Linear', '0', '0', '1', '1']
    """
    return [token for token in text.split(" ") if token]


def parse_float(token: str) -> float | None:
    """Parse a decimal floating-point literal.

    Accepts an optional sign, digits with an optional fraction (or a bare
    fraction such as ``.5``) and an optional exponent. Digits are ASCII
    only. Returns None for anything else, including ``inf``, ``nan``,
    ``1_000`` and fullwidth or Arabic-Indic digits.
    """
    if _FLOAT_RE.fullmatch(token) is None:
        return None
    return float(token)


def parse_curve(text: str | None) -> ParseResult:
    """Parse a curve line.

    Checks run in order and the first failure wins: empty input, fewer
    than five tokens, unknown shape, then X, Y, Slope and Exponent.
    Trailing tokens set ``flip_x``/``flip_y`` when they are ``flipx`` or
    ``flipy`` in any case; anything else is ignored.

    Args:
        text: Curve line, or None.

    Returns:
        ParseResult carrying either the curve or a ParseError.
    """
    if not text:
        return failure_result(ParseErrorKind.EMPTY_INPUT, "curve line is empty")

    tokens = tokenize(text)
    if len(tokens) < MIN_TOKENS:
        return failure_result(
            ParseErrorKind.INSUFFICIENT_TOKENS,
            f"expected at least {MIN_TOKENS} tokens "
            f"(Shape X Y Slope Exponent [flipx] [flipy]), got {len(tokens)}",
        )

    shape = CurveShape.from_token(tokens[0])
    if shape is None:
        return failure_result(
            ParseErrorKind.UNKNOWN_SHAPE,
            f"unknown curve shape {tokens[0]!r}",
            token=tokens[0],
        )

    values: dict[CurveField, float] = {}
    for field, token in zip(CurveField, tokens[1:MIN_TOKENS], strict=True):
        value = parse_float(token)
        if value is None:
            return failure_result(
                ParseErrorKind.INVALID_FIELD,
                f"invalid {field.value} value {token!r}",
                field=field,
                token=token,
            )
        values[field] = value

    flags = {token.lower() for token in tokens[MIN_TOKENS:]}

    return success_result(
        ResponseCurve(
            shape=shape,
            x_intercept=values[CurveField.X],
            y_intercept=values[CurveField.Y],
            slope=values[CurveField.SLOPE],
            exponent=values[CurveField.EXPONENT],
            flip_x=FLIP_X_TOKEN in flags,
            flip_y=FLIP_Y_TOKEN in flags,
        )
    )


def format_curve(curve: ResponseCurve) -> str:
    """Encode a curve as a line that ``parse_curve`` reads back unchanged.

    Floats use their shortest round-trip representation and flags are
    written in lowercase.

    Raises:
        ValueError: If any numeric field is NaN or infinite.

    Example:
        >>> format_curve(ResponseCurve(shape=CurveShape.QUADRATIC, slope=0.23, flip_x=True))
        'Quadratic 0.0 0.0 0.23 1.0 flipx'
    """
    numbers = {
        CurveField.X: curve.x_intercept,
        CurveField.Y: curve.y_intercept,
        CurveField.SLOPE: curve.slope,
        CurveField.EXPONENT: curve.exponent,
    }
    for field, value in numbers.items():
        if not math.isfinite(value):
            raise ValueError(f"Cannot encode non-finite {field.value} value: {value}")

    tokens = [curve.shape.value, *(repr(float(value)) for value in numbers.values())]
    if curve.flip_x:
        tokens.append(FLIP_X_TOKEN)
    if curve.flip_y:
        tokens.append(FLIP_Y_TOKEN)
    return " ".join(tokens)
