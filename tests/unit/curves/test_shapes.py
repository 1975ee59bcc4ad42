"""Tests for the curve shape catalog."""

from __future__ import annotations

import pytest

from utilicurve.core.curves.shapes import CurveShape

EXPECTED_NAMES = [
    "Constant",
    "Linear",
    "Quadratic",
    "Logistic",
    "Logit",
    "Threshold",
    "Sine",
    "Parabolic",
    "NormalDistribution",
    "Bounce",
]


class TestCurveShape:
    """Tests for CurveShape enum."""

    def test_catalog_has_ten_shapes_in_order(self) -> None:
        """Catalog is the fixed ten-shape set."""
        assert [shape.value for shape in CurveShape] == EXPECTED_NAMES

    @pytest.mark.parametrize("name", EXPECTED_NAMES)
    def test_from_token_exact_match(self, name: str) -> None:
        """Exact names resolve to their shape."""
        shape = CurveShape.from_token(name)
        assert shape is not None
        assert shape.value == name

    @pytest.mark.parametrize("token", ["linear", "LINEAR", "normaldistribution", "Xyz", ""])
    def test_from_token_is_case_sensitive(self, token: str) -> None:
        """Wrong case or unknown names do not resolve."""
        assert CurveShape.from_token(token) is None

    def test_from_token_ignores_member_names(self) -> None:
        """Python member names are not valid tokens."""
        assert CurveShape.from_token("NORMAL_DISTRIBUTION") is None

    def test_every_shape_has_description(self) -> None:
        """Each shape carries a non-empty description."""
        for shape in CurveShape:
            assert shape.description

    def test_shape_compares_equal_to_its_token(self) -> None:
        """str-valued enum compares equal to the encoded name."""
        assert CurveShape.LOGIT == "Logit"
