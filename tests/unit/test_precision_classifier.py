"""
Tests for classify() and the suggestion renderer.

Mirrors the lint's user-facing guarantees: literals within a width's digit
capacity are never flagged, flagged literals get a replacement that keeps the
original suffix spelling, and a replacement is itself never flagged.
"""

from fractions import Fraction

import numpy as np
import pytest

from precisionlint import classify, PrecisionVerdict
from precisionlint.analysis.digits import count_significant_digits, numeric_body
from precisionlint.analysis.precision import VerdictTag, NOT_EXCESSIVE, exceeds_capacity
from precisionlint.analysis.round_trip import materialize
from precisionlint.analysis.suggestion import render_suggestion
from precisionlint.shared.errors import MalformedLiteralError
from precisionlint.shared.types import FloatWidth

SINGLE = FloatWidth.SINGLE
DOUBLE = FloatWidth.DOUBLE


class TestVerdict:
    def test_not_excessive_has_no_suggestion(self):
        verdict = PrecisionVerdict.not_excessive()
        assert verdict.tag is VerdictTag.NOT_EXCESSIVE
        assert verdict.suggestion is None
        assert not verdict.is_excessive
        assert verdict == NOT_EXCESSIVE

    def test_confirmed_carries_suggestion(self):
        verdict = PrecisionVerdict.confirmed("1.5")
        assert verdict.is_excessive
        assert verdict.suggestion == "1.5"


class TestCapacity:
    @pytest.mark.parametrize("text, width, expected", [
        ("0.123_456", SINGLE, False),
        ("0.123_456_7", SINGLE, True),
        ("0.000_000_123_456", SINGLE, False),
        ("0.123_456_789_012_345", DOUBLE, False),
        ("0.123_456_789_012_345_6", DOUBLE, True),
    ])
    def test_exceeds_capacity(self, text, width, expected):
        assert exceeds_capacity(text, width) is expected


class TestClassify:
    """Classification of single literals"""

    @pytest.mark.parametrize("text, width", [
        ("0.123_456", SINGLE),
        ("0.123_456_f32", SINGLE),
        ("1.234_56", SINGLE),
        ("0.123_456_789_012", DOUBLE),
        ("0.1000000", SINGLE),
        ("16777216.0", SINGLE),
        ("1.500000000000001", DOUBLE),
        ("0.000_000_000_000_000_000_000", SINGLE),
        ("0.000_000_000_000_000_1", SINGLE),
    ])
    def test_not_excessive(self, text, width):
        assert classify(text, width) == NOT_EXCESSIVE

    @pytest.mark.parametrize("text, width, suggestion", [
        ("1.123_456_789", SINGLE, "1.1234568"),
        ("1.123_456_789_f32", SINGLE, "1.1234568_f32"),
        ("1.123_456_789f32", SINGLE, "1.1234568f32"),
        ("-1.123_456_789", SINGLE, "-1.1234568"),
        ("+1.123_456_789", SINGLE, "+1.1234568"),
        ("16777217.0", SINGLE, "16777216.0"),
        ("1.00000005960464477539062500000000001", SINGLE, "1.0000001"),
        ("1.00000005960464477539062499999999999", SINGLE, "1.0"),
    ])
    def test_confirmed(self, text, width, suggestion):
        assert classify(text, width) == PrecisionVerdict.confirmed(suggestion)

    def test_double_width_literal_stored_as_single(self):
        verdict = classify("0.123_456_789_012", SINGLE)
        assert verdict.is_excessive
        assert np.float32(float(verdict.suggestion)) == np.float32(0.123456789012)

    def test_double_width_excess(self):
        text = "0.123_456_789_012_345_678_9"
        verdict = classify(text, DOUBLE)
        assert verdict.is_excessive
        assert float(verdict.suggestion) == float("0.1234567890123456789")
        assert count_significant_digits(verdict.suggestion) <= 17

    def test_exponent_literal(self):
        verdict = classify("1.123456789e-10", SINGLE)
        assert verdict.is_excessive
        assert verdict.suggestion.endswith("e-10")

    @pytest.mark.parametrize("text, width", [
        ("1.2345678e39", SINGLE),
        ("1.2345678e-50", SINGLE),
        ("1.234_567_890_123_456_7e309", DOUBLE),
    ])
    def test_unrepresentable_values_not_flagged(self, text, width):
        assert classify(text, width) == NOT_EXCESSIVE

    def test_malformed_literal_raises(self):
        with pytest.raises(MalformedLiteralError):
            classify("1.2.3", SINGLE)


class TestSuggestionIdempotence:
    """A suggested literal, checked at the same width, is never flagged"""

    cases = [
        ("1.123_456_789", SINGLE),
        ("1.123_456_789_f32", SINGLE),
        ("0.987_654_321f32", SINGLE),
        ("+3.141_592_653_589_793", SINGLE),
        ("1.123456789e-10", SINGLE),
        ("6.022_140_76e+23", SINGLE),
        ("1.000_000_059_604_644_775_390_625_000_000_000_01", SINGLE),
        ("2.718_281_828_459_045_235_36", DOUBLE),
        ("0.123_456_789_012_345_678_9_f64", DOUBLE),
        ("1.797_693_134_862_315_71e308", DOUBLE),
    ]

    def test_suggestions_are_stable(self):
        for text, width in self.cases:
            verdict = classify(text, width)
            assert verdict.is_excessive, text
            assert classify(verdict.suggestion, width) == NOT_EXCESSIVE, (text, verdict.suggestion)

    def test_suggestions_keep_value(self):
        for text, width in self.cases:
            verdict = classify(text, width)
            exact = Fraction(numeric_body(text))
            stored = materialize(verdict.suggestion, width)
            error = abs(Fraction(float(stored)) - exact)
            for neighbour in (np.nextafter(stored, width.dtype(-np.inf)), np.nextafter(stored, width.dtype(np.inf))):
                if np.isfinite(neighbour):
                    assert error <= abs(Fraction(float(neighbour)) - exact), (text, verdict.suggestion)


class TestRenderSuggestion:
    @pytest.mark.parametrize("original, suggested, expected", [
        ("1.123_456_789_f32", "1.1234568", "1.1234568_f32"),
        ("1.123_456_789f32", "1.1234568", "1.1234568f32"),
        ("1.123_456_789__f64", "1.1234568", "1.1234568__f64"),
        ("1.123_456_789", "1.1234568", "1.1234568"),
        ("+1.123_456_789", "1.1234568", "+1.1234568"),
        ("-1.123_456_789", "-1.1234568", "-1.1234568"),
    ])
    def test_render(self, original, suggested, expected):
        assert render_suggestion(original, suggested) == expected
