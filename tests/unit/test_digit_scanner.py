"""
Tests for the digit scanner: significant digit positions, the leading-zero
policy, suffix splitting and malformed input.
"""

import pytest

from precisionlint.analysis.digits import (
    significant_digits, count_significant_digits, split_suffix, width_from_suffix, numeric_body,
)
from precisionlint.shared.errors import MalformedLiteralError
from precisionlint.shared.types import FloatWidth


class TestSignificantDigits:
    """Positions and digits yielded by the scanner"""

    @pytest.mark.parametrize("text, expected", [
        ("0.5", [(2, "5")]),
        ("0.000123", [(5, "1"), (6, "2"), (7, "3")]),
        ("1_000.0", [(0, "1"), (2, "0"), (3, "0"), (4, "0"), (6, "0")]),
        ("00012.5", [(3, "1"), (4, "2"), (6, "5")]),
        ("-1.5e-10", [(1, "1"), (3, "5")]),
        ("+2.25", [(1, "2"), (3, "2"), (4, "5")]),
        ("1.5f32", [(0, "1"), (2, "5")]),
        ("3.75_f64", [(0, "3"), (2, "7"), (3, "5")]),
        ("7e5", [(0, "7")]),
        ("0.0", []),
        ("0_000.000_0f32", []),
    ])
    def test_positions(self, text, expected):
        assert list(significant_digits(text)) == expected

    def test_offsets_point_at_digits(self):
        text = "0.001_234_5e-3"
        for offset, digit in significant_digits(text):
            assert text[offset] == digit

    def test_rescan_yields_same_sequence(self):
        text = "1.123_456_789_f32"
        assert list(significant_digits(text)) == list(significant_digits(text))

    def test_is_lazy(self):
        scan = significant_digits("1.5")
        assert next(scan) == (0, "1")
        assert next(scan) == (2, "5")
        with pytest.raises(StopIteration):
            next(scan)


class TestCountSignificantDigits:
    cases = [
        ("0.123_456", 6),
        ("1.123_456_789", 10),
        ("0.123_456_789_012", 12),
        ("0.123_456_789_012_345_67", 17),
        ("100.0", 4),
        ("0.000_000_1", 1),
        ("1e100", 1),
        ("0.0f64", 0),
    ]

    def test_counts(self):
        for text, expected in self.cases:
            assert count_significant_digits(text) == expected, text

    def test_never_exceeds_digit_characters(self):
        for text, _ in self.cases:
            mantissa = text.split("e")[0]
            assert count_significant_digits(text) <= sum(ch.isdigit() for ch in mantissa)


class TestMalformedLiterals:
    @pytest.mark.parametrize("text", [
        "",
        "_",
        ".",
        "1.2.3",
        "1-2",
        "abc",
        "1.5x",
        "1,5",
    ])
    def test_rejected(self, text):
        with pytest.raises(MalformedLiteralError):
            count_significant_digits(text)

    def test_error_names_literal(self):
        with pytest.raises(MalformedLiteralError) as exc_info:
            list(significant_digits("1.2.3"))
        assert exc_info.value.text == "1.2.3"
        assert "decimal point" in exc_info.value.reason
        assert exc_info.value.error_code == "E9001"


class TestSuffixes:
    @pytest.mark.parametrize("text, body, suffix", [
        ("1.5_f32", "1.5", "_f32"),
        ("1.5f64", "1.5", "f64"),
        ("1.5__f32", "1.5", "__f32"),
        ("1.5", "1.5", ""),
        ("1e5", "1e5", ""),
        ("1f32", "1", "f32"),
    ])
    def test_split_suffix(self, text, body, suffix):
        assert split_suffix(text) == (body, suffix)

    @pytest.mark.parametrize("text, width", [
        ("1.0f32", FloatWidth.SINGLE),
        ("1.0_f64", FloatWidth.DOUBLE),
        ("1e3_f32", FloatWidth.SINGLE),
        ("1.0", None),
    ])
    def test_width_from_suffix(self, text, width):
        assert width_from_suffix(text) is width

    @pytest.mark.parametrize("text, body", [
        ("1_000.000_1_f32", "1000.0001"),
        ("1.5e1_0", "1.5e10"),
        ("2.5", "2.5"),
    ])
    def test_numeric_body(self, text, body):
        assert numeric_body(text) == body
