"""
Tests for round-trip validation: materializing a literal at a float width and
comparing the stored value's shortest text with what was written.
"""

import numpy as np
import pytest

from precisionlint.analysis.round_trip import materialize, shortest_text, validate
from precisionlint.shared.errors import MalformedLiteralError, RoundTripError
from precisionlint.shared.types import FloatWidth, CAPACITY

SINGLE = FloatWidth.SINGLE
DOUBLE = FloatWidth.DOUBLE


class TestWidthCapacity:
    def test_capacity_per_width(self):
        assert CAPACITY == {SINGLE: 6, DOUBLE: 15}
        assert SINGLE.capacity == 6
        assert DOUBLE.capacity == 15

    def test_dtypes(self):
        assert SINGLE.dtype is np.float32
        assert DOUBLE.dtype is np.float64

    @pytest.mark.parametrize("name, width", [("f32", SINGLE), ("f64", DOUBLE), ("i32", None), ("f16", None)])
    def test_from_name(self, name, width):
        assert FloatWidth.from_name(name) is width


class TestMaterialize:
    def test_nearest_value_at_width(self):
        assert materialize("0.1", SINGLE) == np.float32(0.1)
        assert materialize("0.1", DOUBLE) == np.float64(0.1)
        assert isinstance(materialize("0.1", SINGLE), np.float32)

    def test_separators_and_suffix_ignored(self):
        assert materialize("1_000.5_f32", SINGLE) == np.float32(1000.5)

    @pytest.mark.parametrize("text, width", [
        ("1.2345678e39", SINGLE),
        ("3.4028236e38", SINGLE),
        ("1.7976931348623159e309", DOUBLE),
    ])
    def test_overflow(self, text, width):
        with pytest.raises(RoundTripError):
            materialize(text, width)

    @pytest.mark.parametrize("text, width", [
        ("1.2345678e-50", SINGLE),
        ("1e-400", DOUBLE),
    ])
    def test_underflow_to_zero(self, text, width):
        with pytest.raises(RoundTripError):
            materialize(text, width)

    def test_zero_is_not_underflow(self):
        assert materialize("0.000_000_0", SINGLE) == 0

    def test_not_a_number(self):
        with pytest.raises(MalformedLiteralError):
            materialize("1.2.3", DOUBLE)


class TestSingleRounding:
    """Literals are rounded once to single, not to double and then to single"""

    ONE = np.float32(1.0)
    ONE_NEXT = np.nextafter(np.float32(1.0), np.float32(2.0))

    @pytest.mark.parametrize("text, expected", [
        # 1 + 2**-24 is the halfway point between 1.0 and the next single
        ("1.00000005960464477539062500000000001", ONE_NEXT),
        ("1.00000005960464477539062499999999999", ONE),
        ("1.000000059604644775390625", ONE),
        # 1 + 3 * 2**-24: halfway, the even neighbour is above
        ("1.000000178813934326171875", np.float32(1 + 2 ** -22)),
        ("-1.00000005960464477539062500000000001", -ONE_NEXT),
    ])
    def test_halfway_points(self, text, expected):
        assert materialize(text, SINGLE) == expected

    def test_just_above_halfway_is_flagged_with_stored_value(self):
        rendered = validate("1.00000005960464477539062500000000001", SINGLE)
        assert rendered == "1.0000001"
        assert validate("1.00000005960464477539062499999999999", SINGLE) == "1.0"

    def test_overflow_boundary(self):
        # f32::MAX + half an ulp rounds to infinity; anything below stays finite
        largest = np.finfo(np.float32).max
        assert materialize("340282356779733661637539395458142568447", SINGLE) == largest
        assert materialize("-340282356779733661637539395458142568447", SINGLE) == -largest
        with pytest.raises(RoundTripError):
            materialize("340282356779733661637539395458142568448", SINGLE)

    def test_double_width_unchanged(self):
        assert materialize("1.00000005960464477539062500000000001", DOUBLE) == np.float64(1 + 2 ** -24)


class TestShortestText:
    def test_positional(self):
        assert shortest_text(np.float64(0.1)) == "0.1"
        assert shortest_text(np.float32(0.1)) == "0.1"
        assert shortest_text(np.float64(2.0)) == "2.0"

    def test_scientific(self):
        assert shortest_text(np.float64(1234.5), scientific=True) == "1.2345e+3"


class TestValidate:
    """None when the written digits survive storage, else the shortest text"""

    @pytest.mark.parametrize("text, width", [
        ("0.1000000", SINGLE),
        ("16777216.0", SINGLE),
        ("1.500000000000001", DOUBLE),
        ("0.100_000_000_000_000_000", DOUBLE),
        ("2.5e-3", SINGLE),
    ])
    def test_exact_round_trip(self, text, width):
        assert validate(text, width) is None

    def test_single_precision_rounding(self):
        assert validate("1.123_456_789", SINGLE) == "1.1234568"

    def test_integer_above_single_mantissa(self):
        assert validate("16777217.0", SINGLE) == "16777216.0"

    def test_rendered_value_is_stored_value(self):
        text = "0.123_456_789_012_345_678_9"
        rendered = validate(text, DOUBLE)
        assert rendered is not None
        assert float(rendered) == float("0.1234567890123456789")
        assert validate(rendered, DOUBLE) is None

    def test_scientific_keeps_notation(self):
        rendered = validate("1.123456789e-10", SINGLE)
        assert rendered is not None
        assert rendered.endswith("e-10")
        assert np.float32(float(rendered)) == np.float32(1.123456789e-10)

    def test_exponent_plus_only_when_written(self):
        without_plus = validate("1.123456789e10", SINGLE)
        with_plus = validate("1.123456789e+10", SINGLE)
        assert without_plus.endswith("e10")
        assert with_plus.endswith("e+10")

    def test_uppercase_exponent_kept(self):
        rendered = validate("1.123456789E-10", SINGLE)
        assert "E-10" in rendered
        assert "e" not in rendered

    def test_overflow_propagates(self):
        with pytest.raises(RoundTripError):
            validate("1.2345678e39", SINGLE)
