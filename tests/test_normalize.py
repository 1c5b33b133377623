"""
Metric Normalization Test Suite
===============================
Tests for magnitude parsing, bar widths and histogram heights.
"""
import math

import pytest

from polydash.analysis.normalize import (
    compute_bar_width,
    compute_histogram_bar_height,
    compute_histogram_heights,
    compute_probability_width,
    compute_scale_max,
    finite_float,
    format_percent,
    normalize_magnitude,
    parse_number,
    PLACEHOLDER_BAR_COUNT,
    PLACEHOLDER_BAR_HEIGHT,
)


# ============================================================================
# MAGNITUDE TESTS
# ============================================================================

class TestNormalizeMagnitude:
    """Tests for normalize_magnitude()"""

    @pytest.mark.parametrize("value", [0, 1, 12345, 0.03, 67890.5, 1e12])
    def test_non_negative_numbers_pass_through(self, value):
        """Finite non-negative numbers come back unchanged"""
        assert normalize_magnitude(value) == value

    @pytest.mark.parametrize("value", [-1, -0.5, -12345])
    def test_negative_numbers_clamp_to_zero(self, value):
        assert normalize_magnitude(value) == 0

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_numbers_become_zero(self, value):
        assert normalize_magnitude(value) == 0

    def test_comma_separated_text(self):
        """Thousands separators are stripped before parsing"""
        assert normalize_magnitude("12,345.50") == 12345.50

    def test_currency_text(self):
        assert normalize_magnitude("$12,345") == 12345

    def test_negative_text_clamps_to_zero(self):
        assert normalize_magnitude("-5") == 0

    @pytest.mark.parametrize("value", ["abc", "", "-", ".", "$", "n/a"])
    def test_unparseable_text_is_zero(self, value):
        assert normalize_magnitude(value) == 0

    def test_leading_float_prefix_wins(self):
        """Extra dots or dashes after a number are ignored"""
        assert normalize_magnitude("12.3.4") == 12.3
        assert normalize_magnitude("1-2") == 1

    def test_leading_decimal_point(self):
        assert normalize_magnitude(".5") == 0.5

    def test_units_are_stripped(self):
        assert normalize_magnitude("1,200 USDC") == 1200

    @pytest.mark.parametrize("value", [None, True, [1, 2], {"a": 1}])
    def test_other_types_are_zero(self, value):
        """Never raises, even on types that aren't numbers or text"""
        assert normalize_magnitude(value) == 0

    @pytest.mark.parametrize("value", [-3, 0, 2.5, "7", "-7", "x", None, math.nan])
    def test_result_always_finite_and_non_negative(self, value):
        result = normalize_magnitude(value)
        assert math.isfinite(result)
        assert result >= 0


class TestHugeIntegers:
    """Tests for integers too large to fit in a float"""

    HUGE = 10 ** 400

    def test_finite_float_rejects_huge_int(self):
        assert finite_float(self.HUGE) is None
        assert finite_float(-self.HUGE) is None

    def test_finite_float_converts_regular_numbers(self):
        assert finite_float(3) == 3.0
        assert finite_float(True) is None

    def test_magnitude_is_zero(self):
        assert normalize_magnitude(self.HUGE) == 0
        assert normalize_magnitude(-self.HUGE) == 0

    def test_long_digit_text_is_zero(self):
        assert normalize_magnitude("9" * 400) == 0

    def test_probability_width_is_zero(self):
        assert compute_probability_width(self.HUGE) == 0

    def test_histogram_height_is_floor(self):
        assert compute_histogram_bar_height(self.HUGE) == 12

    def test_bar_width_stays_in_bounds(self):
        assert compute_bar_width(self.HUGE, 100) == 2
        assert 2 <= compute_bar_width(50, self.HUGE) <= 100


class TestParseNumber:
    """Tests for parse_number()"""

    def test_returns_none_when_nothing_numeric(self):
        assert parse_number("abc") is None

    def test_keeps_sign(self):
        assert parse_number("-5") == -5.0

    def test_overflow_is_rejected(self):
        assert parse_number("9" * 400) is None


# ============================================================================
# BAR WIDTH TESTS
# ============================================================================

class TestBarWidth:
    """Tests for compute_bar_width() and compute_scale_max()"""

    def test_zero_value_keeps_sliver(self):
        assert compute_bar_width(0, 100) == 2

    def test_value_at_scale_max_is_full(self):
        assert compute_bar_width(100, 100) == 100

    def test_proportional_in_between(self):
        assert compute_bar_width(50, 200) == pytest.approx(25)

    def test_scale_max_floored_at_one(self):
        """A scale below 1 can't blow the bar past 100"""
        assert compute_bar_width(0.5, 0) == 50

    @pytest.mark.parametrize("value,scale_max", [
        (0, 1), (1, 1), (5, 1), (12345, 67890), (67890, 67890), (0.001, 1e9), (1e9, 1),
    ])
    def test_always_within_bounds(self, value, scale_max):
        assert 2 <= compute_bar_width(value, scale_max) <= 100

    def test_scale_max_is_largest_value(self):
        assert compute_scale_max(12345, 67890) == 67890

    def test_scale_max_never_below_one(self):
        assert compute_scale_max(0, 0) == 1
        assert compute_scale_max(0.2, 0.5) == 1
        assert compute_scale_max() == 1


# ============================================================================
# PROBABILITY TESTS
# ============================================================================

class TestProbabilityWidth:
    """Tests for compute_probability_width()"""

    def test_zero_probability_has_no_sliver(self):
        assert compute_probability_width(0) == 0

    def test_certain_probability_is_full(self):
        assert compute_probability_width(1) == 100

    def test_mid_probability(self):
        assert compute_probability_width(0.42) == pytest.approx(42)

    @pytest.mark.parametrize("p", [-1, -0.1, 1.5, 40])
    def test_out_of_range_is_clamped(self, p):
        assert 0 <= compute_probability_width(p) <= 100

    @pytest.mark.parametrize("p", [math.nan, math.inf, None, "0.5"])
    def test_non_numeric_is_zero(self, p):
        assert compute_probability_width(p) == 0


# ============================================================================
# HISTOGRAM TESTS
# ============================================================================

class TestHistogram:
    """Tests for historical price bar heights"""

    def test_low_point_floored(self):
        assert compute_histogram_bar_height(0.0) == 12
        assert compute_histogram_bar_height(0.05) == 12

    def test_high_point_capped(self):
        assert compute_histogram_bar_height(1.7) == 100

    def test_regular_point(self):
        assert compute_histogram_bar_height(0.4) == pytest.approx(40)

    def test_series_heights(self):
        heights = compute_histogram_heights([0.4, 0.41, 0.42, 0.43])
        assert heights == pytest.approx([40, 41, 42, 43])

    @pytest.mark.parametrize("series", [None, []])
    def test_missing_series_uses_placeholder(self, series):
        heights = compute_histogram_heights(series)
        assert len(heights) == PLACEHOLDER_BAR_COUNT
        assert all(h == PLACEHOLDER_BAR_HEIGHT for h in heights)


class TestFormatPercent:
    """Tests for format_percent()"""

    def test_whole_number(self):
        assert format_percent(42.0) == "42%"

    def test_fraction(self):
        assert format_percent(12.5) == "12.5%"

    def test_tiny_value_has_no_exponent(self):
        assert format_percent(0.00001) == "0%"
