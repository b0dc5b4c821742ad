# ABOUTME: Tests for the height parser
# ABOUTME: Validates metric precedence, separator handling and feet/inches conversion

import pytest

from height_inspector.extraction.units import METERS_PER_FOOT, METERS_PER_INCH, parse_height


class TestMetricHeights:
    """Metric cells - digits, optional decimal part, optional space, 'm'."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1.85 m", 1.85),
            ("1.85m", 1.85),
            ("2 m", 2.0),
            ("2.", None),
            ("0.5 m", 0.5),
            ("1. m", 1.0),
            ("Height: 1.72 m (5 ft 8 in)", 1.72),
            ("1.85\xa0m", 1.85),
        ],
    )
    def test_metric_values(self, text, expected):
        assert parse_height(text) == expected

    @pytest.mark.parametrize("whole,fraction", [(1, 85), (2, 5), (0, 72), (12, 0)])
    def test_comma_and_dot_separators_are_equivalent(self, whole, fraction):
        assert parse_height(f"{whole}.{fraction} m") == parse_height(f"{whole},{fraction} m")

    def test_comma_separator_value(self):
        assert parse_height("1,85 m") == pytest.approx(1.85)

    def test_metric_takes_precedence_over_imperial(self):
        # Both units present: the metric reading wins
        assert parse_height("6 ft 1 in (1.85 m)") == pytest.approx(1.85)

    def test_overflowing_metric_value_falls_through_to_imperial(self):
        text = "9" * 400 + " m or 6 ft 1 in"
        assert parse_height(text) == pytest.approx(6 * METERS_PER_FOOT + 1 * METERS_PER_INCH)

    def test_overflowing_metric_value_without_imperial_is_no_match(self):
        assert parse_height("9" * 400 + " m") is None


class TestImperialHeights:
    """Imperial cells - feet with optional inches."""

    @pytest.mark.parametrize("feet,inches", [(6, 1), (5, 11), (7, 0), (4, 10)])
    def test_feet_and_inches(self, feet, inches):
        result = parse_height(f"{feet} ft {inches} in")
        assert result == pytest.approx(feet * 0.3048 + inches * 0.0254)

    @pytest.mark.parametrize("text", ["6ft1in", "6 ft1 in", "6ft 1in"])
    def test_compact_spacing(self, text):
        assert parse_height(text) == pytest.approx(1.8542)

    @pytest.mark.parametrize("feet", [5, 6, 7])
    def test_feet_only(self, feet):
        assert parse_height(f"{feet} ft") == pytest.approx(feet * 0.3048)

    def test_feet_only_compact(self):
        assert parse_height("6ft") == pytest.approx(1.8288)

    def test_feet_with_bare_inch_marker(self):
        assert parse_height("6 ft in") == pytest.approx(1.8288)


class TestNoMatch:
    """Cells without a recognizable height."""

    @pytest.mark.parametrize("text", ["", "n/a", "N/A", "—", "-", "[1]", "185 cm", "tall", "6'1\""])
    def test_unparsable_cells(self, text):
        assert parse_height(text) is None

    def test_results_are_never_negative(self):
        assert parse_height("-1.5 m") == pytest.approx(1.5)
