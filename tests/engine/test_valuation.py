"""Unit tests for the property value estimator."""

from dataclasses import replace
from decimal import Decimal

import pytest

from homesaver.engine.valuation import (
    CONDITION_MULTIPLIERS,
    TYPE_MULTIPLIERS,
    _round,
    calculate_property_value,
)
from homesaver.models.valuation import Confidence, PropertyCondition, PropertyType


class TestValuationEndToEnd:
    def test_uptown_example(self, uptown_home):
        result = calculate_property_value(uptown_home)
        b = result.breakdown
        assert b.base_value == 700000
        assert b.type_adjustment == 0
        assert b.condition_adjustment == 0
        assert b.bedroom_adjustment == 15000
        assert b.bathroom_adjustment == 4000
        assert result.estimated_value == 719000
        assert result.valuation_range.low == 575200
        assert result.valuation_range.mid == 719000
        assert result.valuation_range.high == 862800
        assert result.price_per_sqft == 350
        assert result.zip_code_found is True
        assert result.confidence == Confidence.HIGH

    def test_deterministic(self, uptown_home):
        """Same inputs produce same output."""
        assert calculate_property_value(uptown_home) == calculate_property_value(uptown_home)

    def test_baseline_neutrality(self, baseline_home):
        result = calculate_property_value(baseline_home)
        b = result.breakdown
        assert b.type_adjustment == 0
        assert b.condition_adjustment == 0
        assert b.bedroom_adjustment == 0
        assert b.bathroom_adjustment == 0
        assert result.estimated_value == b.base_value == 1800 * 210


class TestZipLookup:
    def test_unknown_zip_uses_default(self, uptown_home):
        result = calculate_property_value(replace(uptown_home, zip_code="99999"))
        assert result.zip_code_found is False
        assert result.price_per_sqft == 185
        assert result.breakdown.base_value == 2000 * 185

    def test_known_zip(self, uptown_home):
        result = calculate_property_value(uptown_home)
        assert result.price_per_sqft == 350
        assert result.zip_code_found is True

    def test_custom_price_table(self, uptown_home):
        result = calculate_property_value(uptown_home, price_table={"75201": 100})
        assert result.price_per_sqft == 100
        assert result.breakdown.base_value == 200000

    def test_zip_not_normalized(self, uptown_home):
        """Exact string match only: whitespace or ZIP+4 falls back."""
        assert calculate_property_value(replace(uptown_home, zip_code=" 75201")).zip_code_found is False
        assert calculate_property_value(replace(uptown_home, zip_code="75201-1234")).zip_code_found is False


class TestAdjustments:
    @pytest.mark.parametrize("property_type", list(PropertyType))
    def test_type_adjustment_pct_of_base(self, baseline_home, property_type):
        result = calculate_property_value(replace(baseline_home, property_type=property_type))
        base = Decimal(result.breakdown.base_value)
        expected = base * (TYPE_MULTIPLIERS[property_type] - 1)
        assert result.breakdown.type_adjustment == int(expected)

    def test_condo_discount(self, baseline_home):
        result = calculate_property_value(replace(baseline_home, property_type=PropertyType.CONDO))
        # 378000 * -0.15
        assert result.breakdown.type_adjustment == -56700

    def test_excellent_premium(self, baseline_home):
        result = calculate_property_value(replace(baseline_home, condition=PropertyCondition.EXCELLENT))
        # 378000 * 0.15
        assert result.breakdown.condition_adjustment == 56700

    def test_type_and_condition_do_not_compound(self, baseline_home):
        """Both adjustments are a percentage of the unadjusted base value."""
        home = replace(
            baseline_home,
            property_type=PropertyType.CONDO,
            condition=PropertyCondition.POOR,
        )
        result = calculate_property_value(home)
        base = 378000
        assert result.breakdown.type_adjustment == -56700  # 15% of base
        assert result.breakdown.condition_adjustment == -94500  # 25% of base
        assert result.estimated_value == base - 56700 - 94500

    def test_condition_ordering(self, baseline_home):
        values = [
            calculate_property_value(replace(baseline_home, condition=c)).estimated_value
            for c in PropertyCondition
        ]
        # excellent > good > fair > poor
        assert values == sorted(values, reverse=True)

    def test_all_multipliers_present(self):
        assert set(TYPE_MULTIPLIERS) == set(PropertyType)
        assert set(CONDITION_MULTIPLIERS) == set(PropertyCondition)

    def test_fewer_rooms_negative_adjustment(self, baseline_home):
        result = calculate_property_value(
            replace(baseline_home, bedrooms=Decimal("1"), bathrooms=Decimal("1"))
        )
        assert result.breakdown.bedroom_adjustment == -30000
        assert result.breakdown.bathroom_adjustment == -8000

    def test_fractional_bathrooms(self, baseline_home):
        result = calculate_property_value(replace(baseline_home, bathrooms=Decimal("3.5")))
        assert result.breakdown.bathroom_adjustment == 12000

    def test_half_dollar_rounds_up(self):
        """Halves round toward positive infinity, including negative halves."""
        assert _round(Decimal("2.5")) == 3
        assert _round(Decimal("-2.5")) == -2
        assert _round(Decimal("-2.51")) == -3

    def test_breakdown_sums_to_estimate(self, baseline_home):
        home = replace(
            baseline_home,
            zip_code="75115",
            property_type=PropertyType.TOWNHOUSE,
            square_feet=Decimal("1333"),
            bedrooms=Decimal("2"),
            bathrooms=Decimal("1.5"),
            condition=PropertyCondition.FAIR,
        )
        result = calculate_property_value(home)
        assert abs(result.estimated_value - result.breakdown.total) <= 1

    def test_accepts_int_inputs(self, baseline_home):
        home = replace(baseline_home, square_feet=1800, bedrooms=3, bathrooms=2)
        assert calculate_property_value(home) == calculate_property_value(baseline_home)

    def test_degenerate_inputs_do_not_raise(self, baseline_home):
        result = calculate_property_value(
            replace(baseline_home, square_feet=Decimal("-100"), bedrooms=Decimal("0"))
        )
        assert result.estimated_value < 0
        assert result.confidence == Confidence.LOW


class TestRange:
    @pytest.mark.parametrize("sqft", ["650", "1000", "1234", "2500", "4999"])
    def test_range_is_fixed_pct_of_mid(self, baseline_home, sqft):
        result = calculate_property_value(replace(baseline_home, square_feet=Decimal(sqft)))
        r = result.valuation_range
        assert r.mid == result.estimated_value
        assert r.low <= r.mid <= r.high
        assert abs(r.low - result.estimated_value * 0.8) <= 0.5
        assert abs(r.high - result.estimated_value * 1.2) <= 0.5


class TestConfidence:
    def test_high(self, uptown_home):
        assert calculate_property_value(uptown_home).confidence == Confidence.HIGH

    def test_low_unknown_zip(self, uptown_home):
        result = calculate_property_value(replace(uptown_home, zip_code="00000"))
        assert result.confidence == Confidence.LOW

    def test_low_poor_condition(self, uptown_home):
        result = calculate_property_value(replace(uptown_home, condition=PropertyCondition.POOR))
        assert result.confidence == Confidence.LOW

    @pytest.mark.parametrize("sqft", ["900", "800", "5500", "6000"])
    def test_medium_gap(self, uptown_home, sqft):
        """Between the high and low sqft bands nothing matches, so confidence is medium."""
        result = calculate_property_value(replace(uptown_home, square_feet=Decimal(sqft)))
        assert result.confidence == Confidence.MEDIUM

    @pytest.mark.parametrize("sqft", ["799", "6001", "12000"])
    def test_low_sqft_extremes(self, uptown_home, sqft):
        result = calculate_property_value(replace(uptown_home, square_feet=Decimal(sqft)))
        assert result.confidence == Confidence.LOW

    @pytest.mark.parametrize("sqft", ["1000", "5000"])
    def test_high_band_inclusive(self, uptown_home, sqft):
        result = calculate_property_value(replace(uptown_home, square_feet=Decimal(sqft)))
        assert result.confidence == Confidence.HIGH
