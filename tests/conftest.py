"""Canonical test fixtures used across engine and API tests.

Fixture: Uptown Dallas (75201, $350/sqft) single-family, 2000 sqft, 4 bed,
2.5 bath, good condition → $719,000.
"""

from datetime import date
from decimal import Decimal

import pytest

from homesaver.models.valuation import PropertyCondition, PropertyDetails, PropertyType


@pytest.fixture
def uptown_home() -> PropertyDetails:
    """2000 sqft 4/2.5 in 75201."""
    return PropertyDetails(
        zip_code="75201",
        property_type=PropertyType.SINGLE_FAMILY,
        square_feet=Decimal("2000"),
        bedrooms=Decimal("4"),
        bathrooms=Decimal("2.5"),
        condition=PropertyCondition.GOOD,
    )


@pytest.fixture
def baseline_home() -> PropertyDetails:
    """3 bed / 2 bath single-family in good condition: every adjustment is zero."""
    return PropertyDetails(
        zip_code="76107",
        property_type=PropertyType.SINGLE_FAMILY,
        square_feet=Decimal("1800"),
        bedrooms=Decimal("3"),
        bathrooms=Decimal("2"),
        condition=PropertyCondition.GOOD,
    )


@pytest.fixture
def notice_date() -> date:
    return date(2025, 1, 15)
