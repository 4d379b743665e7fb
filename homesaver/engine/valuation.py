"""Property value estimator.

ZIP $/sqft × square footage, then four additive adjustments (property type,
condition, bedrooms, bathrooms). Type and condition adjustments are each a
percentage of the unadjusted base value; they do not compound.

Pure function: PropertyDetails in, ValuationResult out. No I/O.
"""

import sys
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation, ROUND_FLOOR

from homesaver.data.zip_prices import lookup_price_per_sqft
from homesaver.errors import InvalidInputError
from homesaver.models.valuation import (
    Confidence,
    PropertyCondition,
    PropertyDetails,
    PropertyType,
    ValuationBreakdown,
    ValuationRange,
    ValuationResult,
)

TYPE_MULTIPLIERS: dict[PropertyType, Decimal] = {
    PropertyType.SINGLE_FAMILY: Decimal("1.00"),
    PropertyType.CONDO: Decimal("0.85"),
    PropertyType.TOWNHOUSE: Decimal("0.90"),
    PropertyType.MULTI_FAMILY: Decimal("0.95"),
}

CONDITION_MULTIPLIERS: dict[PropertyCondition, Decimal] = {
    PropertyCondition.EXCELLENT: Decimal("1.15"),
    PropertyCondition.GOOD: Decimal("1.00"),
    PropertyCondition.FAIR: Decimal("0.90"),
    PropertyCondition.POOR: Decimal("0.75"),
}

BASELINE_BEDROOMS = 3
BASELINE_BATHROOMS = 2
BEDROOM_VALUE = Decimal("15000")
BATHROOM_VALUE = Decimal("8000")

RANGE_LOW_PCT = Decimal("0.80")
RANGE_HIGH_PCT = Decimal("1.20")

# Square footage bands used by the confidence classifier
HIGH_CONFIDENCE_SQFT = (1000, 5000)
LOW_CONFIDENCE_SQFT = (800, 6000)

HALF = Decimal("0.5")

# Inputs are bounded to finite IEEE doubles, the domain of the site's JSON numbers
MAX_INPUT_MAGNITUDE = Decimal(sys.float_info.max)


def _round(value: Decimal) -> int:
    """Round to whole dollars, halves toward positive infinity."""
    return int((value + HALF).to_integral_value(rounding=ROUND_FLOOR))


def _confidence(zip_code_found: bool, condition: PropertyCondition, square_feet: Decimal) -> Confidence:
    # The two predicates are not complementary: 800-999 and 5001-6000 sqft
    # with otherwise good inputs satisfy neither and land on MEDIUM.
    high_min, high_max = HIGH_CONFIDENCE_SQFT
    low_min, low_max = LOW_CONFIDENCE_SQFT
    if zip_code_found and condition != PropertyCondition.POOR and high_min <= square_feet <= high_max:
        return Confidence.HIGH
    if not zip_code_found or condition == PropertyCondition.POOR or square_feet < low_min or square_feet > low_max:
        return Confidence.LOW
    return Confidence.MEDIUM


def calculate_property_value(
    details: PropertyDetails,
    price_table: Mapping[str, int] | None = None,
) -> ValuationResult:
    """Estimate market value for a DFW property.

    Never raises for odd numbers: zero or negative square footage yields a
    zero or negative estimate.

    Args:
        details: Property attributes.
        price_table: ZIP → $/sqft table; defaults to the DFW table.

    Returns:
        ValuationResult with point estimate, ±20% range, breakdown and confidence.
    """
    price_per_sqft, zip_code_found = lookup_price_per_sqft(details.zip_code, price_table)

    sqft = Decimal(str(details.square_feet))
    base_value = sqft * price_per_sqft
    type_adjustment = base_value * (TYPE_MULTIPLIERS[details.property_type] - 1)
    condition_adjustment = base_value * (CONDITION_MULTIPLIERS[details.condition] - 1)
    bedroom_adjustment = (Decimal(str(details.bedrooms)) - BASELINE_BEDROOMS) * BEDROOM_VALUE
    bathroom_adjustment = (Decimal(str(details.bathrooms)) - BASELINE_BATHROOMS) * BATHROOM_VALUE

    estimated_value = _round(
        base_value
        + type_adjustment
        + condition_adjustment
        + bedroom_adjustment
        + bathroom_adjustment
    )

    valuation_range = ValuationRange(
        low=_round(estimated_value * RANGE_LOW_PCT),
        mid=estimated_value,
        high=_round(estimated_value * RANGE_HIGH_PCT),
    )

    return ValuationResult(
        estimated_value=estimated_value,
        valuation_range=valuation_range,
        price_per_sqft=price_per_sqft,
        breakdown=ValuationBreakdown(
            base_value=_round(base_value),
            type_adjustment=_round(type_adjustment),
            condition_adjustment=_round(condition_adjustment),
            bedroom_adjustment=_round(bedroom_adjustment),
            bathroom_adjustment=_round(bathroom_adjustment),
        ),
        confidence=_confidence(zip_code_found, details.condition, sqft),
        zip_code_found=zip_code_found,
    )


# Accepted spellings for each PropertyDetails field: the site's JSON uses camelCase
_FIELD_KEYS: dict[str, tuple[str, ...]] = {
    "zip_code": ("zip_code", "zipCode"),
    "property_type": ("property_type", "propertyType"),
    "square_feet": ("square_feet", "squareFeet"),
    "bedrooms": ("bedrooms",),
    "bathrooms": ("bathrooms",),
    "condition": ("condition",),
}


def _pick(raw: Mapping, field: str):
    for key in _FIELD_KEYS[field]:
        if key in raw:
            return raw[key]
    raise InvalidInputError(field, "is required")


def check_input_magnitude(field: str, value: Decimal) -> Decimal:
    """Reject numbers too large for a JSON double; smaller ones are left alone."""
    if abs(value) > MAX_INPUT_MAGNITUDE:
        raise InvalidInputError(field, f"magnitude exceeds {float(MAX_INPUT_MAGNITUDE):g}")
    return value


def _to_decimal(field: str, value) -> Decimal:
    if isinstance(value, bool):
        raise InvalidInputError(field, f"expected a number, got {value!r}")
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidInputError(field, f"expected a number, got {value!r}")
    if not result.is_finite():
        raise InvalidInputError(field, f"expected a finite number, got {value!r}")
    return check_input_magnitude(field, result)


def parse_property_details(raw: Mapping) -> PropertyDetails:
    """Build PropertyDetails from untrusted input (decoded JSON, CLI args).

    Rejects missing fields, non-numeric numbers and out-of-enum property
    type or condition with InvalidInputError. Numbers are only bounded to
    the finite double range; negative or zero values pass through.
    """
    zip_code = _pick(raw, "zip_code")
    if not isinstance(zip_code, str):
        raise InvalidInputError("zip_code", f"expected a string, got {zip_code!r}")

    type_value = _pick(raw, "property_type")
    try:
        property_type = PropertyType(type_value)
    except ValueError:
        allowed = ", ".join(t.value for t in PropertyType)
        raise InvalidInputError("property_type", f"{type_value!r} is not one of: {allowed}")

    condition_value = _pick(raw, "condition")
    try:
        condition = PropertyCondition(condition_value)
    except ValueError:
        allowed = ", ".join(c.value for c in PropertyCondition)
        raise InvalidInputError("condition", f"{condition_value!r} is not one of: {allowed}")

    return PropertyDetails(
        zip_code=zip_code,
        property_type=property_type,
        square_feet=_to_decimal("square_feet", _pick(raw, "square_feet")),
        bedrooms=_to_decimal("bedrooms", _pick(raw, "bedrooms")),
        bathrooms=_to_decimal("bathrooms", _pick(raw, "bathrooms")),
        condition=condition,
    )
