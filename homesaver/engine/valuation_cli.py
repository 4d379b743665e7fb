"""CLI for the property value estimator.

Usage:
    python -m homesaver.engine.valuation_cli 75201 --sqft 2000 --beds 4 --baths 2.5
    python -m homesaver.engine.valuation_cli 76107 --type condo --condition fair --sqft 950
    python -m homesaver.engine.valuation_cli 75201 --sqft 2000 --json
"""

import argparse
import json
import sys

from homesaver.engine.valuation import calculate_property_value, parse_property_details
from homesaver.errors import InvalidInputError
from homesaver.models.valuation import PropertyCondition, PropertyType, ValuationResult


def print_estimate(zip_code: str, result: ValuationResult) -> None:
    b = result.breakdown
    r = result.valuation_range
    print(f"\n{'=' * 60}")
    print(f"  Property Value Estimate: ZIP {zip_code}")
    print(f"{'=' * 60}")
    print(f"  Estimated Value:  ${result.estimated_value:,}")
    print(f"  Range:            ${r.low:,} – ${r.high:,}")
    print(f"  Price / sqft:     ${result.price_per_sqft:,}{'' if result.zip_code_found else ' (DFW average)'}")
    print(f"  Confidence:       {result.confidence.value}")
    print()
    print(f"  Base value:       {b.base_value:>+12,}")
    print(f"  Property type:    {b.type_adjustment:>+12,}")
    print(f"  Condition:        {b.condition_adjustment:>+12,}")
    print(f"  Bedrooms:         {b.bedroom_adjustment:>+12,}")
    print(f"  Bathrooms:        {b.bathroom_adjustment:>+12,}")
    print()


def result_to_dict(result: ValuationResult) -> dict:
    r = result.valuation_range
    b = result.breakdown
    return {
        "estimated_value": result.estimated_value,
        "valuation_range": {"low": r.low, "mid": r.mid, "high": r.high},
        "price_per_sqft": result.price_per_sqft,
        "breakdown": {
            "base_value": b.base_value,
            "type_adjustment": b.type_adjustment,
            "condition_adjustment": b.condition_adjustment,
            "bedroom_adjustment": b.bedroom_adjustment,
            "bathroom_adjustment": b.bathroom_adjustment,
        },
        "confidence": result.confidence.value,
        "zip_code_found": result.zip_code_found,
    }


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="DFW property value estimator")
    parser.add_argument("zip_code", help="5-digit ZIP code")
    parser.add_argument(
        "--type", dest="property_type", default=PropertyType.SINGLE_FAMILY.value,
        help=f"Property type: {', '.join(t.value for t in PropertyType)} (default: single_family)",
    )
    parser.add_argument("--sqft", default="2000", help="Square footage (default: 2000)")
    parser.add_argument("--beds", default="3", help="Number of bedrooms (default: 3)")
    parser.add_argument("--baths", default="2", help="Number of bathrooms (default: 2)")
    parser.add_argument(
        "--condition", default=PropertyCondition.GOOD.value,
        help=f"Condition: {', '.join(c.value for c in PropertyCondition)} (default: good)",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    args = parser.parse_args(argv)

    try:
        details = parse_property_details({
            "zip_code": args.zip_code,
            "property_type": args.property_type,
            "square_feet": args.sqft,
            "bedrooms": args.beds,
            "bathrooms": args.baths,
            "condition": args.condition,
        })
    except InvalidInputError as e:
        parser.error(str(e))

    result = calculate_property_value(details)
    if args.json:
        json.dump(result_to_dict(result), sys.stdout, indent=2)
        print()
    else:
        print_estimate(details.zip_code, result)


if __name__ == "__main__":
    main()
