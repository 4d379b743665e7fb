"""Property valuation data types."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PropertyType(Enum):
    SINGLE_FAMILY = "single_family"
    CONDO = "condo"
    TOWNHOUSE = "townhouse"
    MULTI_FAMILY = "multi_family"


class PropertyCondition(Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class Confidence(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class PropertyDetails:
    zip_code: str
    property_type: PropertyType
    square_feet: Decimal
    bedrooms: Decimal
    bathrooms: Decimal  # 2.5 = two full baths + one half
    condition: PropertyCondition


@dataclass(frozen=True)
class ValuationRange:
    low: int
    mid: int
    high: int


@dataclass(frozen=True)
class ValuationBreakdown:
    base_value: int
    type_adjustment: int
    condition_adjustment: int
    bedroom_adjustment: int
    bathroom_adjustment: int

    @property
    def total(self) -> int:
        return (
            self.base_value
            + self.type_adjustment
            + self.condition_adjustment
            + self.bedroom_adjustment
            + self.bathroom_adjustment
        )


@dataclass(frozen=True)
class ValuationResult:
    estimated_value: int
    valuation_range: ValuationRange
    price_per_sqft: int
    breakdown: ValuationBreakdown
    confidence: Confidence
    zip_code_found: bool
