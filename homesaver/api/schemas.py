"""Pydantic schemas for API request/response models."""

import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from homesaver.engine.valuation import check_input_magnitude
from homesaver.models.sale_options import SaleOptionType
from homesaver.models.timeline import MilestoneStatus, MilestoneUrgency
from homesaver.models.valuation import Confidence, PropertyCondition, PropertyType


# ---- Request schemas ----

class ValuationRequest(BaseModel):
    # The site posts camelCase (zipCode, squareFeet); snake_case is accepted too
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    zip_code: str = Field(..., description="5-digit US ZIP code; unknown ZIPs use the DFW average")
    property_type: PropertyType
    square_feet: Decimal
    bedrooms: Decimal
    bathrooms: Decimal = Field(..., description="Fractional for half baths, e.g. 2.5")
    condition: PropertyCondition

    @field_validator("square_feet", "bedrooms", "bathrooms")
    @classmethod
    def within_double_range(cls, v: Decimal, info: ValidationInfo) -> Decimal:
        return check_input_magnitude(info.field_name, v)


class SaleOptionsRequest(BaseModel):
    property_value: Decimal = Field(..., gt=0)
    mortgage_balance: Decimal = Field(..., ge=0)


class CompletedAction(BaseModel):
    milestone_id: str
    action_index: int = Field(..., ge=0)


class TimelineRequest(BaseModel):
    notice_date: datetime.date = Field(..., description="Date the Notice of Default was received")
    completed_actions: list[CompletedAction] = Field(default_factory=list)


# ---- Response schemas ----

class ValuationRangeResponse(BaseModel):
    low: int
    mid: int
    high: int


class ValuationBreakdownResponse(BaseModel):
    base_value: int
    type_adjustment: int
    condition_adjustment: int
    bedroom_adjustment: int
    bathroom_adjustment: int


class ValuationResponse(BaseModel):
    estimated_value: int
    valuation_range: ValuationRangeResponse
    price_per_sqft: int
    breakdown: ValuationBreakdownResponse
    confidence: Confidence
    zip_code_found: bool


class SaleCostsResponse(BaseModel):
    agent_commission: Decimal
    closing_costs: Decimal
    repairs: Decimal
    total: Decimal


class SaleOptionResponse(BaseModel):
    option_type: SaleOptionType
    name: str
    timeline: str
    timeline_days: int
    gross_proceeds: Decimal
    costs: SaleCostsResponse
    net_proceeds: Decimal
    pros: list[str]
    cons: list[str]
    recommended: bool
    description: str


class SaleOptionsResponse(BaseModel):
    property_value: Decimal
    mortgage_balance: Decimal
    equity: Decimal
    options: list[SaleOptionResponse]


class MilestoneResponse(BaseModel):
    id: str
    title: str
    date: datetime.date
    days_from_notice: int
    description: str
    action_items: list[str]
    urgency: MilestoneUrgency
    status: MilestoneStatus


class TimelineProgressResponse(BaseModel):
    total_actions: int
    completed_actions: int
    completion_pct: int


class TimelineResponse(BaseModel):
    notice_date: datetime.date
    as_of: datetime.date
    sale_date: datetime.date
    days_until_sale: int
    milestones: list[MilestoneResponse]
    progress: TimelineProgressResponse
