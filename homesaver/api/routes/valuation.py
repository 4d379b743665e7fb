"""Property value estimator routes."""

from fastapi import APIRouter

from homesaver.api.schemas import (
    ValuationBreakdownResponse,
    ValuationRangeResponse,
    ValuationRequest,
    ValuationResponse,
)
from homesaver.engine.valuation import calculate_property_value
from homesaver.models.valuation import PropertyDetails, ValuationResult

router = APIRouter(prefix="/api/v1/valuation", tags=["valuation"])


def _result_to_response(result: ValuationResult) -> ValuationResponse:
    r = result.valuation_range
    b = result.breakdown
    return ValuationResponse(
        estimated_value=result.estimated_value,
        valuation_range=ValuationRangeResponse(low=r.low, mid=r.mid, high=r.high),
        price_per_sqft=result.price_per_sqft,
        breakdown=ValuationBreakdownResponse(
            base_value=b.base_value,
            type_adjustment=b.type_adjustment,
            condition_adjustment=b.condition_adjustment,
            bedroom_adjustment=b.bedroom_adjustment,
            bathroom_adjustment=b.bathroom_adjustment,
        ),
        confidence=result.confidence,
        zip_code_found=result.zip_code_found,
    )


@router.post("/estimate", response_model=ValuationResponse)
async def estimate(req: ValuationRequest):
    """Instant property value estimate from ZIP, size, rooms and condition."""
    details = PropertyDetails(
        zip_code=req.zip_code,
        property_type=req.property_type,
        square_feet=req.square_feet,
        bedrooms=req.bedrooms,
        bathrooms=req.bathrooms,
        condition=req.condition,
    )
    return _result_to_response(calculate_property_value(details))
