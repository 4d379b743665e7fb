"""Sale options comparison routes."""

import logging

from fastapi import APIRouter, HTTPException

from homesaver.api.schemas import (
    SaleCostsResponse,
    SaleOptionResponse,
    SaleOptionsRequest,
    SaleOptionsResponse,
)
from homesaver.engine.sale_options import compare_sale_options
from homesaver.errors import InvalidInputError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/sale-options", tags=["sale-options"])


@router.post("/compare", response_model=SaleOptionsResponse)
async def compare(req: SaleOptionsRequest):
    """Traditional sale vs. cash offer vs. short sale for the homeowner's equity position."""
    try:
        comparison = compare_sale_options(req.property_value, req.mortgage_balance)
    except InvalidInputError as e:
        logger.warning("Rejected sale options request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    options = [
        SaleOptionResponse(
            option_type=opt.option_type,
            name=opt.name,
            timeline=opt.timeline,
            timeline_days=opt.timeline_days,
            gross_proceeds=opt.gross_proceeds,
            costs=SaleCostsResponse(
                agent_commission=opt.costs.agent_commission,
                closing_costs=opt.costs.closing_costs,
                repairs=opt.costs.repairs,
                total=opt.costs.total,
            ),
            net_proceeds=opt.net_proceeds,
            pros=list(opt.pros),
            cons=list(opt.cons),
            recommended=opt.recommended,
            description=opt.description,
        )
        for opt in comparison.options
    ]

    return SaleOptionsResponse(
        property_value=comparison.property_value,
        mortgage_balance=comparison.mortgage_balance,
        equity=comparison.equity,
        options=options,
    )
