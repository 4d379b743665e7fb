"""Sale options comparison: traditional listing vs. cash offer vs. short sale.

Recommendation is driven by equity as a percentage of property value:
  > 20%      traditional sale
  5% - 20%   cash offer
  < 5%       short sale (including underwater properties)

Pure function. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from homesaver.errors import InvalidInputError
from homesaver.models.sale_options import (
    SaleCosts,
    SaleOption,
    SaleOptionsComparison,
    SaleOptionType,
)

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")

# Traditional listing, costs as % of market value
TRADITIONAL_COMMISSION_PCT = Decimal("0.06")
TRADITIONAL_CLOSING_PCT = Decimal("0.03")
TRADITIONAL_REPAIRS_PCT = Decimal("0.05")

# Cash offer, closing as % of the offer
CASH_OFFER_PCT = Decimal("0.85")
CASH_OFFER_CLOSING_PCT = Decimal("0.02")

# Short sale, costs as % of the short sale price
SHORT_SALE_PCT = Decimal("0.75")
SHORT_SALE_COMMISSION_PCT = Decimal("0.06")  # paid by the lender out of proceeds
SHORT_SALE_CLOSING_PCT = Decimal("0.02")

HIGH_EQUITY_PCT = Decimal("20")
LOW_EQUITY_PCT = Decimal("5")


def _money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def _traditional(value: Decimal, balance: Decimal, equity_pct: Decimal) -> SaleOption:
    costs = SaleCosts(
        agent_commission=_money(value * TRADITIONAL_COMMISSION_PCT),
        closing_costs=_money(value * TRADITIONAL_CLOSING_PCT),
        repairs=_money(value * TRADITIONAL_REPAIRS_PCT),
    )
    return SaleOption(
        option_type=SaleOptionType.TRADITIONAL,
        name="Traditional Sale",
        timeline="60-90 days",
        timeline_days=75,
        gross_proceeds=value,
        costs=costs,
        net_proceeds=value - balance - costs.total,
        pros=(
            "Highest potential sale price",
            "Market-rate value",
            "Multiple buyer competition",
            "Standard process",
        ),
        cons=(
            "Longest timeline (60-90 days)",
            "High costs (14% of value)",
            "Requires repairs and staging",
            "Showings and open houses",
            "Deal may fall through",
        ),
        recommended=equity_pct > HIGH_EQUITY_PCT,
        description="List with a real estate agent on the open market for maximum value.",
    )


def _cash_offer(value: Decimal, balance: Decimal, equity_pct: Decimal) -> SaleOption:
    offer = _money(value * CASH_OFFER_PCT)
    costs = SaleCosts(
        agent_commission=ZERO,
        closing_costs=_money(offer * CASH_OFFER_CLOSING_PCT),
        repairs=ZERO,
    )
    return SaleOption(
        option_type=SaleOptionType.CASH_OFFER,
        name="Cash Offer",
        timeline="7-10 days",
        timeline_days=8,
        gross_proceeds=offer,
        costs=costs,
        net_proceeds=offer - balance - costs.total,
        pros=(
            "Fastest option (7-10 days)",
            "No repairs needed",
            "No showings or staging",
            "Guaranteed close",
            "Avoid foreclosure quickly",
            "Minimal closing costs",
        ),
        cons=(
            "Lower sale price (85% of value)",
            "Less than market value",
        ),
        recommended=LOW_EQUITY_PCT <= equity_pct <= HIGH_EQUITY_PCT,
        description="Sell directly for a fast, guaranteed cash offer with no repairs.",
    )


def _short_sale(value: Decimal, balance: Decimal, equity_pct: Decimal) -> SaleOption:
    price = _money(value * SHORT_SALE_PCT)
    costs = SaleCosts(
        agent_commission=_money(price * SHORT_SALE_COMMISSION_PCT),
        closing_costs=_money(price * SHORT_SALE_CLOSING_PCT),
        repairs=ZERO,
    )
    return SaleOption(
        option_type=SaleOptionType.SHORT_SALE,
        name="Short Sale",
        timeline="90-180 days",
        timeline_days=135,
        gross_proceeds=price,
        costs=costs,
        net_proceeds=price - balance - costs.total,
        pros=(
            "Avoid foreclosure",
            "Less credit damage than foreclosure",
            "Lender forgives remaining balance",
            "Sold as-is (no repairs)",
        ),
        cons=(
            "Longest timeline (90-180 days)",
            "Requires lender approval",
            "Below market value (75%)",
            "Complex negotiation process",
            "May still owe deficiency",
            "Credit score impact",
        ),
        recommended=equity_pct < LOW_EQUITY_PCT,
        description="Sell for less than owed with lender approval to avoid foreclosure.",
    )


def compare_sale_options(
    property_value: Decimal,
    mortgage_balance: Decimal,
) -> SaleOptionsComparison:
    """Compare net proceeds of the three exit strategies.

    Args:
        property_value: Estimated market value.
        mortgage_balance: Remaining loan payoff.

    Returns:
        SaleOptionsComparison with options ordered traditional, cash offer, short sale.
        Exactly one option is recommended.

    Raises:
        InvalidInputError: property_value is zero or negative.
    """
    value = Decimal(str(property_value))
    balance = Decimal(str(mortgage_balance))
    if value <= 0:
        raise InvalidInputError("property_value", "must be greater than zero")

    equity = value - balance
    equity_pct = equity / value * 100

    return SaleOptionsComparison(
        property_value=value,
        mortgage_balance=balance,
        equity=equity,
        options=(
            _traditional(value, balance, equity_pct),
            _cash_offer(value, balance, equity_pct),
            _short_sale(value, balance, equity_pct),
        ),
    )
