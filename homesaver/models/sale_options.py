"""Sale options comparison data types."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


class SaleOptionType(Enum):
    TRADITIONAL = "traditional"
    CASH_OFFER = "cash_offer"
    SHORT_SALE = "short_sale"


@dataclass(frozen=True)
class SaleCosts:
    agent_commission: Decimal
    closing_costs: Decimal
    repairs: Decimal

    @property
    def total(self) -> Decimal:
        return self.agent_commission + self.closing_costs + self.repairs


@dataclass(frozen=True)
class SaleOption:
    option_type: SaleOptionType
    name: str
    timeline: str
    timeline_days: int
    gross_proceeds: Decimal
    costs: SaleCosts
    net_proceeds: Decimal
    pros: tuple[str, ...] = ()
    cons: tuple[str, ...] = ()
    recommended: bool = False
    description: str = ""


@dataclass(frozen=True)
class SaleOptionsComparison:
    property_value: Decimal
    mortgage_balance: Decimal
    equity: Decimal
    options: tuple[SaleOption, ...] = ()

    @property
    def equity_pct(self) -> Decimal:
        """Equity as a percentage of property value (40 means 40%)."""
        return self.equity / self.property_value * 100

    @property
    def recommended(self) -> Optional[SaleOption]:
        return next((opt for opt in self.options if opt.recommended), None)

    def get(self, option_type: SaleOptionType) -> SaleOption:
        return next(opt for opt in self.options if opt.option_type == option_type)
