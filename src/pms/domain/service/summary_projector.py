"""Domain service: Summary Projector (read-only).

Folds the current catalog into one financial summary: overhead, totals,
aggregate ROI and whether projected revenue covers the overhead.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from pms.domain.model.product import Product
from pms.domain.model.value_objects import Money

ROI_RATIO_PLACES = Decimal("0.0001")


@dataclass(frozen=True)
class EmptyCatalog:
    """Returned instead of a summary when no product is registered."""

    status: str = "No products registered"


@dataclass(frozen=True)
class CatalogSummary:

    fixed_cost: Money
    revenue_total: Money
    purchase_cost_total: Money
    contribution_total: Money
    units_total: int
    roi: Decimal  # percent
    break_even: bool

    @property
    def status(self) -> str:
        return "Above break-even" if self.break_even else "Below break-even"


def project_summary(products: list[Product]) -> CatalogSummary | EmptyCatalog:
    if not products:
        return EmptyCatalog()

    # Overhead is stored on every product but means the same thing on each.
    fixed_cost = products[0].monthly_fixed_cost
    currency = fixed_cost.currency

    revenue_total = Money.zero(currency)
    purchase_cost_total = Money.zero(currency)
    contribution_total = Money.zero(currency)
    units_total = 0

    for p in products:
        qty = p.estimated_quantity.value
        purchase_cost_total += p.purchase_cost * qty
        units_total += qty
        if p.figures is not None:
            revenue_total += p.figures.revenue
            contribution_total += p.figures.gross_profit_per_unit * qty

    if purchase_cost_total.amount > 0:
        ratio = (contribution_total.amount / purchase_cost_total.amount).quantize(
            ROI_RATIO_PLACES, rounding=ROUND_HALF_UP
        )
        roi = ratio * 100
    else:
        roi = Decimal("0")

    return CatalogSummary(
        fixed_cost=fixed_cost,
        revenue_total=revenue_total,
        purchase_cost_total=purchase_cost_total,
        contribution_total=contribution_total,
        units_total=units_total,
        roi=roi,
        break_even=revenue_total >= fixed_cost,
    )
