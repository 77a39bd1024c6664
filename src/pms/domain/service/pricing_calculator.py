"""Domain service: Pricing Calculator.

Pure functions deriving one product's figures from its inputs and the
catalog-wide cost-volume aggregate.  Each step feeds the next:

    fixed cost per unit -> total base cost -> ideal price
        -> gross profit per unit, gross margin -> monthly profit, revenue

Intermediate values keep full Decimal precision; ``price_product`` rounds
each figure half-up to cents only when building the final result.
"""

from __future__ import annotations

from decimal import Decimal

from pms.domain.exceptions import ArithmeticInconsistency, InvalidPricingInput
from pms.domain.model.product import PricingFigures, Product
from pms.domain.model.value_objects import Money, Quantity, Rate


def fixed_cost_per_unit(
    monthly_fixed_cost: Money, purchase_cost: Money, aggregate: Decimal
) -> Money:
    """Share of monthly overhead carried by one unit.

    Overhead is split in proportion to the unit's purchase cost relative
    to the whole catalog's cost volume.  An empty aggregate allocates
    nothing.
    """
    if aggregate <= 0:
        return Money.zero(monthly_fixed_cost.currency)
    return monthly_fixed_cost * (purchase_cost.amount / aggregate)


def total_base_cost(purchase_cost: Money, fixed_cost_per_unit: Money) -> Money:
    return purchase_cost + fixed_cost_per_unit


def ideal_price(total_base_cost: Money, desired_margin: Rate, tax_rate: Rate) -> Money:
    """Price that leaves the margin and tax share on top of base cost."""
    denominator = Decimal("1") - desired_margin.value - tax_rate.value
    if denominator <= 0:
        raise InvalidPricingInput(
            f"Desired margin ({desired_margin}) plus tax rate ({tax_rate}) "
            "must be below 100%"
        )
    return total_base_cost / denominator


def gross_profit_per_unit(ideal_price: Money, desired_margin: Rate) -> Money:
    return ideal_price * desired_margin.value


def gross_margin(ideal_price: Money, purchase_cost: Money) -> Money:
    # Measured against raw purchase cost; the overhead share is not deducted.
    return ideal_price - purchase_cost


def monthly_profit(gross_margin: Money, estimated_quantity: Quantity) -> Money:
    return gross_margin * estimated_quantity.value


def revenue(ideal_price: Money, estimated_quantity: Quantity) -> Money:
    return ideal_price * estimated_quantity.value


def price_product(product: Product, aggregate: Decimal) -> PricingFigures:
    """Run every step for *product* against the given catalog aggregate.

    Raises:
        ArithmeticInconsistency: the aggregate cannot contain this
            product's own cost volume.
        InvalidPricingInput: margin plus tax leaves no room for a price.
    """
    own_volume = product.cost_volume
    if aggregate < own_volume or (aggregate == 0 and own_volume != 0):
        raise ArithmeticInconsistency(
            f"Aggregate {aggregate} does not cover cost volume {own_volume} "
            f"of product '{product.name}'"
        )

    fixed = fixed_cost_per_unit(
        product.monthly_fixed_cost, product.purchase_cost, aggregate
    )
    base = total_base_cost(product.purchase_cost, fixed)
    price = ideal_price(base, product.desired_margin, product.tax_rate)
    profit_per_unit = gross_profit_per_unit(price, product.desired_margin)
    margin = gross_margin(price, product.purchase_cost)

    return PricingFigures(
        fixed_cost_per_unit=fixed.quantize(),
        total_base_cost=base.quantize(),
        ideal_price=price.quantize(),
        gross_profit_per_unit=profit_per_unit.quantize(),
        gross_margin=margin.quantize(),
        monthly_profit=monthly_profit(margin, product.estimated_quantity).quantize(),
        revenue=revenue(price, product.estimated_quantity).quantize(),
    )
