"""Product aggregate.

A product carries two kinds of data: the inputs a client sets (cost,
expected volume, margin, tax share, overhead) and the pricing figures
derived from them.  Figures depend on every other product in the
catalog, so they are only ever written by the recalculation engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from pms.domain.exceptions import InvalidPricingInput, ValidationError
from pms.domain.model.value_objects import Money, Quantity, Rate


@dataclass(frozen=True)
class PricingFigures:
    """Derived figures for one product, rounded to cents."""

    fixed_cost_per_unit: Money
    total_base_cost: Money
    ideal_price: Money
    gross_profit_per_unit: Money
    gross_margin: Money
    monthly_profit: Money
    revenue: Money


def validate_pricing_inputs(
    purchase_cost: Money, desired_margin: Rate, tax_rate: Rate
) -> None:
    """Reject inputs that cannot produce a price."""
    if purchase_cost.amount <= 0:
        raise ValidationError("Purchase cost must be greater than zero")
    if desired_margin.value + tax_rate.value >= Decimal("1"):
        raise InvalidPricingInput(
            f"Desired margin ({desired_margin}) plus tax rate ({tax_rate}) "
            "must be below 100%"
        )


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products; it enforces the business
    rules.  The ``__init__`` is intentionally simple so the repository
    can reconstitute persisted products without re-validating.
    """

    id: int | None
    name: str
    purchase_cost: Money
    estimated_quantity: Quantity
    category: str
    desired_margin: Rate
    tax_rate: Rate
    monthly_fixed_cost: Money
    figures: PricingFigures | None = field(default=None)

    # --- Factory --------------------------------------------------------------

    @classmethod
    def create(
        cls,
        *,
        name: str,
        purchase_cost: Money,
        estimated_quantity: Quantity,
        category: str,
        desired_margin: Rate,
        tax_rate: Rate,
        monthly_fixed_cost: Money,
    ) -> Product:
        """Build a new, unsaved, unpriced product."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        validate_pricing_inputs(purchase_cost, desired_margin, tax_rate)
        return cls(
            id=None,
            name=name.strip(),
            purchase_cost=purchase_cost,
            estimated_quantity=estimated_quantity,
            category=category.strip(),
            desired_margin=desired_margin,
            tax_rate=tax_rate,
            monthly_fixed_cost=monthly_fixed_cost,
        )

    # --- Behaviour ------------------------------------------------------------

    @property
    def cost_volume(self) -> Decimal:
        """Purchase cost times estimated quantity."""
        return self.purchase_cost.amount * self.estimated_quantity.value

    def update_inputs(
        self,
        *,
        name: str,
        purchase_cost: Money,
        estimated_quantity: Quantity,
        category: str,
        desired_margin: Rate,
        tax_rate: Rate,
        monthly_fixed_cost: Money,
    ) -> None:
        """Overwrite every client-set field.

        The existing figures are left in place; they become stale until
        the next recompute pass replaces them.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        validate_pricing_inputs(purchase_cost, desired_margin, tax_rate)
        self.name = name.strip()
        self.purchase_cost = purchase_cost
        self.estimated_quantity = estimated_quantity
        self.category = category.strip()
        self.desired_margin = desired_margin
        self.tax_rate = tax_rate
        self.monthly_fixed_cost = monthly_fixed_cost

    def apply_figures(self, figures: PricingFigures) -> None:
        self.figures = figures
