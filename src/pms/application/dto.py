"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductInputs:
    """Input: the client-set fields of a product, as typed by the user."""

    name: str
    purchase_cost: str
    estimated_quantity: int
    category: str
    desired_margin: str  # fraction, e.g. "0.25"
    tax_rate: str
    monthly_fixed_cost: str


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product and its derived figures as displayed to the user.

    Money fields are formatted, e.g. "$25.71".  Figures are ``None`` for
    a product that has not been priced yet.
    """

    id: int
    name: str
    category: str
    purchase_cost: str
    estimated_quantity: int
    desired_margin: str  # formatted, e.g. "20.00%"
    tax_rate: str
    monthly_fixed_cost: str
    fixed_cost_per_unit: str | None
    total_base_cost: str | None
    ideal_price: str | None
    gross_profit_per_unit: str | None
    gross_margin: str | None
    monthly_profit: str | None
    revenue: str | None


@dataclass(frozen=True)
class SummaryDTO:
    """Output: the catalog-wide financial summary.

    When the catalog is empty only ``status`` is set.
    """

    has_products: bool
    status: str
    fixed_cost: str | None = None
    revenue_total: str | None = None
    purchase_cost_total: str | None = None
    contribution_total: str | None = None
    units_total: int | None = None
    roi: str | None = None
    break_even: bool | None = None
