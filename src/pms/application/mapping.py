"""Conversions between DTOs and domain objects shared by the handlers."""

from __future__ import annotations

from typing import Any

from pms.application.dto import ProductDTO, ProductInputs
from pms.domain.exceptions import ValidationError
from pms.domain.model.product import Product
from pms.domain.model.value_objects import Money, Quantity, Rate


def input_fields(inputs: ProductInputs) -> dict[str, Any]:
    """Turn raw user input into the keyword arguments of ``Product.create``."""
    try:
        quantity = int(inputs.estimated_quantity)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"Invalid estimated quantity: {inputs.estimated_quantity!r}"
        ) from exc

    return {
        "name": inputs.name,
        "purchase_cost": Money.of(inputs.purchase_cost),
        "estimated_quantity": Quantity(quantity),
        "category": inputs.category or "",
        "desired_margin": Rate.of(inputs.desired_margin),
        "tax_rate": Rate.of(inputs.tax_rate),
        "monthly_fixed_cost": Money.of(inputs.monthly_fixed_cost),
    }


def to_product_dto(product: Product) -> ProductDTO:
    figures = product.figures

    def fmt(attr: str) -> str | None:
        return None if figures is None else str(getattr(figures, attr))

    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        category=product.category,
        purchase_cost=str(product.purchase_cost),
        estimated_quantity=product.estimated_quantity.value,
        desired_margin=str(product.desired_margin),
        tax_rate=str(product.tax_rate),
        monthly_fixed_cost=str(product.monthly_fixed_cost),
        fixed_cost_per_unit=fmt("fixed_cost_per_unit"),
        total_base_cost=fmt("total_base_cost"),
        ideal_price=fmt("ideal_price"),
        gross_profit_per_unit=fmt("gross_profit_per_unit"),
        gross_margin=fmt("gross_margin"),
        monthly_profit=fmt("monthly_profit"),
        revenue=fmt("revenue"),
    )
