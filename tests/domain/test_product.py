"""Unit tests for the Product aggregate."""

from decimal import Decimal

import pytest

from pms.domain.exceptions import InvalidPricingInput, ValidationError
from pms.domain.model.product import PricingFigures, Product
from pms.domain.model.value_objects import Money, Quantity, Rate


def _create(**overrides) -> Product:
    fields = dict(
        name="Widget",
        purchase_cost=Money.of("10"),
        estimated_quantity=Quantity(100),
        category="Tools",
        desired_margin=Rate.of("0.2"),
        tax_rate=Rate.of("0.1"),
        monthly_fixed_cost=Money.of("1000"),
    )
    fields.update(overrides)
    return Product.create(**fields)


class TestCreate:

    def test_new_product_is_unsaved_and_unpriced(self):
        p = _create(name="  Widget  ")
        assert p.id is None
        assert p.figures is None
        assert p.name == "Widget"

    def test_cost_volume(self):
        assert _create().cost_volume == Decimal("1000")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            _create(name="   ")

    def test_zero_purchase_cost_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            _create(purchase_cost=Money.of("0"))

    @pytest.mark.parametrize(
        "margin, tax",
        [("0.5", "0.5"), ("0.7", "0.3"), ("0.9", "0.2"), ("0.99", "0.99")],
    )
    def test_margin_plus_tax_at_or_above_one_rejected(self, margin, tax):
        with pytest.raises(InvalidPricingInput, match="below 100%"):
            _create(desired_margin=Rate.of(margin), tax_rate=Rate.of(tax))

    def test_margin_plus_tax_just_below_one_accepted(self):
        p = _create(desired_margin=Rate.of("0.5"), tax_rate=Rate.of("0.49"))
        assert p.desired_margin.value + p.tax_rate.value == Decimal("0.99")


class TestUpdateInputs:

    def test_overwrites_inputs_and_keeps_figures(self):
        p = _create()
        figures = PricingFigures(*(Money.of("1") for _ in range(7)))
        p.apply_figures(figures)

        p.update_inputs(
            name="Gizmo",
            purchase_cost=Money.of("12"),
            estimated_quantity=Quantity(3),
            category="Toys",
            desired_margin=Rate.of("0.1"),
            tax_rate=Rate.of("0.1"),
            monthly_fixed_cost=Money.of("500"),
        )

        assert p.name == "Gizmo"
        assert p.purchase_cost == Money.of("12")
        assert p.estimated_quantity == Quantity(3)
        assert p.monthly_fixed_cost == Money.of("500")
        assert p.figures is figures

    def test_invalid_update_leaves_product_untouched(self):
        p = _create()

        with pytest.raises(InvalidPricingInput):
            p.update_inputs(
                name="Gizmo",
                purchase_cost=Money.of("12"),
                estimated_quantity=Quantity(3),
                category="Toys",
                desired_margin=Rate.of("0.6"),
                tax_rate=Rate.of("0.4"),
                monthly_fixed_cost=Money.of("500"),
            )

        assert p.name == "Widget"
        assert p.desired_margin == Rate.of("0.2")
