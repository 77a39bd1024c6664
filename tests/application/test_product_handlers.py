"""Integration tests for the product use cases."""

import pytest

from pms.application.create_product import CreateProductHandler
from pms.application.delete_product import DeleteProductHandler
from pms.application.dto import ProductInputs
from pms.application.list_products import ListProductsHandler
from pms.application.recalculate_catalog import RecalculateCatalogHandler
from pms.application.show_product import ShowProductHandler
from pms.application.update_product import UpdateProductHandler
from pms.domain.exceptions import (
    EntityNotFoundError,
    InvalidPricingInput,
    ValidationError,
)
from pms.domain.service.recalculation_engine import RecalculationEngine
from tests.fakes import FakeProductRepository


def _inputs(name="Widget", cost="10", qty=100, margin="0.2", tax="0.1", fixed="1000"):
    return ProductInputs(
        name=name,
        purchase_cost=cost,
        estimated_quantity=qty,
        category="Tools",
        desired_margin=margin,
        tax_rate=tax,
        monthly_fixed_cost=fixed,
    )


def _setup():
    repo = FakeProductRepository()
    engine = RecalculationEngine(repo)
    create = CreateProductHandler(engine)
    widget = create.handle(_inputs())
    gadget = create.handle(_inputs(name="Gadget", cost="5", qty=50, margin="0.3"))
    return engine, repo, widget, gadget


class TestCreateProduct:

    def test_returns_formatted_figures(self):
        engine, repo, widget, gadget = _setup()

        assert gadget.id == 2
        assert gadget.ideal_price == "$15.00"
        assert gadget.fixed_cost_per_unit == "$4.00"
        assert gadget.desired_margin == "30.00%"
        assert gadget.revenue == "$750.00"

    @pytest.mark.parametrize(
        "margin, tax", [("0.7", "0.3"), ("1", "0"), ("0", "1"), ("1.5", "0")]
    )
    def test_margin_plus_tax_rejected(self, margin, tax):
        engine, repo, widget, gadget = _setup()

        with pytest.raises(InvalidPricingInput):
            CreateProductHandler(engine).handle(_inputs(margin=margin, tax=tax))

        assert len(repo.find_all()) == 2

    def test_garbage_cost_rejected(self):
        engine, _, _, _ = _setup()

        with pytest.raises(ValidationError, match="Invalid money amount"):
            CreateProductHandler(engine).handle(_inputs(cost="abc"))

    def test_garbage_quantity_rejected(self):
        engine, _, _, _ = _setup()

        with pytest.raises(ValidationError, match="estimated quantity"):
            CreateProductHandler(engine).handle(_inputs(qty="many"))


class TestUpdateProduct:

    def test_update_reprices_others(self):
        engine, repo, widget, gadget = _setup()

        UpdateProductHandler(engine).handle(widget.id, _inputs(qty=200))

        refreshed = ShowProductHandler(engine).handle(gadget.id)
        assert refreshed.fixed_cost_per_unit == "$2.22"

    def test_unknown_id(self):
        engine, _, _, _ = _setup()

        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(engine).handle(77, _inputs())


class TestDeleteProduct:

    def test_delete_reprices_remaining(self):
        engine, repo, widget, gadget = _setup()

        DeleteProductHandler(engine).handle(gadget.id)

        remaining = ListProductsHandler(engine).handle()
        assert [p.name for p in remaining] == ["Widget"]
        assert remaining[0].fixed_cost_per_unit == "$10.00"
        assert remaining[0].ideal_price == "$28.57"

    def test_unknown_id(self):
        engine, _, _, _ = _setup()

        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(engine).handle(77)


class TestQueries:

    def test_show_unknown_product(self):
        engine, _, _, _ = _setup()

        with pytest.raises(EntityNotFoundError):
            ShowProductHandler(engine).handle(77)

    def test_list_empty_catalog(self):
        engine = RecalculationEngine(FakeProductRepository())
        assert ListProductsHandler(engine).handle() == []

    def test_recalculate_counts_products(self):
        engine, _, _, _ = _setup()
        assert RecalculateCatalogHandler(engine).handle() == 2
