"""Tests for the JSON-file-backed product repository."""

import json

from pms.domain.model.product import PricingFigures, Product
from pms.domain.model.value_objects import Money, Quantity, Rate
from pms.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def _product(name: str = "Widget") -> Product:
    return Product(
        id=None,
        name=name,
        purchase_cost=Money.of("10.00"),
        estimated_quantity=Quantity(100),
        category="Tools",
        desired_margin=Rate.of("0.2"),
        tax_rate=Rate.of("0.1"),
        monthly_fixed_cost=Money.of("1000"),
    )


def _figures() -> PricingFigures:
    return PricingFigures(
        fixed_cost_per_unit=Money.of("8.00"),
        total_base_cost=Money.of("18.00"),
        ideal_price=Money.of("25.71"),
        gross_profit_per_unit=Money.of("5.14"),
        gross_margin=Money.of("15.71"),
        monthly_profit=Money.of("1571.43"),
        revenue=Money.of("2571.43"),
    )


class TestJsonProductRepository:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "data" / "products.json"
        repo = JsonProductRepository(path)
        assert path.exists()
        assert repo.find_all() == []

    def test_save_assigns_sequential_ids(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")

        first = repo.save(_product("A"))
        second = repo.save(_product("B"))

        assert (first.id, second.id) == (1, 2)
        assert repo.exists_by_id(2)
        assert not repo.exists_by_id(3)

    def test_figures_survive_a_reload(self, tmp_path):
        path = tmp_path / "products.json"
        product = _product()
        product.apply_figures(_figures())
        JsonProductRepository(path).save(product)

        loaded = JsonProductRepository(path).find_by_id(product.id)

        assert loaded == product

    def test_unpriced_product_stored_without_figures(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).save(_product())

        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw[0]["figures"] is None

    def test_save_all_upserts(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        a = repo.save(_product("A"))
        a.name = "A2"

        repo.save_all([a, _product("B")])

        assert [p.name for p in repo.find_all()] == ["A2", "B"]

    def test_delete_ignores_unknown_ids(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        a = repo.save(_product("A"))
        repo.save(_product("B"))

        repo.save_all([], deleted_ids=[a.id, 999])

        assert [p.name for p in repo.find_all()] == ["B"]
        assert repo.find_by_id(a.id) is None

    def test_save_all_removes_deleted_ids_in_the_same_write(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        a = repo.save(_product("A"))
        b = repo.save(_product("B"))
        a.apply_figures(_figures())

        repo.save_all([a], deleted_ids=[b.id])

        assert repo.find_all() == [a]

    def test_ids_are_not_reused_after_a_batch_delete(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_product("A"))
        b = repo.save(_product("B"))

        c = repo.save_all([_product("C")], deleted_ids=[b.id])[0]

        assert c.id == 3

    def test_no_temporary_files_left_behind(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save_all([_product("A"), _product("B")])

        assert [p.name for p in tmp_path.iterdir()] == ["products.json"]
