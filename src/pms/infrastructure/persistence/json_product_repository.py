"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Iterable
from decimal import Decimal
from pathlib import Path

from pms.domain.model.product import PricingFigures, Product
from pms.domain.model.value_objects import Money, Quantity, Rate
from pms.domain.repository.product_repository import ProductRepository

_FIGURE_FIELDS = (
    "fixed_cost_per_unit",
    "total_base_cost",
    "ideal_price",
    "gross_profit_per_unit",
    "gross_margin",
    "monthly_profit",
    "revenue",
)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def find_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def find_by_id(self, product_id: int) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def exists_by_id(self, product_id: int) -> bool:
        return any(raw["id"] == product_id for raw in self._load_raw())

    def save(self, product: Product) -> Product:
        return self.save_all([product])[0]

    def save_all(
        self, products: list[Product], deleted_ids: Iterable[int] = ()
    ) -> list[Product]:
        stored = self._load_raw()
        next_id = max((r["id"] for r in stored), default=0) + 1
        removed = set(deleted_ids)
        rows = [r for r in stored if r["id"] not in removed]
        index = {r["id"]: i for i, r in enumerate(rows)}

        for product in products:
            if product.id is None:
                product.id = next_id
                next_id += 1
            # Upsert: replace if exists, otherwise append
            if product.id in index:
                rows[index[product.id]] = self._to_raw(product)
            else:
                index[product.id] = len(rows)
                rows.append(self._to_raw(product))

        self._persist_raw(rows)
        return products

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        figures = None
        if product.figures is not None:
            figures = {
                name: str(getattr(product.figures, name).amount)
                for name in _FIGURE_FIELDS
            }
        return {
            "id": product.id,
            "name": product.name,
            "category": product.category,
            "currency": product.purchase_cost.currency,
            "purchase_cost": str(product.purchase_cost.amount),
            "estimated_quantity": product.estimated_quantity.value,
            "desired_margin": str(product.desired_margin.value),
            "tax_rate": str(product.tax_rate.value),
            "monthly_fixed_cost": str(product.monthly_fixed_cost.amount),
            "figures": figures,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        currency = raw.get("currency", "USD")

        figures = None
        if raw.get("figures"):
            figures = PricingFigures(
                **{
                    name: Money(Decimal(raw["figures"][name]), currency)
                    for name in _FIGURE_FIELDS
                }
            )
        return Product(
            id=raw["id"],
            name=raw["name"],
            category=raw.get("category", ""),
            purchase_cost=Money(Decimal(raw["purchase_cost"]), currency),
            estimated_quantity=Quantity(raw["estimated_quantity"]),
            desired_margin=Rate(Decimal(raw["desired_margin"])),
            tax_rate=Rate(Decimal(raw["tax_rate"])),
            monthly_fixed_cost=Money(Decimal(raw["monthly_fixed_cost"]), currency),
            figures=figures,
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, rows: list[dict]) -> None:
        # Write to a sibling temp file and swap it in, so a batch is
        # either fully on disk or not at all.
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=".products-", suffix=".json"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(rows, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
