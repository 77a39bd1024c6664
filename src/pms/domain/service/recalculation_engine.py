"""Domain service: Recalculation Engine.

Every product's fixed-cost share depends on the catalog-wide aggregate,
so any create, update or delete changes the figures of *all* products.
The engine therefore never patches a single record: each mutation ends
with a full repricing of the post-mutation catalog.

Every mutation runs in two phases:
  Phase 1: load the catalog, apply the change in memory and price every
           product.  Any failure here leaves storage untouched.
  Phase 2: persist the repriced catalog as one batch.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from pms.domain.exceptions import EntityNotFoundError, ValidationError
from pms.domain.model.product import PricingFigures, Product, validate_pricing_inputs
from pms.domain.model.value_objects import Money, Quantity, Rate
from pms.domain.repository.product_repository import ProductRepository
from pms.domain.service.catalog_aggregate import cost_volume_aggregate
from pms.domain.service.catalog_lock import CatalogLock
from pms.domain.service.pricing_calculator import price_product

logger = logging.getLogger(__name__)


class RecalculationEngine:

    def __init__(
        self,
        product_repo: ProductRepository,
        lock: CatalogLock | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._lock = lock or CatalogLock()

    # --- Mutations ------------------------------------------------------------

    def apply_create(self, product: Product) -> Product:
        """Price and store a new product, then reprice the rest."""
        with self._lock.exclusive():
            logger.info("Creating product '%s'", product.name)
            try:
                validate_pricing_inputs(
                    product.purchase_cost, product.desired_margin, product.tax_rate
                )
            except ValidationError as exc:
                logger.warning("Rejected product '%s': %s", product.name, exc)
                raise
            existing = self._product_repo.find_all()

            # Phase 1
            aggregate = cost_volume_aggregate(existing, pending=product)
            repriced = self._price_all([product, *existing], aggregate)

            # Phase 2
            saved = self._persist(repriced)[0]
            logger.info("Product created: '%s' (ID: %s)", saved.name, saved.id)
            return saved

    def apply_update(
        self,
        product_id: int,
        *,
        name: str,
        purchase_cost: Money,
        estimated_quantity: Quantity,
        category: str,
        desired_margin: Rate,
        tax_rate: Rate,
        monthly_fixed_cost: Money,
    ) -> Product:
        """Overwrite a product's inputs and reprice the whole catalog."""
        with self._lock.exclusive():
            logger.info("Updating product %s", product_id)
            products = self._product_repo.find_all()
            target = next((p for p in products if p.id == product_id), None)
            if target is None:
                logger.warning("Product not found for update: %s", product_id)
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            # Phase 1
            try:
                target.update_inputs(
                    name=name,
                    purchase_cost=purchase_cost,
                    estimated_quantity=estimated_quantity,
                    category=category,
                    desired_margin=desired_margin,
                    tax_rate=tax_rate,
                    monthly_fixed_cost=monthly_fixed_cost,
                )
            except ValidationError as exc:
                logger.warning("Rejected update of product %s: %s", product_id, exc)
                raise
            aggregate = cost_volume_aggregate(products)
            repriced = self._price_all(products, aggregate)

            # Phase 2
            self._persist(repriced)
            logger.info("Product updated: '%s' (ID: %s)", target.name, product_id)
            return target

    def apply_delete(self, product_id: int) -> None:
        """Remove a product and reprice the products that remain."""
        with self._lock.exclusive():
            logger.info("Deleting product %s", product_id)
            if not self._product_repo.exists_by_id(product_id):
                logger.warning("Product not found for deletion: %s", product_id)
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

            # Phase 1
            remaining = [
                p for p in self._product_repo.find_all() if p.id != product_id
            ]
            aggregate = cost_volume_aggregate(remaining)
            repriced = self._price_all(remaining, aggregate)

            # Phase 2: removal and repricing land in the same write
            self._persist(repriced, deleted_ids=[product_id])
            logger.info("Product deleted: %s", product_id)

    def recompute_all(self) -> list[Product]:
        """Reprice every stored product against the current aggregate."""
        with self._lock.exclusive():
            return self._recompute_all()

    # --- Queries --------------------------------------------------------------

    def snapshot(self) -> list[Product]:
        """Every product, as of the last committed mutation."""
        with self._lock.shared():
            return self._product_repo.find_all()

    def find(self, product_id: int) -> Product:
        with self._lock.shared():
            product = self._product_repo.find_by_id(product_id)
        if product is None:
            logger.warning("Product not found: %s", product_id)
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product

    # --- Internal helpers -----------------------------------------------------

    def _recompute_all(self) -> list[Product]:
        logger.info("Recalculating all products")
        products = self._product_repo.find_all()
        if not products:
            logger.info("No products to recalculate")
            return []

        aggregate = cost_volume_aggregate(products)
        saved = self._persist(self._price_all(products, aggregate))
        logger.info("Recalculated %d products", len(saved))
        return saved

    @staticmethod
    def _price_all(
        products: list[Product], aggregate: Decimal
    ) -> list[tuple[Product, PricingFigures]]:
        """Compute every product's figures without touching any product."""
        logger.debug("Pricing %d products against aggregate %s", len(products), aggregate)
        return [(p, price_product(p, aggregate)) for p in products]

    def _persist(
        self,
        repriced: list[tuple[Product, PricingFigures]],
        deleted_ids: list[int] | None = None,
    ) -> list[Product]:
        for product, figures in repriced:
            product.apply_figures(figures)
            logger.debug(
                "Product '%s' priced at %s", product.name, figures.ideal_price
            )
        if not repriced and not deleted_ids:
            return []
        return self._product_repo.save_all(
            [product for product, _ in repriced], deleted_ids=deleted_ids or ()
        )
