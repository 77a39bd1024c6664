"""Application service: Create Product use case."""

from __future__ import annotations

from pms.application.dto import ProductDTO, ProductInputs
from pms.application.mapping import input_fields, to_product_dto
from pms.domain.model.product import Product
from pms.domain.service.recalculation_engine import RecalculationEngine


class CreateProductHandler:

    def __init__(self, engine: RecalculationEngine) -> None:
        self._engine = engine

    def handle(self, inputs: ProductInputs) -> ProductDTO:
        """Add a new product to the catalog.

        The new product is priced against the catalog it joins, and every
        existing product is repriced because the shared aggregate grew.
        """
        product = Product.create(**input_fields(inputs))
        return to_product_dto(self._engine.apply_create(product))
