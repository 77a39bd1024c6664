"""Application service: Update Product use case."""

from __future__ import annotations

from pms.application.dto import ProductDTO, ProductInputs
from pms.application.mapping import input_fields, to_product_dto
from pms.domain.service.recalculation_engine import RecalculationEngine


class UpdateProductHandler:

    def __init__(self, engine: RecalculationEngine) -> None:
        self._engine = engine

    def handle(self, product_id: int, inputs: ProductInputs) -> ProductDTO:
        """Replace a product's inputs and reprice the whole catalog."""
        product = self._engine.apply_update(product_id, **input_fields(inputs))
        return to_product_dto(product)
