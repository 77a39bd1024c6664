"""Application service: Show Product use case (query)."""

from __future__ import annotations

from pms.application.dto import ProductDTO
from pms.application.mapping import to_product_dto
from pms.domain.service.recalculation_engine import RecalculationEngine


class ShowProductHandler:

    def __init__(self, engine: RecalculationEngine) -> None:
        self._engine = engine

    def handle(self, product_id: int) -> ProductDTO:
        """Return one product, or raise EntityNotFoundError."""
        return to_product_dto(self._engine.find(product_id))
