"""Application service: List Products use case (query)."""

from __future__ import annotations

from pms.application.dto import ProductDTO
from pms.application.mapping import to_product_dto
from pms.domain.service.recalculation_engine import RecalculationEngine


class ListProductsHandler:

    def __init__(self, engine: RecalculationEngine) -> None:
        self._engine = engine

    def handle(self) -> list[ProductDTO]:
        return [to_product_dto(p) for p in self._engine.snapshot()]
