"""Application service: Delete Product use case."""

from __future__ import annotations

from pms.domain.service.recalculation_engine import RecalculationEngine


class DeleteProductHandler:

    def __init__(self, engine: RecalculationEngine) -> None:
        self._engine = engine

    def handle(self, product_id: int) -> None:
        self._engine.apply_delete(product_id)
