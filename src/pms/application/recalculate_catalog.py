"""Application service: Recalculate Catalog use case.

Reprices every product without changing any input.  Useful after
editing the data file by hand.
"""

from __future__ import annotations

from pms.domain.service.recalculation_engine import RecalculationEngine


class RecalculateCatalogHandler:

    def __init__(self, engine: RecalculationEngine) -> None:
        self._engine = engine

    def handle(self) -> int:
        """Return the number of products repriced."""
        return len(self._engine.recompute_all())
