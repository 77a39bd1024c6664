"""Application service: Show Summary use case (query)."""

from __future__ import annotations

from pms.application.dto import SummaryDTO
from pms.domain.service.recalculation_engine import RecalculationEngine
from pms.domain.service.summary_projector import EmptyCatalog, project_summary


class ShowSummaryHandler:

    def __init__(self, engine: RecalculationEngine) -> None:
        self._engine = engine

    def handle(self) -> SummaryDTO:
        summary = project_summary(self._engine.snapshot())

        if isinstance(summary, EmptyCatalog):
            return SummaryDTO(has_products=False, status=summary.status)

        return SummaryDTO(
            has_products=True,
            status=summary.status,
            fixed_cost=str(summary.fixed_cost),
            revenue_total=str(summary.revenue_total),
            purchase_cost_total=str(summary.purchase_cost_total),
            contribution_total=str(summary.contribution_total),
            units_total=summary.units_total,
            roi=f"{summary.roi:.2f}%",
            break_even=summary.break_even,
        )
