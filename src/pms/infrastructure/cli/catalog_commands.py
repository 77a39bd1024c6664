"""CLI commands acting on the catalog as a whole."""

from __future__ import annotations

import click

from pms.application.recalculate_catalog import RecalculateCatalogHandler
from pms.application.show_summary import ShowSummaryHandler
from pms.domain.exceptions import DomainException
from pms.infrastructure.bootstrap import catalog_engine


@click.command("summary")
def summary() -> None:
    """Show the consolidated financial summary."""
    handler = ShowSummaryHandler(engine=catalog_engine())

    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.has_products:
        click.echo(dto.status)
        return

    rows = [
        ("Monthly fixed cost", dto.fixed_cost),
        ("Total monthly revenue", dto.revenue_total),
        ("Total purchase cost", dto.purchase_cost_total),
        ("Total contribution", dto.contribution_total),
        ("Estimated unit sales", str(dto.units_total)),
        ("Overall ROI", dto.roi),
    ]
    for label, value in rows:
        click.echo(f"{label:<24} {value:>14}")
    click.echo("-" * 39)
    click.echo(dto.status)


@click.command("recalculate")
def recalculate() -> None:
    """Reprice every product against the current catalog."""
    handler = RecalculateCatalogHandler(engine=catalog_engine())

    try:
        count = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Recalculated {count} product(s)")
