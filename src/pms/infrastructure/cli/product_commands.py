"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from pms.application.create_product import CreateProductHandler
from pms.application.delete_product import DeleteProductHandler
from pms.application.dto import ProductDTO, ProductInputs
from pms.application.list_products import ListProductsHandler
from pms.application.show_product import ShowProductHandler
from pms.application.update_product import UpdateProductHandler
from pms.domain.exceptions import DomainException
from pms.infrastructure.bootstrap import catalog_engine


def _input_options(func):
    """Options shared by ``add`` and ``update``: every client-set field."""
    options = [
        click.option("--name", required=True, help="Product name."),
        click.option("--cost", required=True, help="Purchase cost per unit (e.g. 10.00)."),
        click.option("--quantity", required=True, type=int, help="Estimated monthly sales."),
        click.option("--category", default="", help="Free-text category."),
        click.option("--margin", required=True, help="Desired margin as a fraction (e.g. 0.2)."),
        click.option("--tax", required=True, help="Taxes and variable costs as a fraction."),
        click.option("--fixed-cost", required=True, help="Monthly fixed cost (e.g. 1000)."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _inputs(name, cost, quantity, category, margin, tax, fixed_cost) -> ProductInputs:
    return ProductInputs(
        name=name,
        purchase_cost=cost,
        estimated_quantity=quantity,
        category=category,
        desired_margin=margin,
        tax_rate=tax,
        monthly_fixed_cost=fixed_cost,
    )


def _display_product(dto: ProductDTO) -> None:
    """Shared formatting for displaying one product."""
    click.echo(f"Product #{dto.id}  {dto.name}  ({dto.category or 'uncategorised'})")
    click.echo(f"  {'Purchase cost':<24} {dto.purchase_cost:>12}")
    click.echo(f"  {'Estimated quantity':<24} {dto.estimated_quantity:>12}")
    click.echo(f"  {'Desired margin':<24} {dto.desired_margin:>12}")
    click.echo(f"  {'Taxes / variable costs':<24} {dto.tax_rate:>12}")
    click.echo(f"  {'Monthly fixed cost':<24} {dto.monthly_fixed_cost:>12}")
    click.echo(f"  {'-'*37}")
    rows = [
        ("Fixed cost per unit", dto.fixed_cost_per_unit),
        ("Total base cost", dto.total_base_cost),
        ("Ideal price", dto.ideal_price),
        ("Gross profit per unit", dto.gross_profit_per_unit),
        ("Gross margin", dto.gross_margin),
        ("Monthly profit", dto.monthly_profit),
        ("Revenue", dto.revenue),
    ]
    for label, value in rows:
        click.echo(f"  {label:<24} {value or '-':>12}")


@click.command("add")
@_input_options
def product_add(name, cost, quantity, category, margin, tax, fixed_cost) -> None:
    """Add a new product and reprice the catalog."""
    handler = CreateProductHandler(engine=catalog_engine())

    try:
        dto = handler.handle(_inputs(name, cost, quantity, category, margin, tax, fixed_cost))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' added at {dto.ideal_price}")


@click.command("list")
def product_list() -> None:
    """List all products with their ideal prices."""
    products = ListProductsHandler(engine=catalog_engine()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<6} {'Name':<20} {'Cost':>10} {'Qty':>6} {'Fixed/unit':>11} {'Price':>10} {'Revenue':>12}"
    )
    click.echo("-" * 81)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.purchase_cost:>10} {p.estimated_quantity:>6} "
            f"{p.fixed_cost_per_unit or '-':>11} {p.ideal_price or '-':>10} {p.revenue or '-':>12}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show one product and all of its derived figures."""
    handler = ShowProductHandler(engine=catalog_engine())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@_input_options
def product_update(product_id, name, cost, quantity, category, margin, tax, fixed_cost) -> None:
    """Replace a product's inputs and reprice the catalog."""
    handler = UpdateProductHandler(engine=catalog_engine())

    try:
        dto = handler.handle(
            product_id, _inputs(name, cost, quantity, category, margin, tax, fixed_cost)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} updated, ideal price now {dto.ideal_price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Delete a product and reprice the remaining catalog."""
    handler = DeleteProductHandler(engine=catalog_engine())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")
