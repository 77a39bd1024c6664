import click

from pms.domain.exceptions import DomainException
from pms.infrastructure.bootstrap import settings
from pms.infrastructure.cli.catalog_commands import recalculate, summary
from pms.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from pms.infrastructure.logging_config import setup_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log every recalculation step.")
def cli(verbose: bool) -> None:
    """PMS: Pricing Management System"""
    try:
        config = settings()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    setup_logging(config, level="DEBUG" if verbose else None)


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
cli.add_command(recalculate)
cli.add_command(summary)
