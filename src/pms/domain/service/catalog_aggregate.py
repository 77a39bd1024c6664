"""Domain service: Catalog Aggregate.

The allocation denominator shared by every product: the sum of
purchase cost times estimated quantity across the catalog.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from pms.domain.model.product import Product


def cost_volume_aggregate(
    products: Iterable[Product], pending: Product | None = None
) -> Decimal:
    """Sum the cost volume of *products*.

    ``pending`` is a product about to be created: it is counted even
    though it is not part of the persisted set yet, so the aggregate
    describes the catalog as it will be once the mutation commits.
    """
    total = sum((p.cost_volume for p in products), Decimal("0"))
    if pending is not None:
        total += pending.cost_volume
    return total
