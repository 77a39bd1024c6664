"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from pms.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def exists_by_id(self, product_id: int) -> bool:
        """Return True if a product with this ID is stored."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist a new or updated product, assigning an ID if missing."""

    @abstractmethod
    def save_all(
        self, products: list[Product], deleted_ids: Iterable[int] = ()
    ) -> list[Product]:
        """Persist several products and remove ``deleted_ids`` as one batch.

        Either the whole batch is applied or none of it is.
        """
