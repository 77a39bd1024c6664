"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from pms.domain.service.recalculation_engine import RecalculationEngine
from pms.infrastructure.persistence.catalog_file_lock import FileCatalogLock
from pms.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from pms.infrastructure.settings import Settings, load_settings


@lru_cache(maxsize=1)
def settings() -> Settings:
    return load_settings()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().products_file)


@lru_cache(maxsize=1)
def catalog_engine() -> RecalculationEngine:
    # One engine per process so every thread shares the same catalog lock;
    # the file lock extends it to other processes on the same data file.
    return RecalculationEngine(
        product_repository(), lock=FileCatalogLock(settings().lock_file)
    )
