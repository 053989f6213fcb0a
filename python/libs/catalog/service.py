"""Product service sitting between the HTTP routes and the store."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from catalog.models import Product
from catalog.store import ProductStore

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for catalog errors."""


class ProductNotFoundError(CatalogError):
    def __init__(self, product_id: int | None) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


@dataclass(frozen=True)
class Found:
    product: Product


@dataclass(frozen=True)
class Missing:
    product_id: int | None


class ProductService:
    def __init__(self, store: ProductStore) -> None:
        self.store = store

    def list_all(self) -> list[Product]:
        return self.store.list()

    def lookup(self, product_id: int | None) -> Found | Missing:
        product = self.store.get_by_id(product_id)
        if product is None:
            return Missing(product_id)
        return Found(product)

    def get_or_fail(self, product_id: int | None) -> Product:
        """Return the product or raise ProductNotFoundError.

        Unlike ``lookup``, a missing product is treated as an error the caller
        has to handle or let propagate.
        """
        result = self.lookup(product_id)
        if isinstance(result, Missing):
            logger.debug("Product %s not found", product_id)
            raise ProductNotFoundError(product_id)
        return result.product

    def create(self, product: Product) -> Product:
        # No validation: names and prices are stored as given.
        return self.store.save(product)
