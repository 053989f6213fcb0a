"""Thread-safe in-memory product store.

A single lock guards the id -> product mapping and the id counter. Every
product crossing the store boundary is copied, so callers never hold a
reference to the canonical instance.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from catalog.models import Product

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = (
    ("Sample Product A", 19.9),
    ("Sample Product B", 29.9),
)


class ProductStore:
    def __init__(self, seed: bool = True) -> None:
        self._products: dict[int, Product] = {}
        self._last_id = 0
        self._lock = threading.Lock()

        if seed:
            for name, price in SAMPLE_PRODUCTS:
                self.save(Product(name=name, price=price))

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def list(self) -> list[Product]:
        """Return copies of every stored product, in no particular order."""
        with self._lock:
            return [product.model_copy() for product in self._products.values()]

    def get_by_id(self, product_id: int | None) -> Product | None:
        if product_id is None:
            return None
        with self._lock:
            product = self._products.get(product_id)
            return product.model_copy() if product is not None else None

    def save(self, product: Product) -> Product:
        """Store a copy of ``product`` and return a copy of what was stored.

        A product without an id gets the next id from the counter. A product
        with an id replaces whatever is stored under it (last write wins) and
        leaves the counter alone.
        """
        with self._lock:
            stored, replaced = self._put(product)
            result = stored.model_copy()

        if replaced:
            logger.debug("Overwrote product %s", result.id)
        else:
            logger.debug("Saved product %s", result.id)
        return result

    def delete_by_id(self, product_id: int | None) -> None:
        if product_id is None:
            return
        with self._lock:
            removed = self._products.pop(product_id, None)

        if removed is not None:
            logger.debug("Deleted product %s", product_id)

    def snapshot(self) -> dict[int, Product]:
        """Return an independent id -> product copy of the current contents."""
        with self._lock:
            return {pid: product.model_copy() for pid, product in self._products.items()}

    def replace_all(self, products: Iterable[Product]) -> list[Product]:
        """Atomically swap the store contents for ``products``.

        Products without an id are allocated one exactly as ``save`` would.
        The counter is not reset, so ids handed out earlier are never reused.
        """
        incoming = list(products)
        with self._lock:
            self._products.clear()
            stored = [self._put(product)[0].model_copy() for product in incoming]

        logger.debug("Replaced store contents with %d products", len(stored))
        return stored

    def _put(self, product: Product) -> tuple[Product, bool]:
        # Caller must hold self._lock.
        if product.id is None:
            self._last_id += 1
            stored = product.model_copy(update={"id": self._last_id})
        else:
            stored = product.model_copy()
        replaced = stored.id in self._products
        self._products[stored.id] = stored
        return stored, replaced
