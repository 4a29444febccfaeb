"""
Catalog store - in-process, read-only product collection.
Challenge: Built once at startup, shared by concurrent requests without locking.
"""

import logging
from collections.abc import Iterable, Iterator

from app.catalog.seed import CATALOG_VARIANTS
from app.schemas.product import Product

logger = logging.getLogger(__name__)


class CatalogStore:
    """Immutable product collection keyed by string id. Iterates in seed order."""

    def __init__(self, products: Iterable[Product]):
        self._products: tuple[Product, ...] = tuple(products)
        self._by_key: dict[str, Product] = {}
        for product in self._products:
            if product.key in self._by_key:
                raise ValueError(f"Duplicate product id in catalog: {product.id!r}")
            self._by_key[product.key] = product

    @classmethod
    def from_variant(cls, variant: str) -> "CatalogStore":
        """Build the store from one of the seeded catalog variants ("basic" or "sku")."""
        try:
            records = CATALOG_VARIANTS[variant]
        except KeyError:
            raise ValueError(f"Unknown catalog variant: {variant!r}") from None
        store = cls(Product.model_validate(record) for record in records)
        logger.info("Catalog loaded: variant=%s products=%d", variant, len(store))
        return store

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    def get(self, product_id: str | int) -> Product | None:
        """Exact, case-sensitive id lookup."""
        return self._by_key.get(str(product_id))

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)
