"""Product catalog source and domain types.

The catalog is a fixed literal list standing in for a database call.
Snapshots are immutable tuples, so a cached snapshot can be handed to any
number of callers without copying.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from services.cache import TTLCache

logger = logging.getLogger(__name__)

PRODUCT_CACHE_KEY = "ProductList"
PRODUCT_CACHE_TTL_SECONDS = 5 * 60


@dataclass(frozen=True)
class Category:
    id: int
    name: str


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: Decimal
    stock: int
    category: Category


CatalogSnapshot = tuple[Product, ...]

ELECTRONICS = Category(id=101, name="Electronics")
ACCESSORIES = Category(id=102, name="Accessories")


def generate_catalog() -> CatalogSnapshot:
    """Build a fresh snapshot of the product list."""
    return (
        Product(id=1, name="Laptop", price=Decimal("1200.50"), stock=25, category=ELECTRONICS),
        Product(id=2, name="Headphones", price=Decimal("50.00"), stock=100, category=ACCESSORIES),
        Product(id=3, name="Wireless Mouse", price=Decimal("25.99"), stock=150, category=ACCESSORIES),
        Product(id=4, name="USB-C Hub", price=Decimal("45.00"), stock=75, category=ELECTRONICS),
    )


def new_product_cache(**kwargs) -> TTLCache:
    return TTLCache(ttl_seconds=PRODUCT_CACHE_TTL_SECONDS, **kwargs)


def get_catalog(
    cache: TTLCache, generator: Callable[[], CatalogSnapshot] = generate_catalog
) -> CatalogSnapshot:
    """Serve the catalog from cache, regenerating it after the TTL lapses."""
    return cache.get_or_generate(PRODUCT_CACHE_KEY, generator)
