"""HTTP client for the product list endpoint.

Mirrors the browser page that consumes the API: load the list once,
then render it as rows of text.
"""

import asyncio
import logging

import httpx

from config import settings
from models import ProductModel

logger = logging.getLogger(__name__)

PRODUCT_LIST_PATH = "/api/productlist"


async def fetch_products(client: httpx.AsyncClient) -> list[ProductModel]:
    """GET the product list and validate each entry."""
    resp = await client.get(PRODUCT_LIST_PATH)
    resp.raise_for_status()
    return [ProductModel.model_validate(item) for item in resp.json()]


class ProductListPage:
    """Fetch-once product list view."""

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10,
    ):
        self.base_url = base_url or settings.api_base_url
        self._transport = transport
        self._timeout = timeout
        self.products: list[ProductModel] | None = None
        self.error: str | None = None
        self._loaded = False
        self._load_lock = asyncio.Lock()

    @property
    def loaded(self) -> bool:
        return self._loaded

    async def load(self) -> None:
        if self._loaded:
            return

        # Callers that arrive while a fetch is in flight wait for it instead of refetching
        async with self._load_lock:
            if self._loaded:
                return

            async with httpx.AsyncClient(
                base_url=self.base_url, transport=self._transport, timeout=self._timeout
            ) as client:
                try:
                    products = await fetch_products(client)
                except (httpx.HTTPError, ValueError) as e:
                    logger.warning("Product list fetch failed: %s", e)
                    self.error = f"Error loading products: {e}"
                    return

            self.products = products
            self.error = None
            self._loaded = True

    def render(self) -> list[str]:
        if self.error:
            return [self.error]
        if self.products is None:
            return ["Loading..."]
        if not self.products:
            return ["No products available."]
        return [
            f"{p.id:>3}  {p.name:<16} ${p.price:>9,.2f}  stock {p.stock:>4}  {p.category.name} ({p.category.id})"
            for p in self.products
        ]
