"""Catalog lookups used while assembling orders.

The order core only depends on :class:`CatalogClient`; the HTTP
implementation talks to the catalog service and tests plug in an
in-memory double.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Protocol

import httpx
import structlog

from order_service.core.config import settings
from order_service.errors import CatalogUnavailable, ProductNotFound

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProductSnapshot:
    """Price and SKU of a product as the catalog reported them at lookup time."""
    product_id: int
    sku_code: str
    price: Decimal
    name: Optional[str] = None


class CatalogClient(Protocol):
    def resolve(self, product_id: int) -> ProductSnapshot:
        """Return the current snapshot or raise ProductNotFound / CatalogUnavailable."""
        ...


class HttpCatalogClient:
    """Resolves products through ``GET /catalog/v1/products/{id}``."""

    def __init__(self, client: httpx.Client, base_url: str | None = None):
        self._client = client
        self._base_url = (base_url or settings.CATALOG_BASE).rstrip("/")

    def resolve(self, product_id: int) -> ProductSnapshot:
        url = f"{self._base_url}/catalog/v1/products/{product_id}"
        try:
            resp = self._client.get(url)
        except httpx.TimeoutException as exc:
            logger.warning("catalog.timeout", product_id=product_id, url=url)
            raise CatalogUnavailable(f"Catalog lookup timed out for product {product_id}") from exc
        except httpx.RequestError as exc:
            logger.warning("catalog.unreachable", product_id=product_id, url=url, error=str(exc))
            raise CatalogUnavailable("Catalog unavailable") from exc

        # 422: the catalog rejected the id itself, so no such product can exist
        if resp.status_code in (404, 422):
            raise ProductNotFound(product_id)
        if resp.status_code != 200:
            logger.warning("catalog.bad_status", product_id=product_id, status_code=resp.status_code)
            raise CatalogUnavailable(f"Catalog answered {resp.status_code} for product {product_id}")

        try:
            p = resp.json()
            return ProductSnapshot(
                product_id=product_id,
                sku_code=p["sku_code"],
                price=Decimal(str(p["price"])),
                name=p.get("name"),
            )
        except (ValueError, KeyError, TypeError, InvalidOperation) as exc:
            logger.warning("catalog.bad_payload", product_id=product_id)
            raise CatalogUnavailable(f"Catalog returned a malformed product {product_id}") from exc


def open_http_client() -> httpx.Client:
    return httpx.Client(timeout=settings.CATALOG_TIMEOUT)
