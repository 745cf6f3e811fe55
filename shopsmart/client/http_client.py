"""
Catalog service HTTP client.

Every request opens its own ``httpx.AsyncClient`` and returns the decoded
JSON body. HTTP status codes are not turned into exceptions: a 404 or 500
with a JSON body is handed back like any other payload and the caller reads
its ``success`` flag. Connection failures and undecodable bodies raise.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from shopsmart.utils.config_loader import ClientConfig

logger = logging.getLogger(__name__)


class CatalogApiClient:
    def __init__(
        self,
        base_url: str = "",
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or "").rstrip("/")
        self.timeout_seconds = timeout_seconds
        # Injected for tests (httpx.MockTransport / httpx.ASGITransport)
        self.transport = transport

    @classmethod
    def from_config(cls, cfg: ClientConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> "CatalogApiClient":
        return cls(base_url=cfg.base_url, timeout_seconds=cfg.timeout_seconds, transport=transport)

    async def _get_json(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s", url)
        async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
            response = await client.get(url)
            logger.info("GET %s -> %s", url, response.status_code)
            return response.json()

    async def fetch_products(self) -> Any:
        return await self._get_json("/api/products")

    async def fetch_product(self, product_id: int) -> Any:
        return await self._get_json(f"/api/products/{product_id}")

    async def fetch_health(self) -> Any:
        return await self._get_json("/api/health")
