"""
Storefront shell: navigation chrome, product dashboard and footer status.

The dashboard and the health indicator are mounted concurrently and never
see each other's outcome. The chrome renders whatever state they are in.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

from shopsmart.client.dashboard import Dashboard
from shopsmart.client.health import HealthIndicator
from shopsmart.error_handler import ErrorHandler

logger = logging.getLogger(__name__)

BRAND = "ShopSmart"
COPYRIGHT = "© 2026 ShopSmart. All rights reserved."

NAV_LINKS: List[Dict[str, Any]] = [
    {"label": "Products", "active": True},
    {"label": "Categories", "active": False},
    {"label": "Cart", "active": False},
]
NAV_BUTTON = "Sign In"


class StorefrontShell:
    def __init__(self, api_client, error_handler: Optional[ErrorHandler] = None):
        errors = error_handler or ErrorHandler()
        self.dashboard = Dashboard(api_client, error_handler=errors)
        self.health = HealthIndicator(api_client, error_handler=errors)

    async def mount(self) -> None:
        # Both components handle their own failures.
        await asyncio.gather(self.dashboard.mount(), self.health.mount())

    def unmount(self) -> None:
        self.dashboard.unmount()

    def render(self) -> Dict[str, Any]:
        return {
            "navbar": {
                "brand": BRAND,
                "links": [dict(link) for link in NAV_LINKS],
                "button": NAV_BUTTON,
            },
            "main": self.dashboard.render(),
            "footer": {
                "backend_status": self.health.render(),
                "copyright": COPYRIGHT,
            },
        }
