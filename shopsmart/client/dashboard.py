"""
Product dashboard: fetches the catalog once per mount and renders product cards.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional

from shopsmart.client.state import (
    DashboardState,
    Error,
    Event,
    FetchRejected,
    FetchResolved,
    ImageFailed,
    Loading,
    Success,
    Unmounted,
    transition,
)
from shopsmart.error_handler import ErrorHandler

logger = logging.getLogger(__name__)

DASHBOARD_TITLE = "Product Dashboard"
LOADING_MESSAGE = "Loading products..."
EMPTY_MESSAGE = "No products available"
IMAGE_PLACEHOLDER_TEXT = "Image Not Available"


class Dashboard:
    def __init__(self, api_client, error_handler: Optional[ErrorHandler] = None):
        self.api = api_client
        self.errors = error_handler or ErrorHandler()
        self.state = DashboardState()
        self._generation = 0
        self._task: Optional[asyncio.Task] = None

    # --- Lifecycle -----------------------------------------------------------

    async def mount(self) -> DashboardState:
        """Start a fresh mount: Loading, one products request, then Success or Error."""
        self._generation += 1
        generation = self._generation
        self.state = DashboardState()

        try:
            payload = await self.api.fetch_products()
        except Exception as e:
            handled = self.errors.handle_exception(e, context={"operation": "fetch_products"})
            event: Event = FetchRejected(reason=handled["message"])
        else:
            event = FetchResolved(payload=payload)

        if generation != self._generation:
            logger.debug("Dropping products response from a previous mount")
            return self.state

        self.dispatch(event)
        return self.state

    def start(self) -> asyncio.Task:
        """Schedule ``mount`` on the running loop; ``unmount`` cancels it."""
        self._task = asyncio.ensure_future(self.mount())
        return self._task

    def unmount(self) -> None:
        self.dispatch(Unmounted())
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def dispatch(self, event: Event) -> DashboardState:
        previous = self.state
        self.state = transition(previous, event)
        if type(previous.render) is not type(self.state.render):
            logger.info("Dashboard %s -> %s", type(previous.render).__name__, type(self.state.render).__name__)
        return self.state

    # --- Surface events ------------------------------------------------------

    def handle_image_error(self, product_id: Any) -> None:
        self.dispatch(ImageFailed(product_id=product_id))

    def click_add_to_cart(self, product_id: Any) -> bool:
        """
        Press a card's action button.

        Returns True when the button was enabled. The cart is not modified
        either way.
        """
        item = self._find_item(product_id)
        if item is None or not item.get("inStock"):
            logger.debug("Add to cart ignored for product %s", product_id)
            return False
        logger.info("Add to cart clicked for product %s", product_id)
        return True

    def _find_item(self, product_id: Any) -> Optional[Mapping[str, Any]]:
        render = self.state.render
        if not isinstance(render, Success):
            return None
        return next((item for item in render.items if item.get("id") == product_id), None)

    # --- Rendering -----------------------------------------------------------

    def render(self) -> Dict[str, Any]:
        return render_dashboard(self.state)


def render_dashboard(state: DashboardState) -> Dict[str, Any]:
    render = state.render
    if isinstance(render, Loading):
        return {"view": "loading", "message": LOADING_MESSAGE}
    if isinstance(render, Error):
        return {"view": "error", "message": f"Error: {render.message}"}

    items = render.items
    return {
        "view": "products",
        "title": DASHBOARD_TITLE,
        "count_label": f"{len(items)} Products Available",
        "empty_message": EMPTY_MESSAGE if render.is_empty else None,
        "cards": [render_card(item, state.image_failed(item.get("id"))) for item in items],
    }


def render_card(item: Mapping[str, Any], image_failed: bool = False) -> Dict[str, Any]:
    in_stock = bool(item.get("inStock"))
    name = item.get("name", "")

    card: Dict[str, Any] = {
        "id": item.get("id"),
        "name": name,
        "description": item.get("description", ""),
        "price": format_price(item.get("price", 0)),
        "out_of_stock": not in_stock,
        "badge": {
            "label": "In Stock" if in_stock else "Out of Stock",
            "icon": "✓" if in_stock else "✗",
            "class": "in-stock" if in_stock else "out-of-stock",
        },
        "action": {
            "label": "Add to Cart" if in_stock else "Unavailable",
            "disabled": not in_stock,
        },
    }

    if image_failed:
        card["image"] = None
        card["placeholder"] = {"text": IMAGE_PLACEHOLDER_TEXT}
    else:
        card["image"] = {"src": item.get("image", ""), "alt": name}
        card["placeholder"] = None
    return card


def format_price(price: Any) -> str:
    return f"${float(price):.2f}"

