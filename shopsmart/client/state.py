"""
Render state machine for the product dashboard.

A mounted dashboard owns one ``DashboardState``. Every change goes through
``transition(state, event)``, which returns a new state and never mutates the
old one:

    Loading --FetchResolved(success)--> Success(items)
    Loading --FetchResolved(!success)-> Error("Failed to fetch products")
    Loading --FetchRejected(reason)---> Error("Error fetching products: <reason>")

Success and Error are terminal for a mount. Image failures accumulate
alongside the render state and never change it. Once unmounted, every event
is ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, FrozenSet, Mapping, Tuple, Union

logger = logging.getLogger(__name__)

FAILED_TO_FETCH_MESSAGE = "Failed to fetch products"
FETCH_ERROR_PREFIX = "Error fetching products: "


# ---------------------------------------------------------------------------
# Render states
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Error:
    message: str


@dataclass(frozen=True)
class Success:
    items: Tuple[Mapping[str, Any], ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.items


RenderState = Union[Loading, Error, Success]


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FetchResolved:
    """The products request completed and its body decoded."""
    payload: Any


@dataclass(frozen=True)
class FetchRejected:
    """The products request itself failed."""
    reason: str


@dataclass(frozen=True)
class ImageFailed:
    product_id: Any


@dataclass(frozen=True)
class Unmounted:
    pass


Event = Union[FetchResolved, FetchRejected, ImageFailed, Unmounted]


@dataclass(frozen=True)
class DashboardState:
    render: RenderState = field(default_factory=Loading)
    image_failures: FrozenSet[Any] = frozenset()
    mounted: bool = True

    def image_failed(self, product_id: Any) -> bool:
        return product_id in self.image_failures


def transition(state: DashboardState, event: Event) -> DashboardState:
    if not state.mounted:
        logger.debug("Ignoring %s after unmount", type(event).__name__)
        return state

    if isinstance(event, Unmounted):
        return replace(state, mounted=False)

    if isinstance(event, ImageFailed):
        if event.product_id in state.image_failures:
            return state
        return replace(state, image_failures=state.image_failures | {event.product_id})

    if isinstance(event, (FetchResolved, FetchRejected)):
        if not isinstance(state.render, Loading):
            logger.debug("Ignoring %s in terminal state %s", type(event).__name__, type(state.render).__name__)
            return state
        if isinstance(event, FetchRejected):
            return replace(state, render=Error(FETCH_ERROR_PREFIX + event.reason))
        return replace(state, render=_resolve_payload(event.payload))

    raise TypeError(f"Unknown dashboard event: {event!r}")


def _resolve_payload(payload: Any) -> RenderState:
    # Any server-provided message is discarded.
    if not isinstance(payload, Mapping) or not payload.get("success"):
        return Error(FAILED_TO_FETCH_MESSAGE)

    items = payload.get("data")
    if not isinstance(items, list):
        logger.warning("Products payload flagged success without a data list")
        return Error(FAILED_TO_FETCH_MESSAGE)

    return Success(items=tuple(items))
