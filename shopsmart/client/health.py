"""
Footer backend-status indicator driven by the liveness probe.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from shopsmart.error_handler import ErrorHandler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Connecting:
    pass


@dataclass(frozen=True)
class Online:
    message: str = ""


@dataclass(frozen=True)
class Offline:
    message: str = ""


HealthState = Union[Connecting, Online, Offline]


def health_state_from_payload(payload: Any) -> HealthState:
    if not isinstance(payload, Mapping):
        return Offline(message="Unexpected health response")
    message = str(payload.get("message") or "")
    if payload.get("status") == "ok":
        return Online(message=message)
    return Offline(message=message)


class HealthIndicator:
    def __init__(self, api_client, error_handler: Optional[ErrorHandler] = None):
        self.api = api_client
        self.errors = error_handler or ErrorHandler()
        self.state: HealthState = Connecting()

    async def mount(self) -> HealthState:
        self.state = Connecting()
        try:
            payload = await self.api.fetch_health()
        except Exception as e:
            handled = self.errors.handle_exception(e, context={"operation": "fetch_health"})
            self.state = Offline(message=handled["message"])
        else:
            self.state = health_state_from_payload(payload)
        logger.info("Backend status: %s", type(self.state).__name__)
        return self.state

    def render(self) -> Dict[str, Any]:
        state = self.state
        if isinstance(state, Online):
            return {"label": "● Online", "class": "status-ok", "message": state.message}
        if isinstance(state, Offline):
            return {"label": "● Offline", "class": "status-error", "message": state.message}
        return {"label": "⟳ Connecting...", "class": "status-loading", "message": None}
