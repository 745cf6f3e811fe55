"""Error handling helpers for the storefront client."""
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class ErrorHandler:
    def describe(self, exc: BaseException) -> str:
        """Human-readable description of an exception, never empty."""
        text = str(exc).strip()
        return text or type(exc).__name__

    def handle_exception(self, exc: BaseException, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        logger.error("Storefront request failed: %s", exc, exc_info=exc)
        return {
            "message": self.describe(exc),
            "error_type": type(exc).__name__,
            "context": context or {},
        }
