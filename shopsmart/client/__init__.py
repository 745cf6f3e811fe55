"""
Storefront client.

Turns catalog service responses into render trees:
- http_client.py: the only place that talks HTTP to the catalog service
- state.py: render state machine for the product dashboard
- dashboard.py / health.py: mounted components owning that state
- shell.py: navigation chrome + dashboard + footer health indicator
- terminal.py: plain-text renderer for the command-line storefront
"""

from .dashboard import Dashboard
from .health import HealthIndicator
from .http_client import CatalogApiClient
from .shell import StorefrontShell
from .state import DashboardState, Error, Loading, Success, transition

__all__ = [
    "CatalogApiClient",
    "Dashboard",
    "DashboardState",
    "Error",
    "HealthIndicator",
    "Loading",
    "StorefrontShell",
    "Success",
    "transition",
]
