"""
Configuration loader for the ShopSmart service and storefront client.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "shop_config.yml"


class ServerConfig(BaseModel):
    """Catalog service settings"""

    title: str = "ShopSmart Backend"
    host: str = "0.0.0.0"
    port: int = Field(default=5000, ge=1, le=65535)
    health_message: str = "ShopSmart Backend is running"
    banner: str = "ShopSmart Backend Service"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])


class CatalogConfig(BaseModel):
    """Where the product catalog comes from. No path means the built-in seed."""

    path: Optional[str] = None


class ClientConfig(BaseModel):
    """Storefront client settings"""

    base_url: str = ""
    # None means wait indefinitely for a response.
    timeout_seconds: Optional[float] = Field(default=None, gt=0)


class ShopConfig(BaseModel):
    server: ServerConfig = Field(default_factory=ServerConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)


def load_shop_config(config_path: Optional[Path] = None) -> ShopConfig:
    """
    Load and validate configuration from YAML, then apply environment overrides.

    Args:
        config_path: Path to config file. Defaults to $SHOPSMART_CONFIG, then
            config/shop_config.yml. A missing default file yields built-in defaults.

    Returns:
        Validated ShopConfig object

    Raises:
        FileNotFoundError: If an explicitly requested config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    load_dotenv()

    explicit = config_path is not None or bool(os.getenv("SHOPSMART_CONFIG"))
    if config_path is None:
        env_path = os.getenv("SHOPSMART_CONFIG")
        config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

    data: dict = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    elif explicit:
        raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        logger.info("No config file at %s, using defaults", config_path)

    try:
        cfg = ShopConfig(**data)
    except ValidationError as e:
        logger.error("Shop config validation failed: %s", e)
        raise

    _apply_env_overrides(cfg)
    logger.debug("Loaded shop config from %s", config_path)
    return cfg


def _apply_env_overrides(cfg: ShopConfig) -> None:
    api_url = os.getenv("SHOPSMART_API_URL")
    if api_url is not None:
        cfg.client.base_url = api_url.strip()

    origins = os.getenv("SHOPSMART_CORS_ORIGINS")
    if origins:
        cfg.server.cors_origins = [o.strip() for o in origins.split(",") if o.strip()]

    catalog_path = os.getenv("SHOPSMART_CATALOG_PATH")
    if catalog_path:
        cfg.catalog.path = catalog_path
