"""
In-memory product catalog.

The catalog is fixed when the store is built and never mutated afterwards,
so request handlers can read it concurrently without locking. Lookups return
``None`` for unknown ids; not-found is a normal outcome here and the API
layer decides how to report it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

import yaml

from .contracts import Product, product_from_dict
from .seed import DEFAULT_PRODUCTS

logger = logging.getLogger(__name__)


class CatalogStore:
    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._products: Tuple[Product, ...] = tuple(DEFAULT_PRODUCTS if products is None else products)

    def __len__(self) -> int:
        return len(self._products)

    def list_products(self) -> List[Product]:
        """All products, in catalog order."""
        return list(self._products)

    def get_product(self, product_id: int) -> Optional[Product]:
        # First match wins; duplicate ids are not rejected.
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def list_payload(self) -> Dict[str, Any]:
        data = [p.to_dict() for p in self._products]
        return {"success": True, "data": data, "count": len(data)}


def load_catalog_file(path: Path) -> List[Product]:
    """
    Load products from a YAML catalog file.

    The file holds either a top-level list or a mapping with a ``products``
    list. Each entry uses the wire keys (``inStock`` or ``in_stock``).

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file has no product list
    """
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or []

    entries = raw.get("products") if isinstance(raw, dict) else raw
    if not isinstance(entries, list):
        raise ValueError(f"Catalog file {path} must contain a list of products")

    try:
        products = [product_from_dict(entry) for entry in entries]
    except (KeyError, TypeError, ValueError) as e:
        logger.error("Invalid product entry in %s: %s", path, e)
        raise ValueError(f"Invalid product entry in {path}: {e}") from e

    logger.info("Loaded %d products from %s", len(products), path)
    return products
