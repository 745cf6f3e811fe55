"""
Catalog layer.

Holds the product contract and the in-memory store the API serves from:
- contracts.py: Product value type and its wire shape
- seed.py: default catalog used when no catalog file is configured
- store.py: read-only CatalogStore answering list/detail lookups
"""

from .contracts import Product, product_from_dict
from .seed import DEFAULT_PRODUCTS
from .store import CatalogStore, load_catalog_file

__all__ = [
    "Product",
    "product_from_dict",
    "DEFAULT_PRODUCTS",
    "CatalogStore",
    "load_catalog_file",
]
