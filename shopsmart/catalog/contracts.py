"""
Product catalogue contract.

Defines the structure of a product as it is served over HTTP and consumed by
the storefront client:
- id, name, price
- description, image URL
- inStock flag driving the badge and the add-to-cart control

Both the catalog service and the client use these helpers so the JSON keys
(notably ``inStock``) are spelled in exactly one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: float
    description: str = ""
    image: str = ""
    in_stock: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape, key order matches the catalog JSON."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "description": self.description,
            "image": self.image,
            "inStock": self.in_stock,
        }


def product_from_dict(data: Dict[str, Any]) -> Product:
    """Build a Product from a wire/catalog-file dict.

    Accepts ``inStock`` (wire) or ``in_stock`` (YAML friendly). No range or
    uniqueness checks are made here.
    """
    if "inStock" in data:
        in_stock = data["inStock"]
    else:
        in_stock = data.get("in_stock", True)
    return Product(
        id=int(data["id"]),
        name=str(data["name"]),
        price=float(data["price"]),
        description=str(data.get("description") or ""),
        image=str(data.get("image") or ""),
        in_stock=bool(in_stock),
    )
