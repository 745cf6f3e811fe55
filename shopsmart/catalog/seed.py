"""
Default product catalog served when no catalog file is configured.
"""

from typing import Tuple

from .contracts import Product

DEFAULT_PRODUCTS: Tuple[Product, ...] = (
    Product(
        id=1,
        name="Wireless Headphones",
        price=79.99,
        description="High-quality wireless headphones with noise cancellation",
        image="https://via.placeholder.com/200?text=Headphones",
        in_stock=True,
    ),
    Product(
        id=2,
        name="USB-C Cable",
        price=12.99,
        description="Fast charging USB-C cable for all devices",
        image="https://via.placeholder.com/200?text=Cable",
        in_stock=True,
    ),
    Product(
        id=3,
        name="Phone Case",
        price=24.99,
        description="Durable and stylish phone protective case",
        image="https://via.placeholder.com/200?text=Phone+Case",
        in_stock=True,
    ),
    Product(
        id=4,
        name="Screen Protector",
        price=9.99,
        description="Tempered glass screen protector for phones",
        image="https://via.placeholder.com/200?text=Screen+Protector",
        in_stock=False,
    ),
    Product(
        id=5,
        name="Portable Charger",
        price=49.99,
        description="20000mAh portable power bank with fast charging",
        image="https://via.placeholder.com/200?text=Charger",
        in_stock=True,
    ),
    Product(
        id=6,
        name="Bluetooth Speaker",
        price=59.99,
        description="Waterproof portable Bluetooth speaker",
        image="https://via.placeholder.com/200?text=Speaker",
        in_stock=True,
    ),
)
