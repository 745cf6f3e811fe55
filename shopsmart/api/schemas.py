"""
Response bodies for the catalog service.
"""

from typing import List

from pydantic import BaseModel, Field

from shopsmart.catalog.contracts import Product


class ProductModel(BaseModel):
    id: int
    name: str
    price: float
    description: str
    image: str
    inStock: bool

    @classmethod
    def from_product(cls, product: Product) -> "ProductModel":
        return cls(**product.to_dict())


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str
    timestamp: str = Field(..., description="ISO-8601 time the probe was answered")


class ProductListResponse(BaseModel):
    success: bool = True
    data: List[ProductModel]
    count: int


class ProductDetailResponse(BaseModel):
    success: bool = True
    data: ProductModel


class NotFoundResponse(BaseModel):
    success: bool = False
    message: str
