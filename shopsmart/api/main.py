"""
FastAPI application - catalog service entry point
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from shopsmart import __version__
from shopsmart.api.schemas import (
    HealthResponse,
    NotFoundResponse,
    ProductDetailResponse,
    ProductListResponse,
    ProductModel,
)
from shopsmart.catalog.store import CatalogStore, load_catalog_file
from shopsmart.utils.config_loader import ShopConfig, load_shop_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Load configuration once per process
shop_cfg = load_shop_config()


def build_catalog_store(cfg: ShopConfig) -> CatalogStore:
    """Catalog from the configured YAML file, or the built-in seed."""
    if cfg.catalog.path:
        return CatalogStore(load_catalog_file(Path(cfg.catalog.path)))
    return CatalogStore()


catalog_store = build_catalog_store(shop_cfg)
logger.info("Catalog ready with %d products", len(catalog_store))

# Initialize FastAPI app
app = FastAPI(
    title=shop_cfg.server.title,
    description="Static product catalog and liveness probe for the ShopSmart storefront",
    version=__version__,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=shop_cfg.server.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================


def get_catalog() -> CatalogStore:
    """Dependency for the product catalog"""
    return catalog_store


def get_config() -> ShopConfig:
    """Dependency for service configuration"""
    return shop_cfg


# ============================================================================
# ENDPOINTS
# ============================================================================
api_router = APIRouter()


@app.get("/", response_class=PlainTextResponse, tags=["Health"])
async def root(cfg: ShopConfig = Depends(get_config)):
    return cfg.server.banner


@api_router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(cfg: ShopConfig = Depends(get_config)):
    """Liveness probe. The timestamp is fresh on every call."""
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return HealthResponse(status="ok", message=cfg.server.health_message, timestamp=timestamp)


@api_router.get("/products", response_model=ProductListResponse, tags=["Products"])
async def list_products(catalog: CatalogStore = Depends(get_catalog)):
    """Full catalog in catalog order. No pagination or filtering."""
    products = [ProductModel.from_product(p) for p in catalog.list_products()]
    logger.debug("Serving %d products", len(products))
    return ProductListResponse(success=True, data=products, count=len(products))


@api_router.get(
    "/products/{product_id}",
    response_model=ProductDetailResponse,
    responses={404: {"model": NotFoundResponse}},
    tags=["Products"],
)
async def get_product(product_id: str, catalog: CatalogStore = Depends(get_catalog)):
    """
    Single product by id.

    An unknown id, or one that is not an integer, is answered with
    ``{"success": false, "message": "Product not found"}`` and a 404.
    """
    try:
        lookup_id = int(product_id)
    except ValueError:
        lookup_id = None

    product = catalog.get_product(lookup_id) if lookup_id is not None else None
    if product is None:
        logger.info("Product not found: id=%s", product_id)
        return JSONResponse(
            status_code=404,
            content=NotFoundResponse(message="Product not found").model_dump(),
        )

    return ProductDetailResponse(success=True, data=ProductModel.from_product(product))


app.include_router(api_router, prefix="/api")
