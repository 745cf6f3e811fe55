"""
Utility modules for ShopSmart
"""
from .config_loader import ShopConfig, load_shop_config

__all__ = [
    'ShopConfig',
    'load_shop_config',
]
