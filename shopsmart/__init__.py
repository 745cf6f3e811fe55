"""
ShopSmart storefront: catalog service and catalog client.
"""

__version__ = "1.0.0"
