"""
FastAPI Routers Package

All routers are mounted under /api by storefront.app.create_app.
"""

from storefront.routers.products import router as products_router
from storefront.routers.cart import router as cart_router

__all__ = [
    "products_router",
    "cart_router",
]
