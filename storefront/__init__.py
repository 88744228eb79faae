"""
Storefront

Catalog browsing and a per-session shopping cart:
- catalog: immutable product list with category projection
- cart: cart state, reducer, store and session registry
- app: FastAPI presentation layer

Note: create_app is imported lazily so that using the cart does not
pull in the web stack.
"""

__all__ = [
    "CartStore",
    "create_app",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "CartStore":
        from storefront.cart import CartStore
        return CartStore
    elif name == "create_app":
        from storefront.app import create_app
        return create_app
    raise AttributeError(f"module 'storefront' has no attribute '{name}'")
