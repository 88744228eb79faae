"""
Common Errors

Message constants shared by the cart, catalog and HTTP layers, and the
lookup errors raised when an id does not resolve.
"""

# Cart errors
ERROR_CART_ITEM_NOT_FOUND = "Item is not in the cart"
ERROR_SESSION_NOT_FOUND = "Cart session not found"
ERROR_SESSION_REQUIRED = "Cart session header is required"

# Catalog errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_DUPLICATE_PRODUCT = "Duplicate product id in catalog"


class CartItemNotFound(LookupError):
    """No cart line exists for the given item id."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"{ERROR_CART_ITEM_NOT_FOUND}: {item_id}")


class ProductNotFound(LookupError):
    """The catalog has no item with the given id."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"{ERROR_PRODUCT_NOT_FOUND}: {item_id}")


class SessionNotFound(LookupError):
    """No open cart session has the given id."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"{ERROR_SESSION_NOT_FOUND}: {session_id}")
