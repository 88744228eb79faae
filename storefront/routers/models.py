"""
API Pydantic Models

Request and response shapes shared by the catalog and cart routers.
"""
from typing import Optional
from pydantic import BaseModel


# ==================== CATALOG MODELS ====================

class ProductResponse(BaseModel):
    id: str
    name: str
    price: float
    category: str
    image_url: str | None = None


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    item_id: str


class CartLineResponse(BaseModel):
    item_id: str
    name: str
    category: str
    image_url: Optional[str] = None
    unit_price: float
    quantity: int
    line_total: float


class CartResponse(BaseModel):
    items: list[CartLineResponse]
    total_items: int
    total_price: float


class SessionResponse(BaseModel):
    session_id: str
