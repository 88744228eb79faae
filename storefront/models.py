"""
Pydantic Models - Catalog entities

Items are supplied by the catalog and are read-only to the cart.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.services.money import to_decimal


class Item(BaseModel):
    """A purchasable catalog item."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    price: Decimal = Field(ge=0)
    category: str
    image_url: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return to_decimal(v)
