"""
Catalog Router

Read-only product listing with optional category filter.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from storefront.catalog import Catalog
from storefront.errors import ProductNotFound
from storefront.models import Item
from storefront.services.money import to_float
from .deps import get_catalog
from .models import ProductResponse

router = APIRouter(tags=["products"])


def _format_product(item: Item) -> ProductResponse:
    return ProductResponse(
        id=item.id,
        name=item.name,
        price=to_float(item.price),
        category=item.category,
        image_url=item.image_url,
    )


@router.get("/products", response_model=list[ProductResponse])
async def list_products(category: Optional[str] = None, catalog: Catalog = Depends(get_catalog)):
    """List catalog items, optionally only one category."""
    return [_format_product(item) for item in catalog.by_category(category)]


@router.get("/products/{item_id}", response_model=ProductResponse)
async def get_product(item_id: str, catalog: Catalog = Depends(get_catalog)):
    try:
        return _format_product(catalog.get(item_id))
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/categories", response_model=list[str])
async def list_categories(catalog: Catalog = Depends(get_catalog)):
    return catalog.categories()
