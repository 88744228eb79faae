"""
Cart Router

Session lifecycle and the four cart intents. Every mutating endpoint
answers with the cart as it stands after the change.
"""
from fastapi import APIRouter, Depends, HTTPException, Response

from storefront.cart import CartSessions, CartState, CartStore
from storefront.catalog import Catalog
from storefront.errors import CartItemNotFound, ProductNotFound, SessionNotFound
from .deps import get_cart_store, get_catalog, get_session_id, get_sessions
from .models import AddToCartRequest, CartResponse, SessionResponse

router = APIRouter(tags=["cart"])


def _format_cart_response(state: CartState) -> CartResponse:
    return CartResponse.model_validate(state.to_dict())


@router.post("/cart/session", status_code=201, response_model=SessionResponse)
async def open_cart_session(sessions: CartSessions = Depends(get_sessions)):
    """Start a session with an empty cart."""
    return SessionResponse(session_id=sessions.open())


@router.delete("/cart/session", status_code=204)
async def close_cart_session(
    session_id: str = Depends(get_session_id),
    sessions: CartSessions = Depends(get_sessions),
):
    """End the session and discard its cart."""
    try:
        sessions.close(session_id)
    except SessionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)


@router.get("/cart", response_model=CartResponse)
async def get_cart(store: CartStore = Depends(get_cart_store)):
    return _format_cart_response(store.get_state())


@router.post("/cart/add", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    store: CartStore = Depends(get_cart_store),
    catalog: Catalog = Depends(get_catalog),
):
    """Add one unit of a catalog item (no change if it is already in the cart)."""
    try:
        item = catalog.get(request.item_id)
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _format_cart_response(store.add_item(item))


@router.post("/cart/items/{item_id}/increment", response_model=CartResponse)
async def increment_cart_item(item_id: str, store: CartStore = Depends(get_cart_store)):
    try:
        return _format_cart_response(store.increment_item(item_id))
    except CartItemNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/cart/items/{item_id}/decrement", response_model=CartResponse)
async def decrement_cart_item(item_id: str, store: CartStore = Depends(get_cart_store)):
    """Remove one unit; the last unit stays until the item is deleted."""
    try:
        return _format_cart_response(store.decrement_item(item_id))
    except CartItemNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/cart/items/{item_id}", response_model=CartResponse)
async def remove_cart_item(item_id: str, store: CartStore = Depends(get_cart_store)):
    try:
        return _format_cart_response(store.delete_item(item_id))
    except CartItemNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
