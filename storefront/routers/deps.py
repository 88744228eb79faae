"""
Shared Dependencies for Routers

The catalog and session registry are built by the app factory and kept on
app.state; handlers receive them through these dependencies.
"""
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request

from storefront.cart import CartSessions, CartStore
from storefront.catalog import Catalog
from storefront.errors import ERROR_SESSION_REQUIRED, SessionNotFound

SESSION_HEADER = "X-Cart-Session"


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_sessions(request: Request) -> CartSessions:
    return request.app.state.sessions


def get_session_id(x_cart_session: Optional[str] = Header(default=None)) -> str:
    """Session id from the X-Cart-Session header."""
    if not x_cart_session:
        raise HTTPException(status_code=400, detail=ERROR_SESSION_REQUIRED)
    return x_cart_session


def get_cart_store(
    session_id: str = Depends(get_session_id),
    sessions: CartSessions = Depends(get_sessions),
) -> CartStore:
    try:
        return sessions.get(session_id)
    except SessionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
