"""Cart package: models, reducer, store, and session registry."""
from .models import CartLine, CartState
from .reducer import CartAction, CartIntent
from .service import CartStore
from .sessions import CartSessions

__all__ = [
    "CartLine",
    "CartState",
    "CartAction",
    "CartIntent",
    "CartStore",
    "CartSessions",
]
