"""Cart store: owns one shopper's CartState and serializes its mutations."""
import threading
from typing import Callable, Optional

from storefront.errors import CartItemNotFound
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.models import Item
from . import reducer
from .models import CartState
from .reducer import CartIntent

logger = get_logger(__name__)

Listener = Callable[[CartState], None]


class CartStore:
    """
    Holds a cart and applies intents to it.

    Features:
    - Immutable snapshots: get_state() never hands out a mutable alias
    - One mutation at a time (RLock), each fully applied or not at all
    - Listeners notified with the new state after every change
    """

    def __init__(self, state: Optional[CartState] = None):
        if state is not None and not state.is_consistent():
            raise ValueError("Cart totals do not match its lines")
        self._state = state if state is not None else CartState.empty()
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []

    def get_state(self) -> CartState:
        """Current cart snapshot."""
        return self._state

    def dispatch(self, intent: CartIntent) -> CartState:
        """
        Apply an intent and return the resulting state.

        Listeners run before the lock is released, so they see states in
        commit order and the last notified state is the current one.

        Raises:
            CartItemNotFound: increment/decrement/delete of an id not in the cart
        """
        with self._lock:
            previous = self._state
            try:
                state = reducer.reduce(previous, intent)
            except CartItemNotFound as e:
                logger.info(
                    f"Cart {intent.action.value} rejected: item "
                    f"{sanitize_id_for_logging(e.item_id)} not in cart"
                )
                raise

            if state is previous:
                logger.debug(f"Cart {intent.action.value}: no change")
                return state

            self._state = state
            logger.debug(
                f"Cart {intent.action.value}: total_items={state.total_items}, "
                f"total_price={state.total_price}"
            )
            self._notify(state)
        return state

    def add_item(self, item: Item) -> CartState:
        """Add one unit of an item. Adding an item already in the cart does nothing."""
        return self.dispatch(CartIntent.add(item))

    def increment_item(self, item_id: str) -> CartState:
        return self.dispatch(CartIntent.increment(item_id))

    def decrement_item(self, item_id: str) -> CartState:
        """Remove one unit; a line at quantity 1 is left as is."""
        return self.dispatch(CartIntent.decrement(item_id))

    def delete_item(self, item_id: str) -> CartState:
        return self.dispatch(CartIntent.delete(item_id))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener for state changes.

        Returns:
            A callable that removes the listener
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, state: CartState) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(state)
            except Exception:
                logger.error("Cart listener failed", exc_info=True)
