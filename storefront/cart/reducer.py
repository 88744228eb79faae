"""
Cart reducer - pure state transitions.

Each function takes the current CartState and returns the next one. The
input state is never modified; a transition that does not apply returns
the same state object, and a missing line raises CartItemNotFound before
anything is built.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from storefront.errors import CartItemNotFound
from storefront.models import Item
from storefront.services.money import add, multiply, subtract
from .models import CartLine, CartState


class CartAction(str, Enum):
    """Intents the presentation layer may dispatch."""
    ADD_ITEM = "add_item"
    INCREMENT_ITEM = "increment_item"
    DECREMENT_ITEM = "decrement_item"
    DELETE_ITEM = "delete_item"


@dataclass(frozen=True)
class CartIntent:
    """An action plus its payload: an Item for ADD_ITEM, an item id otherwise."""
    action: CartAction
    item: Optional[Item] = None
    item_id: Optional[str] = None

    def __post_init__(self):
        if self.action is CartAction.ADD_ITEM:
            if self.item is None:
                raise ValueError("add_item requires an item")
        elif not self.item_id:
            raise ValueError(f"{self.action.value} requires an item_id")

    @classmethod
    def add(cls, item: Item) -> "CartIntent":
        return cls(CartAction.ADD_ITEM, item=item)

    @classmethod
    def increment(cls, item_id: str) -> "CartIntent":
        return cls(CartAction.INCREMENT_ITEM, item_id=item_id)

    @classmethod
    def decrement(cls, item_id: str) -> "CartIntent":
        return cls(CartAction.DECREMENT_ITEM, item_id=item_id)

    @classmethod
    def delete(cls, item_id: str) -> "CartIntent":
        return cls(CartAction.DELETE_ITEM, item_id=item_id)


def _require_line(state: CartState, item_id: str) -> CartLine:
    line = state.lines.get(item_id)
    if line is None:
        raise CartItemNotFound(item_id)
    return line


def _with_line(state: CartState, line: CartLine, items_delta: int, price_delta) -> CartState:
    lines = dict(state.lines)
    lines[line.item_id] = line
    return CartState(
        lines=lines,
        total_items=state.total_items + items_delta,
        total_price=add(state.total_price, price_delta),
    )


def add_item(state: CartState, item: Item) -> CartState:
    """Put one unit of the item in the cart. Already present: unchanged."""
    if item.id in state.lines:
        return state
    return _with_line(state, CartLine(item=item, quantity=1), 1, item.price)


def increment_item(state: CartState, item_id: str) -> CartState:
    line = _require_line(state, item_id)
    return _with_line(state, line.with_quantity(line.quantity + 1), 1, line.unit_price)


def decrement_item(state: CartState, item_id: str) -> CartState:
    """Remove one unit. The last unit is only removed by delete_item."""
    line = _require_line(state, item_id)
    if line.quantity <= 1:
        return state
    return _with_line(state, line.with_quantity(line.quantity - 1), -1, -line.unit_price)


def delete_item(state: CartState, item_id: str) -> CartState:
    line = _require_line(state, item_id)
    lines = dict(state.lines)
    del lines[item_id]
    return CartState(
        lines=lines,
        total_items=state.total_items - line.quantity,
        total_price=subtract(state.total_price, multiply(line.unit_price, line.quantity)),
    )


def reduce(state: CartState, intent: CartIntent) -> CartState:
    """Apply an intent to a state."""
    if intent.action is CartAction.ADD_ITEM:
        return add_item(state, intent.item)
    elif intent.action is CartAction.INCREMENT_ITEM:
        return increment_item(state, intent.item_id)
    elif intent.action is CartAction.DECREMENT_ITEM:
        return decrement_item(state, intent.item_id)
    elif intent.action is CartAction.DELETE_ITEM:
        return delete_item(state, intent.item_id)
    raise ValueError(f"Unknown cart action: {intent.action!r}")
