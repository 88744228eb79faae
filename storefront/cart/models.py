"""Cart models: immutable lines and state snapshots with Decimal totals."""
from dataclasses import dataclass, field, replace
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional

from storefront.models import Item
from storefront.services.money import ZERO, multiply, to_float


@dataclass(frozen=True)
class CartLine:
    """One catalog item plus the quantity selected for purchase."""
    item: Item
    quantity: int = 1

    def __post_init__(self):
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError("quantity must be a positive integer")

    @property
    def item_id(self) -> str:
        return self.item.id

    @property
    def unit_price(self) -> Decimal:
        return self.item.price

    @property
    def line_total(self) -> Decimal:
        """Total price for all units."""
        return multiply(self.item.price, self.quantity)

    def with_quantity(self, quantity: int) -> "CartLine":
        return replace(self, quantity=quantity)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "item_id": self.item.id,
            "name": self.item.name,
            "category": self.item.category,
            "image_url": self.item.image_url,
            "unit_price": to_float(self.item.price),
            "quantity": self.quantity,
            "line_total": to_float(self.line_total),
        }


def _freeze(lines: Optional[Mapping[str, CartLine]]) -> Mapping[str, CartLine]:
    return MappingProxyType(dict(lines or {}))


@dataclass(frozen=True, eq=True, unsafe_hash=False)
class CartState:
    """
    Snapshot of a cart.

    Totals are carried alongside the lines and updated incrementally by
    the reducer; `is_consistent()` recomputes them from the lines.
    Snapshots compare by value but are not hashable.
    """
    __hash__ = None

    lines: Mapping[str, CartLine] = field(default_factory=dict)
    total_items: int = 0
    total_price: Decimal = ZERO

    def __post_init__(self):
        # Own a private copy so no caller keeps a mutable alias
        object.__setattr__(self, "lines", _freeze(self.lines))

    @classmethod
    def empty(cls) -> "CartState":
        return cls()

    @classmethod
    def from_lines(cls, lines: Mapping[str, CartLine]) -> "CartState":
        """Build a state whose totals are derived from the given lines."""
        return cls(
            lines=lines,
            total_items=sum(line.quantity for line in lines.values()),
            total_price=sum((line.line_total for line in lines.values()), ZERO),
        )

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def quantity_of(self, item_id: str) -> int:
        """Quantity of an item in the cart, 0 if absent."""
        line = self.lines.get(item_id)
        return line.quantity if line else 0

    def is_consistent(self) -> bool:
        """True when the carried totals match the lines and every line is valid."""
        if any(key != line.item_id or line.quantity < 1 for key, line in self.lines.items()):
            return False
        expected = CartState.from_lines(self.lines)
        return (
            self.total_items == expected.total_items
            and self.total_price == expected.total_price
        )

    def to_dict(self) -> dict:
        """Convert to a JSON-safe dictionary."""
        return {
            "items": [line.to_dict() for line in self.lines.values()],
            "total_items": self.total_items,
            "total_price": to_float(self.total_price),
        }
