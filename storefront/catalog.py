"""
Catalog - immutable, ordered set of purchasable items.

Loaded once at startup from a JSON file (a list of item objects) and
shared read-only with every cart session.
"""
import json
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import Optional

from storefront.config import DEFAULT_CATALOG_PATH
from storefront.errors import ERROR_DUPLICATE_PRODUCT, ProductNotFound
from storefront.logging import get_logger
from storefront.models import Item

logger = get_logger(__name__)


class Catalog(Sequence):
    """Finite, ordered, read-only sequence of Items, indexed by id."""

    def __init__(self, items: Iterable[Item]):
        self._items: tuple[Item, ...] = tuple(items)
        self._by_id: dict[str, Item] = {}
        for item in self._items:
            if item.id in self._by_id:
                raise ValueError(f"{ERROR_DUPLICATE_PRODUCT}: {item.id}")
            self._by_id[item.id] = item

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __contains__(self, value) -> bool:
        if isinstance(value, Item):
            return self._by_id.get(value.id) == value
        return value in self._by_id

    def get(self, item_id: str) -> Item:
        """Get item by id."""
        try:
            return self._by_id[item_id]
        except KeyError:
            raise ProductNotFound(item_id) from None

    def by_category(self, category: Optional[str] = None) -> list[Item]:
        """Items in the given category, in catalog order. None means all."""
        if category is None:
            return list(self._items)
        return [item for item in self._items if item.category == category]

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        return list(dict.fromkeys(item.category for item in self._items))


def load_catalog(path: str | Path) -> Catalog:
    """
    Load a catalog from a JSON file.

    Raises:
        ValueError: on duplicate ids or a non-list document
        pydantic.ValidationError: on a malformed item
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Catalog file must contain a JSON list: {path}")

    catalog = Catalog(Item.model_validate(entry) for entry in data)
    logger.info(f"Catalog loaded: {len(catalog)} items from {path.name}")
    return catalog


def default_catalog() -> Catalog:
    """The sample catalog bundled with the package."""
    return load_catalog(DEFAULT_CATALOG_PATH)
