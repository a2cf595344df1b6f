"""In-memory category store seeded from the built-in catalog."""

from dataclasses import replace
from typing import Iterable, List, Optional
from errors import NotFoundError
from models.category import Category
from stores.base import CategoryStore
from stores.seed import load_seed_categories


def _copy(category: Category) -> Category:
    return replace(category, subcategories=list(category.subcategories))


class InMemoryCategoryStore(CategoryStore):
    """Keeps categories in a list for the lifetime of the process.

    Nothing is written to disk; a new store starts again from the seed.
    """

    def __init__(self, categories: Optional[Iterable[Category]] = None):
        """Initialize the store.

        Args:
            categories: Initial categories. Defaults to the built-in seed.
        """
        if categories is None:
            categories = load_seed_categories()
        self._categories: List[Category] = [_copy(c) for c in categories]
        # IDs are never reused, even after the category holding one is deleted
        self._last_id = max((c.id for c in self._categories), default=0)

    def _next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def _index_of(self, category_id: int) -> Optional[int]:
        for index, category in enumerate(self._categories):
            if category.id == category_id:
                return index
        return None

    def fetch_all(self) -> List[Category]:
        return [_copy(c) for c in self._categories]

    def insert(self, fields: dict) -> Category:
        category = Category(id=self._next_id(), **fields)
        self._categories.append(category)
        return _copy(category)

    def replace(self, category: Category) -> Category:
        index = self._index_of(category.id)
        if index is None:
            raise NotFoundError(category.id)
        self._categories[index] = _copy(category)
        return _copy(category)

    def remove(self, category_id: int) -> bool:
        index = self._index_of(category_id)
        if index is None:
            return False
        del self._categories[index]
        return True
