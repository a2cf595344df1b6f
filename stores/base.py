"""Base store interface for category persistence backends."""

from abc import ABC, abstractmethod
from typing import List
from models.category import Category


class CategoryStore(ABC):
    """Abstract base class for category stores.

    The directory talks to its working set only through this interface, so
    the in-memory seed and a remote record store are interchangeable.
    Implementations raise StoreError when the backend fails.
    """

    @abstractmethod
    def fetch_all(self) -> List[Category]:
        """Return every stored category in the backend's natural order."""
        pass

    @abstractmethod
    def insert(self, fields: dict) -> Category:
        """Store a new category and assign its ID.

        Args:
            fields: Normalized category fields (name, subcategories, urgency,
                    description, color). Never contains an id.

        Returns:
            The stored Category with its newly assigned id.
        """
        pass

    @abstractmethod
    def replace(self, category: Category) -> Category:
        """Overwrite the stored category that has category.id.

        Raises:
            NotFoundError: If no category has that id.
        """
        pass

    @abstractmethod
    def remove(self, category_id: int) -> bool:
        """Remove a category by ID.

        Returns:
            True if a category was removed, False if none had that id.
        """
        pass
