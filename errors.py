"""Error types raised by the category directory and its stores."""


class CategoryError(Exception):
    """Base class for category directory errors."""


class ValidationError(CategoryError):
    """Raised when a category draft or patch has missing or invalid fields."""


class NotFoundError(CategoryError):
    """Raised when no category has the requested ID."""

    def __init__(self, category_id):
        self.category_id = category_id
        super().__init__(f"Category with ID {category_id} not found")


class StoreError(CategoryError):
    """Raised when the backing category store fails an operation."""
