"""Category/subcategory selection state for task editing forms."""

from typing import List, Optional
from models.category import Category
from logger import get_logger

logger = get_logger()

CUSTOM = "custom"


class CategorySelector:
    """Tracks the category picker state and talks to the category directory.

    Categories are loaded once via load(). Subcategory options follow the
    selected category: a real selection fetches its subcategories, while an
    empty or custom selection clears them. Custom categories are free-text
    labels and are never added to the directory.

    Args:
        directory: CategoryService used for lookups.
        value: Initially selected category name.
        subcategory: Initially selected subcategory.
        allow_custom: Whether the custom free-text option is offered.
    """

    def __init__(
        self,
        directory,
        value: str = "",
        subcategory: str = "",
        allow_custom: bool = True,
    ):
        self.directory = directory
        self.allow_custom = allow_custom
        self.categories: List[Category] = []
        self.subcategories: List[str] = []
        self.value = ""
        self.subcategory = subcategory
        self.custom_mode = False
        self.loading = True
        self._set_value(value)

    def load(self) -> List[Category]:
        """Load the category options from the directory."""
        self.loading = True
        try:
            self.categories = self.directory.list_all()
        except Exception as e:
            logger.error(f"Failed to load categories: {e}")
        finally:
            self.loading = False
        return self.categories

    @property
    def options(self) -> List[str]:
        """Category option values in display order."""
        names = [category.name for category in self.categories]
        if self.allow_custom:
            names.append(CUSTOM)
        return names

    def select(self, selected: str) -> None:
        """Handle a change of the category dropdown."""
        if selected == CUSTOM:
            if not self.allow_custom:
                raise ValueError("Custom categories are not allowed")
            self.custom_mode = True
            self._set_value("")
        else:
            self.custom_mode = False
            self._set_value(selected)
            self.subcategory = ""

    def submit_custom(self, text: str) -> bool:
        """Use free text as the category value.

        Returns:
            True if the text was accepted, False if it was blank.
        """
        text = (text or "").strip()
        if not text:
            return False
        self._set_value(text)
        self.custom_mode = False
        return True

    def cancel_custom(self) -> None:
        self.custom_mode = False

    def select_subcategory(self, subcategory: str) -> None:
        self.subcategory = subcategory

    def selected_category(self) -> Optional[Category]:
        """The loaded Category matching the current value, if any."""
        if self.custom_mode:
            return None
        for category in self.categories:
            if category.name == self.value:
                return category
        return None

    def _set_value(self, value: str) -> None:
        changed = value != self.value
        self.value = value
        if changed or not value:
            self._refresh_subcategories()

    def _refresh_subcategories(self) -> None:
        if self.value and self.value != CUSTOM:
            try:
                self.subcategories = self.directory.list_subcategories(self.value)
            except Exception as e:
                logger.error(f"Failed to load subcategories: {e}")
                self.subcategories = []
        else:
            self.subcategories = []
