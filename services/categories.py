"""Category directory service.

Holds the working set of categories through a CategoryStore and answers the
queries used by category pickers and the management screen. Read operations
never raise on store faults; each one degrades to a documented fallback.
"""

from dataclasses import replace
from typing import List, Optional
from config import DEFAULT_COLOR
from errors import NotFoundError, ValidationError
from models.category import Category, Urgency
from stores.base import CategoryStore
from stores.seed import DEFAULT_CATEGORY_NAMES, load_seed_categories
from logger import get_logger

logger = get_logger()

MUTABLE_FIELDS = ("name", "subcategories", "urgency", "description", "color")


class CategoryService:
    """Service for managing task categories."""

    def __init__(self, store: CategoryStore, default_color: str = DEFAULT_COLOR):
        """Initialize the category service.

        Args:
            store: Backing store holding the working set.
            default_color: Color given to categories created without one.
        """
        self.store = store
        self.default_color = default_color

    def list_all(self) -> List[Category]:
        """Get all categories.

        Returns:
            List of Category objects in store order. If the store cannot be
            read, the built-in seed categories are returned instead.
        """
        try:
            return self.store.fetch_all()
        except Exception as e:
            logger.error(f"Error fetching categories: {e}")
            return load_seed_categories()

    def get_by_id(self, category_id: int) -> Category:
        """Get a single category by ID.

        Args:
            category_id: The category ID to find.

        Returns:
            The matching Category.

        Raises:
            NotFoundError: If no category has that ID.
        """
        for category in self.list_all():
            if category.id == category_id:
                return category
        raise NotFoundError(category_id)

    def search(self, query: str) -> List[Category]:
        """Find categories whose name or any subcategory contains query.

        Matching is case-insensitive. Each category appears at most once.

        Returns:
            Matching categories in store order, or an empty list when nothing
            matches or the store cannot be read.
        """
        try:
            categories = self.store.fetch_all()
        except Exception as e:
            logger.error(f'Error searching categories for "{query}": {e}')
            return []
        return [c for c in categories if c.matches(query)]

    def list_category_names(self) -> List[str]:
        """Get all category names sorted alphabetically.

        If the store cannot be read, the built-in names are returned in
        declaration order (unsorted).
        """
        try:
            categories = self.store.fetch_all()
        except Exception as e:
            logger.error(f"Error fetching category names: {e}")
            return list(DEFAULT_CATEGORY_NAMES)
        return sorted(c.name for c in categories)

    def list_subcategories(self, category_name: str) -> List[str]:
        """Get the subcategories of the category named exactly category_name.

        Returns:
            Ordered subcategory list, or an empty list if no category has that
            name or the store cannot be read.
        """
        try:
            categories = self.store.fetch_all()
        except Exception as e:
            logger.error(f'Error fetching subcategories for "{category_name}": {e}')
            return []
        for category in categories:
            if category.name == category_name:
                return list(category.subcategories)
        return []

    def create(self, draft: dict) -> Category:
        """Create a new category.

        Args:
            draft: Mapping with a required "name" and optional "subcategories",
                   "urgency", "description" and "color". Any "id" is ignored.

        Returns:
            The created Category with its assigned id.

        Raises:
            ValidationError: If the name is missing or blank, or another field
                             is invalid.
        """
        _reject_unknown_fields(draft)
        fields = {
            "name": _clean_name(draft.get("name")),
            "subcategories": _clean_subcategories(draft.get("subcategories")),
            "urgency": _clean_urgency(draft.get("urgency")),
            "description": draft.get("description") or "",
            "color": draft.get("color") or self.default_color,
        }
        category = self.store.insert(fields)
        logger.info(f"Created category '{category.name}' (ID: {category.id})")
        return category

    def update(self, category_id: int, patch: dict) -> Category:
        """Update an existing category.

        Fields absent from patch keep their current value. The id is never
        changed, even if patch carries one.

        Returns:
            The updated Category.

        Raises:
            NotFoundError: If no category has that ID.
            ValidationError: If a patched field is invalid.
        """
        existing = self.get_by_id(category_id)
        _reject_unknown_fields(patch)

        changes = {}
        if "name" in patch:
            changes["name"] = _clean_name(patch["name"])
        if "subcategories" in patch:
            changes["subcategories"] = _clean_subcategories(patch["subcategories"])
        if "urgency" in patch:
            changes["urgency"] = _clean_urgency(patch["urgency"])
        if "description" in patch:
            changes["description"] = patch["description"] or ""
        if "color" in patch:
            if not patch["color"]:
                raise ValidationError("Category color cannot be empty")
            changes["color"] = patch["color"]

        updated = self.store.replace(replace(existing, **changes))
        logger.info(f"Updated category '{updated.name}' (ID: {updated.id})")
        return updated

    def delete(self, category_id: int) -> bool:
        """Delete a category by ID.

        Deleting an unknown ID is a no-op. Tasks labelled with the category
        name are not touched.

        Returns:
            Always True.
        """
        if self.store.remove(category_id):
            logger.info(f"Deleted category ID {category_id}")
        else:
            logger.debug(f"Category ID {category_id} not present, nothing deleted")
        return True


def _reject_unknown_fields(data: dict) -> None:
    unknown = set(data) - set(MUTABLE_FIELDS) - {"id"}
    if unknown:
        raise ValidationError(f"Unknown category fields: {', '.join(sorted(unknown))}")


def _clean_name(name: Optional[str]) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Category name is required")
    return name.strip()


def _clean_subcategories(subcategories) -> List[str]:
    if subcategories is None:
        return []
    if isinstance(subcategories, str):
        raise ValidationError("Subcategories must be a list of strings")
    cleaned = []
    for sub in subcategories:
        if not isinstance(sub, str) or not sub.strip():
            raise ValidationError("Subcategory names cannot be empty")
        # subcategories are stored comma-joined by the remote store
        if "," in sub:
            raise ValidationError(
                f"Subcategory names cannot contain commas: '{sub}'"
            )
        cleaned.append(sub.strip())
    return cleaned


def _clean_urgency(urgency) -> Urgency:
    if urgency is None or urgency == "":
        return Urgency.MEDIUM
    try:
        return Urgency.parse(urgency)
    except ValueError as e:
        raise ValidationError(str(e)) from e
