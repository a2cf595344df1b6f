"""Category store backed by a remote record-store client.

The record store keeps one row per category in a table whose columns carry a
``_c`` suffix. Subcategories are stored as a single comma-joined string.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional
from pydantic import BaseModel, ValidationError as RecordValidationError
from errors import NotFoundError, StoreError
from models.category import Category, Urgency
from stores.base import CategoryStore
from logger import get_logger

logger = get_logger()

FETCH_LIMIT = 100


@dataclass
class RecordResponse:
    """Result of a record-store call."""

    success: bool
    data: Any = None
    message: str = ""


class RecordStoreClient(ABC):
    """Interface of the generic record-store client.

    No concrete transport ships with taskcat; callers provide their own
    implementation when configuring the remote backend.
    """

    @abstractmethod
    def fetch_records(self, table: str, params: dict) -> RecordResponse:
        pass

    @abstractmethod
    def create_record(self, table: str, params: dict) -> RecordResponse:
        pass

    @abstractmethod
    def update_record(self, table: str, params: dict) -> RecordResponse:
        pass

    @abstractmethod
    def delete_record(self, table: str, params: dict) -> RecordResponse:
        pass


class CategoryRecord(BaseModel):
    """A category row as returned by the record store."""

    Id: int
    name_c: str
    subcategories_c: Optional[str] = None
    urgency_c: Optional[str] = None
    description_c: Optional[str] = None
    color_c: Optional[str] = None

    def to_category(self) -> Category:
        subcategories = []
        if self.subcategories_c:
            subcategories = [
                sub.strip() for sub in self.subcategories_c.split(",") if sub.strip()
            ]
        category = Category(
            id=self.Id,
            name=self.name_c,
            subcategories=subcategories,
            description=self.description_c or "",
        )
        if self.urgency_c:
            category.urgency = Urgency.parse(self.urgency_c)
        if self.color_c:
            category.color = self.color_c
        return category


def category_to_fields(
    name: str,
    subcategories: List[str],
    urgency: Urgency,
    description: str,
    color: str,
) -> dict:
    """Map category fields onto record-store column names."""
    return {
        "name_c": name,
        "subcategories_c": ",".join(subcategories),
        "urgency_c": urgency.value,
        "description_c": description,
        "color_c": color,
    }


class RemoteCategoryStore(CategoryStore):
    """Reads and writes categories through a RecordStoreClient."""

    def __init__(self, client: RecordStoreClient, table: str = "task_category_c"):
        """Initialize the remote store.

        Args:
            client: Record-store client used for every call.
            table: Name of the category table.
        """
        self.client = client
        self.table = table

    def _check(self, response: RecordResponse, action: str) -> Any:
        if not response.success:
            logger.error(f"Record store failed to {action}: {response.message}")
            raise StoreError(response.message or f"Failed to {action}")
        return response.data

    def _parse(self, record: Any) -> Category:
        try:
            return CategoryRecord.model_validate(record).to_category()
        except (RecordValidationError, ValueError) as e:
            raise StoreError(f"Malformed category record: {e}") from e

    def fetch_all(self) -> List[Category]:
        params = {
            "fields": [
                {"field": {"Name": name}}
                for name in (
                    "Id",
                    "name_c",
                    "subcategories_c",
                    "urgency_c",
                    "description_c",
                    "color_c",
                )
            ],
            "orderBy": [{"fieldName": "name_c", "sorttype": "ASC"}],
            "pagingInfo": {"limit": FETCH_LIMIT, "offset": 0},
        }
        data = self._check(
            self.client.fetch_records(self.table, params), "fetch categories"
        )
        return [self._parse(record) for record in data or []]

    def insert(self, fields: dict) -> Category:
        params = {"records": [category_to_fields(**fields)]}
        data = self._check(
            self.client.create_record(self.table, params), "create category"
        )
        return self._parse(data)

    def replace(self, category: Category) -> Category:
        record = {
            "Id": category.id,
            **category_to_fields(
                category.name,
                category.subcategories,
                category.urgency,
                category.description,
                category.color,
            ),
        }
        data = self._check(
            self.client.update_record(self.table, {"records": [record]}),
            "update category",
        )
        if not data:
            raise NotFoundError(category.id)
        return self._parse(data)

    def remove(self, category_id: int) -> bool:
        data = self._check(
            self.client.delete_record(self.table, {"RecordIds": [category_id]}),
            "delete category",
        )
        return bool(data)
