"""Category model for task categorization."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

COLOR_OPTIONS = [
    "#6366F1",
    "#8B5CF6",
    "#EC4899",
    "#EF4444",
    "#F59E0B",
    "#10B981",
    "#3B82F6",
    "#06B6D4",
    "#84CC16",
    "#F97316",
]


class Urgency(Enum):
    """Default severity level attached to a category."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @classmethod
    def parse(cls, value: Union[str, "Urgency"]) -> "Urgency":
        """Convert a string (any case) or Urgency into an Urgency.

        Raises:
            ValueError: If value is not one of the four levels.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Invalid urgency '{value}'. Must be one of: "
                f"{', '.join(u.value for u in cls)}"
            ) from None

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def badge_style(self) -> str:
        """CSS classes used to render the urgency badge."""
        return _BADGE_STYLES[self]


_BADGE_STYLES = {
    Urgency.LOW: "text-green-700 bg-green-100",
    Urgency.MEDIUM: "text-yellow-700 bg-yellow-100",
    Urgency.HIGH: "text-orange-700 bg-orange-100",
    Urgency.URGENT: "text-red-700 bg-red-100",
}


@dataclass
class Category:
    """Represents a category used to tag tasks.

    Attributes:
        id: Unique identifier (assigned by the directory).
        name: Category name (intended to be unique, not enforced).
        subcategories: Ordered subcategory labels.
        urgency: Default urgency level for tasks in this category.
        description: Free-form description, may be empty.
        color: Display color, usually a hex code.
    """

    id: int
    name: str
    subcategories: List[str] = field(default_factory=list)
    urgency: Urgency = Urgency.MEDIUM
    description: str = ""
    color: str = COLOR_OPTIONS[0]

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name or any subcategory."""
        needle = query.lower()
        if needle in self.name.lower():
            return True
        return any(needle in sub.lower() for sub in self.subcategories)

    def to_dict(self) -> dict:
        """Convert category to a plain dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "subcategories": list(self.subcategories),
            "urgency": self.urgency.value,
            "description": self.description,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        """Create a Category from a dictionary produced by to_dict()."""
        return cls(
            id=int(data["id"]),
            name=data["name"],
            subcategories=list(data.get("subcategories") or []),
            urgency=Urgency.parse(data.get("urgency") or Urgency.MEDIUM),
            description=data.get("description") or "",
            color=data.get("color") or COLOR_OPTIONS[0],
        )
