"""Task model carrying a free-text category label."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Task:
    """A task as seen by category filters and pickers."""

    title: str
    category: Optional[str] = None  # free-text label, not a reference to a Category id
    subcategory: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create a Task from a dictionary, ignoring unknown keys."""
        return cls(
            title=data.get("title", ""),
            category=data.get("category"),
            subcategory=data.get("subcategory"),
        )

    def to_dict(self) -> dict:
        """Convert task to a plain dictionary."""
        return {
            "title": self.title,
            "category": self.category,
            "subcategory": self.subcategory,
        }
