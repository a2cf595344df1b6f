"""Built-in category catalog used to seed the directory."""

import json
from functools import lru_cache
from pathlib import Path
from typing import List, Tuple
from models.category import Category

SEED_FILE = Path(__file__).parent / "seed_categories.json"

# Returned by name listings when the store cannot be read. Kept in declaration
# order, not sorted.
DEFAULT_CATEGORY_NAMES = [
    "Development",
    "Design",
    "Documentation",
    "Testing",
    "Security",
    "Performance",
    "Marketing",
    "Research",
    "Planning",
]


@lru_cache(maxsize=1)
def _load_seed_data() -> Tuple[dict, ...]:
    with open(SEED_FILE, "r") as f:
        return tuple(json.load(f))


def load_seed_categories() -> List[Category]:
    """Load a fresh copy of the built-in categories.

    Returns:
        List of Category objects in declaration order. Each call returns new
        objects, so callers may mutate them freely.
    """
    return [Category.from_dict(data) for data in _load_seed_data()]
