"""Backing stores for the category directory."""

from stores.factory import get_category_store

__all__ = ["get_category_store"]
