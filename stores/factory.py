"""Factory for creating category store instances."""

from typing import Optional
from config import Config
from stores.base import CategoryStore
from stores.memory import InMemoryCategoryStore
from stores.remote import RecordStoreClient, RemoteCategoryStore
from logger import get_logger

logger = get_logger()


def get_category_store(
    config: Config, client: Optional[RecordStoreClient] = None
) -> CategoryStore:
    """Create a category store based on configuration.

    Args:
        config: Application configuration.
        client: Record-store client, required for the remote backend.

    Returns:
        CategoryStore instance.

    Raises:
        ValueError: If the backend is unknown or the remote backend is
                    selected without a client.
    """
    backend = getattr(config, "store_backend", None) or "memory"

    if backend == "memory":
        logger.debug("Using in-memory category store")
        return InMemoryCategoryStore()

    elif backend == "remote":
        if client is None:
            raise ValueError(
                "Remote category store selected but no record store client provided"
            )
        logger.info(f"Using remote category store (table: {config.store_table})")
        return RemoteCategoryStore(client, table=config.store_table)

    else:
        raise ValueError(f"Unknown category store backend: {backend}")
