"""Base services container for dependency injection."""

from config import Config
from stores.base import CategoryStore


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject a different category store for testing.

    Args:
        config: Application configuration object.
        store: Optional category store. If provided, the configured backend is ignored.
    """

    def __init__(self, config: Config, store: CategoryStore = None):
        """Initialize services with configuration.

        Args:
            config: Config object containing application configuration.
            store: Optional category store for dependency injection (testing).
                   If None, creates one from config via the store factory.
        """
        self.config = config

        # Lazy import to avoid circular dependencies
        from stores import get_category_store
        from services.categories import CategoryService

        self.store = store or get_category_store(config)
        self.categories = CategoryService(
            self.store, default_color=config.default_color
        )
