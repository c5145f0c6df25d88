"""Registry for creating and managing site adapter instances."""

from typing import Dict, List, Optional, Tuple, Type

import structlog

from techreview.scrapers.base import BaseSiteAdapter, SourceId
from techreview.scrapers.utils.browser_manager import BrowserManager, get_browser_manager


logger = structlog.get_logger(__name__)


class AdapterRegistry:
    """Maps each SourceId to the adapter class that scrapes it.

    Provides dependency injection for the browser manager. Adding a
    retailer means registering one more adapter class here.
    """

    def __init__(self, browser_manager: Optional[BrowserManager] = None):
        """Initialize the registry.

        Args:
            browser_manager: Shared browser manager; the global one when omitted
        """
        self._browser_manager = browser_manager
        self._adapter_registry: Dict[SourceId, Type[BaseSiteAdapter]] = {}

    @property
    def browser_manager(self) -> BrowserManager:
        if self._browser_manager is None:
            self._browser_manager = get_browser_manager()
        return self._browser_manager

    def register_adapter(self, source: SourceId, adapter_class: Type[BaseSiteAdapter]) -> None:
        """Register an adapter class for a retailer.

        Args:
            source: Retailer identifier
            adapter_class: Adapter class (must inherit from BaseSiteAdapter)
        """
        if not isinstance(adapter_class, type) or not issubclass(adapter_class, BaseSiteAdapter):
            raise ValueError(f"Adapter class must inherit from BaseSiteAdapter: {adapter_class}")
        if not adapter_class.hostnames:
            raise ValueError(f"Adapter class declares no hostnames: {adapter_class.__name__}")

        self._adapter_registry[SourceId(source)] = adapter_class
        logger.info("adapter_registered", source=SourceId(source).value, adapter=adapter_class.__name__)

    def create_adapter(self, source: SourceId) -> Optional[BaseSiteAdapter]:
        """Create and configure an adapter instance.

        Args:
            source: Retailer identifier

        Returns:
            Configured adapter instance, or None if not registered
        """
        adapter_class = self._adapter_registry.get(source)
        if not adapter_class:
            logger.warning("adapter_not_found", source=str(source))
            return None

        adapter = adapter_class()
        adapter.browser_manager = self.browser_manager
        return adapter

    def get_registered_sources(self) -> List[SourceId]:
        """Get registered sources in registration order."""
        return list(self._adapter_registry.keys())

    def has_adapter(self, source: SourceId) -> bool:
        return source in self._adapter_registry

    def hostname_table(self) -> List[Tuple[str, SourceId]]:
        """Hostname substrings paired with their source, in registration order."""
        return [
            (hostname.lower(), source)
            for source, adapter_class in self._adapter_registry.items()
            for hostname in adapter_class.hostnames
        ]

    def supported_hostnames(self) -> List[str]:
        return [hostname for hostname, _ in self.hostname_table()]


# Global registry instance
adapter_registry = AdapterRegistry()


def get_adapter_registry() -> AdapterRegistry:
    """Get the global adapter registry instance.

    Returns:
        AdapterRegistry instance
    """
    return adapter_registry
