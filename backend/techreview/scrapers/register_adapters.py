"""Register all site adapters with the registry.

This module should be imported during application startup to register
all available adapters with the adapter registry.
"""

from typing import Optional

import structlog

from techreview.scrapers.adapters import DienmayxanhAdapter, ThegioididongAdapter
from techreview.scrapers.base import SourceId
from techreview.scrapers.factory import AdapterRegistry, get_adapter_registry

logger = structlog.get_logger(__name__)


ADAPTERS = [
    (SourceId.THEGIOIDIDONG, ThegioididongAdapter),
    (SourceId.DIENMAYXANH, DienmayxanhAdapter),
]


def register_all_adapters(registry: Optional[AdapterRegistry] = None) -> AdapterRegistry:
    """Register all available adapters.

    Args:
        registry: Registry to fill; the global one when omitted

    Returns:
        The registry that was filled
    """
    if registry is None:
        registry = get_adapter_registry()

    for source, adapter_class in ADAPTERS:
        registry.register_adapter(source, adapter_class)

    logger.info(
        "all_adapters_registered",
        count=len(registry.get_registered_sources()),
        sources=[source.value for source in registry.get_registered_sources()],
    )
    return registry
