"""Application toggles – build_engine wiring helper."""
from __future__ import annotations

from togglekit.application.features.cached import CachedFeatureStore
from togglekit.application.features.store import FeatureStore
from togglekit.application.toggles.context import ContextProvider
from togglekit.application.toggles.engine import ToggleEngine
from togglekit.application.toggles.location import LocationProvider
from togglekit.application.toggles.registry import default_registry
from togglekit.config.settings import ToggleSettings
from togglekit.kernel.errors import require


def build_engine(
    settings: ToggleSettings,
    store: FeatureStore,
    location_provider: LocationProvider | None = None,
    context_provider: ContextProvider | None = None,
) -> ToggleEngine:
    """Wire a :class:`ToggleEngine` with the built-in strategies.

    The store is wrapped in a :class:`CachedFeatureStore` when
    ``settings.feature_cache_ttl_seconds`` is positive.
    """
    settings = require(settings, "settings")
    store = require(store, "store")
    if settings.caching_enabled:
        store = CachedFeatureStore(store, ttl_seconds=settings.feature_cache_ttl_seconds)
    return ToggleEngine(
        store,
        default_registry(location_provider),
        context_provider=context_provider,
        separator=settings.list_separator,
    )


__all__ = ["build_engine"]
