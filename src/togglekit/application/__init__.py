"""Application – feature model, stores and toggle evaluation (framework-agnostic)."""

from togglekit.application.features import (
    CachedFeatureStore,
    Feature,
    FeatureStore,
    InMemoryFeatureStore,
    Toggle,
)
from togglekit.application.toggles import (
    EvaluationContext,
    LocationProvider,
    ParameterBinder,
    StrategyRegistry,
    ToggleEngine,
    ToggleStrategy,
    default_registry,
)

__all__ = [
    "CachedFeatureStore",
    "EvaluationContext",
    "Feature",
    "FeatureStore",
    "InMemoryFeatureStore",
    "LocationProvider",
    "ParameterBinder",
    "StrategyRegistry",
    "Toggle",
    "ToggleEngine",
    "ToggleStrategy",
    "default_registry",
]
