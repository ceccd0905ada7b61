"""Application features – feature model and store ports."""
from togglekit.application.features.cached import CachedFeatureStore
from togglekit.application.features.feature import Feature, ParameterData, Toggle, freeze_parameters
from togglekit.application.features.store import FeatureStore, InMemoryFeatureStore

__all__ = [
    "CachedFeatureStore",
    "Feature",
    "FeatureStore",
    "InMemoryFeatureStore",
    "ParameterData",
    "Toggle",
    "freeze_parameters",
]
