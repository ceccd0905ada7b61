"""Application features – FeatureStore port and InMemoryFeatureStore."""
from __future__ import annotations

import abc

from togglekit.application.features.feature import Feature
from togglekit.kernel.errors import FeatureNotFoundError


class FeatureStore(abc.ABC):
    """Port: resolve a feature name (and optional product) to its configuration.

    Implementations must raise :class:`FeatureNotFoundError` for unknown
    features and must let ``asyncio.CancelledError`` propagate.
    """

    @abc.abstractmethod
    async def find_feature(self, name: str, product: str | None = None) -> Feature: ...


class InMemoryFeatureStore(FeatureStore):
    """Dict-backed store keyed by ``(name, product)``."""

    def __init__(self, features: list[Feature] | None = None) -> None:
        self._features: dict[tuple[str, str | None], Feature] = {}
        for feature in features or []:
            self.add(feature)

    def add(self, feature: Feature) -> None:
        """Add or replace *feature*. Features are immutable so replacement is atomic."""
        self._features[feature.key] = feature

    def remove(self, name: str, product: str | None = None) -> None:
        self._features.pop((name, product), None)

    async def find_feature(self, name: str, product: str | None = None) -> Feature:
        feature = self._features.get((name, product))
        if feature is None:
            raise FeatureNotFoundError(name, product)
        return feature


__all__ = ["FeatureStore", "InMemoryFeatureStore"]
