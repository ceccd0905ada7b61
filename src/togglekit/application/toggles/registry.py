"""Application toggles – StrategyRegistry.

Maps stable strategy ids to factories so the engine can evaluate toggles
without importing concrete strategy classes::

    registry = StrategyRegistry()
    registry.register_strategy(UserAgentBrowserToggle)
    registry.register_strategy(LocationToggle, lambda: LocationToggle(geo))
"""
from __future__ import annotations

from typing import Callable

from togglekit.application.toggles.descriptor import ToggleDescriptor
from togglekit.application.toggles.location import LocationProvider
from togglekit.application.toggles.strategy import ToggleStrategy
from togglekit.kernel.errors import StrategyNotRegisteredError

StrategyFactory = Callable[[], ToggleStrategy]


class StrategyRegistry:
    def __init__(self) -> None:
        self._factories: dict[str, StrategyFactory] = {}
        self._descriptors: dict[str, ToggleDescriptor] = {}

    def register(self, type_id: str, factory: StrategyFactory, descriptor: ToggleDescriptor) -> None:
        """Register (or replace) the factory for *type_id*."""
        if not type_id:
            raise ValueError("type_id must be a non-empty string")
        self._factories[type_id] = factory
        self._descriptors[type_id] = descriptor

    def register_strategy(
        self,
        strategy_cls: type[ToggleStrategy],
        factory: StrategyFactory | None = None,
    ) -> None:
        """Register *strategy_cls* under its ``type``; default factory is the no-arg constructor."""
        self.register(strategy_cls.type, factory or strategy_cls, strategy_cls.describe())

    def unregister(self, type_id: str) -> None:
        self._factories.pop(type_id, None)
        self._descriptors.pop(type_id, None)

    def create(self, type_id: str) -> ToggleStrategy:
        factory = self._factories.get(type_id)
        if factory is None:
            raise StrategyNotRegisteredError(type_id)
        return factory()

    def describe(self, type_id: str) -> ToggleDescriptor:
        descriptor = self._descriptors.get(type_id)
        if descriptor is None:
            raise StrategyNotRegisteredError(type_id)
        return descriptor

    def describe_all(self) -> list[ToggleDescriptor]:
        return [self._descriptors[k] for k in sorted(self._descriptors)]

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._factories

    def __len__(self) -> int:
        return len(self._factories)


def default_registry(location_provider: LocationProvider | None = None) -> StrategyRegistry:
    """Registry with every built-in strategy.

    :class:`LocationToggle` is only registered when a *location_provider* is given.
    """
    from togglekit.application.toggles.strategies import (
        ClientIpAddressToggle,
        LocationToggle,
        OffToggle,
        OnToggle,
        UserAgentBrowserToggle,
    )

    registry = StrategyRegistry()
    registry.register_strategy(OnToggle)
    registry.register_strategy(OffToggle)
    registry.register_strategy(UserAgentBrowserToggle)
    registry.register_strategy(ClientIpAddressToggle)
    if location_provider is not None:
        registry.register_strategy(LocationToggle, lambda: LocationToggle(location_provider))
    return registry


__all__ = ["StrategyFactory", "StrategyRegistry", "default_registry"]
