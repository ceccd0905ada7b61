"""Application toggles – ToggleEngine, the evaluation composition root.

Each call runs one linear pipeline: fetch feature, select toggle, bind
parameters, gather context, evaluate, return. Nothing is cached here and no
state survives the call; caching belongs to the :class:`FeatureStore`.

Callers see ``True``, ``False``, a :class:`NotFoundError` subclass, or
``asyncio.CancelledError``.
"""
from __future__ import annotations

from togglekit.application.features.feature import Feature, Toggle
from togglekit.application.features.store import FeatureStore
from togglekit.application.toggles.binder import DEFAULT_SPLIT_SEPARATOR, ParameterBinder
from togglekit.application.toggles.context import ContextProvider, EvaluationContext
from togglekit.application.toggles.registry import StrategyRegistry
from togglekit.kernel.errors import require
from togglekit.observability.logging import get_logger

_log = get_logger(__name__)


class ToggleEngine:
    """Evaluate toggles of stored features against request context.

    Parameters
    ----------
    store:
        Where features are resolved from.
    registry:
        Strategy factories keyed by toggle type.
    context_provider:
        Default source of request facts; a per-call provider overrides it.
    separator:
        List separator handed to every :class:`ParameterBinder`.
    """

    def __init__(
        self,
        store: FeatureStore,
        registry: StrategyRegistry,
        context_provider: ContextProvider | None = None,
        separator: str = DEFAULT_SPLIT_SEPARATOR,
    ) -> None:
        self._store = require(store, "store")
        self._registry = require(registry, "registry")
        self._context_provider = context_provider
        self._separator = separator

    @property
    def registry(self) -> StrategyRegistry:
        return self._registry

    async def is_active(
        self,
        feature_name: str,
        strategy_type: str,
        product: str | None = None,
        context_provider: ContextProvider | None = None,
    ) -> bool:
        """Evaluate the *strategy_type* toggle of *feature_name*.

        Raises :class:`FeatureNotFoundError` / :class:`ToggleNotFoundError` /
        :class:`StrategyNotRegisteredError` when the configuration is missing.
        """
        feature = await self._store.find_feature(feature_name, product)
        toggle = feature.get_toggle(strategy_type)
        context = EvaluationContext.from_provider(context_provider or self._context_provider)
        return await self._evaluate(feature, toggle, context)

    async def is_feature_active(
        self,
        feature_name: str,
        product: str | None = None,
        context_provider: ContextProvider | None = None,
    ) -> bool:
        """A feature is active when enabled and every one of its toggles is active."""
        feature = await self._store.find_feature(feature_name, product)
        if not feature.enabled:
            _log.debug("engine.feature.disabled", feature=feature_name, product=product)
            return False

        context = EvaluationContext.from_provider(context_provider or self._context_provider)
        for toggle in feature.toggles:
            if not await self._evaluate(feature, toggle, context):
                return False
        return True

    async def _evaluate(self, feature: Feature, toggle: Toggle, context: EvaluationContext) -> bool:
        strategy = self._registry.create(toggle.type)
        parameters = ParameterBinder(toggle.get_data(), self._separator)
        active = await strategy.evaluate(parameters, context)
        _log.debug(
            "engine.toggle.evaluated",
            feature=feature.name,
            product=feature.product,
            toggle=toggle.type,
            active=active,
        )
        return active


__all__ = ["ToggleEngine"]
