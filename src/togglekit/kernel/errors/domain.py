"""Domain errors – missing features, toggles and strategies."""

from __future__ import annotations

from typing import Any

from togglekit.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a feature-model rule is violated."""

    default_code = "domain_error"


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class FeatureNotFoundError(NotFoundError):
    """No feature with the given name exists for the requested product."""

    default_code = "feature_not_found"

    def __init__(self, feature_name: str, product: str | None = None) -> None:
        identifier = feature_name if product is None else f"{product}/{feature_name}"
        super().__init__(
            "Feature",
            identifier,
            detail={"feature": feature_name, "product": product},
        )
        self.feature_name = feature_name
        self.product = product


class ToggleNotFoundError(NotFoundError):
    """The feature exists but carries no toggle of the requested type."""

    default_code = "toggle_not_found"

    def __init__(self, feature_name: str, toggle_type: str) -> None:
        super().__init__(
            "Toggle",
            toggle_type,
            detail={"feature": feature_name, "toggle_type": toggle_type},
        )
        self.feature_name = feature_name
        self.toggle_type = toggle_type


class StrategyNotRegisteredError(NotFoundError):
    """No strategy factory is registered under the given type id."""

    default_code = "strategy_not_registered"

    def __init__(self, toggle_type: str) -> None:
        super().__init__("Strategy", toggle_type, detail={"toggle_type": toggle_type})
        self.toggle_type = toggle_type


class DuplicateToggleError(DomainError):
    """A feature declares two toggles with the same strategy type."""

    default_code = "duplicate_toggle"

    def __init__(self, feature_name: str, toggle_type: str) -> None:
        super().__init__(
            f"Feature '{feature_name}' declares toggle '{toggle_type}' more than once",
            detail={"feature": feature_name, "toggle_type": toggle_type},
        )
        self.feature_name = feature_name
        self.toggle_type = toggle_type


__all__ = [
    "DomainError",
    "DuplicateToggleError",
    "FeatureNotFoundError",
    "NotFoundError",
    "StrategyNotRegisteredError",
    "ToggleNotFoundError",
]
