"""Kernel – framework-agnostic building blocks."""

from togglekit.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ExternalServiceError,
    FeatureNotFoundError,
    InfrastructureError,
    MissingDependencyError,
    NotFoundError,
    StrategyNotRegisteredError,
    TimeoutError,
    ToggleNotFoundError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "FeatureNotFoundError",
    "InfrastructureError",
    "MissingDependencyError",
    "NotFoundError",
    "StrategyNotRegisteredError",
    "TimeoutError",
    "ToggleNotFoundError",
]
