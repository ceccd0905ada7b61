"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── NotFoundError
    │   │   ├── FeatureNotFoundError
    │   │   ├── ToggleNotFoundError
    │   │   └── StrategyNotRegisteredError
    │   └── DuplicateToggleError
    ├── ApplicationError         (application.py)
    │   ├── MissingDependencyError
    │   └── TimeoutError
    └── InfrastructureError      (infrastructure.py)
        ├── TimeoutError
        └── ExternalServiceError
"""

from togglekit.kernel.errors.application import (
    ApplicationError,
    MissingDependencyError,
    TimeoutError,
    require,
)
from togglekit.kernel.errors.base import BaseError
from togglekit.kernel.errors.domain import (
    DomainError,
    DuplicateToggleError,
    FeatureNotFoundError,
    NotFoundError,
    StrategyNotRegisteredError,
    ToggleNotFoundError,
)
from togglekit.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
)
from togglekit.kernel.errors.infrastructure import TimeoutError as InfrastructureTimeoutError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "DuplicateToggleError",
    "ExternalServiceError",
    "FeatureNotFoundError",
    "InfrastructureError",
    "InfrastructureTimeoutError",
    "MissingDependencyError",
    "NotFoundError",
    "StrategyNotRegisteredError",
    "TimeoutError",
    "ToggleNotFoundError",
    "require",
]
