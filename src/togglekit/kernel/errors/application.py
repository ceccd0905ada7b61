"""Application-layer errors – wiring and use-case level concerns."""

from __future__ import annotations

from typing import Any, TypeVar

from togglekit.kernel.errors.base import BaseError

T = TypeVar("T")


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class MissingDependencyError(ApplicationError):
    """A required collaborator was not supplied at construction time."""

    default_code = "missing_dependency"

    def __init__(self, dependency: str, **kwargs: Any) -> None:
        super().__init__(f"Required dependency '{dependency}' is missing", **kwargs)
        self.dependency = dependency


class TimeoutError(ApplicationError):  # noqa: A001
    """Operation timed out."""

    default_code = "timeout"


def require(value: T | None, name: str) -> T:
    """Return *value* or raise :class:`MissingDependencyError` when it is ``None``."""
    if value is None:
        raise MissingDependencyError(name)
    return value


__all__ = [
    "ApplicationError",
    "MissingDependencyError",
    "TimeoutError",
    "require",
]
