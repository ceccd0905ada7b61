"""Infrastructure errors – lookup service and I/O failures."""

from __future__ import annotations

from typing import Any

from togglekit.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a feature-model violation."""

    default_code = "infrastructure_error"


class TimeoutError(InfrastructureError):  # noqa: A001
    """An I/O operation exceeded its deadline."""

    default_code = "infrastructure_timeout"


class ExternalServiceError(InfrastructureError):
    """An external service (e.g. the geo-IP lookup) returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        detail = {"service": service, **(kwargs.pop("detail", None) or {})}
        if status_code is not None:
            detail["status_code"] = status_code
        super().__init__(message or f"External service '{service}' error", detail=detail, **kwargs)
        self.service = service
        self.status_code = status_code


__all__ = [
    "ExternalServiceError",
    "InfrastructureError",
    "TimeoutError",
]
