"""HTTP adapter – HttpLocationProvider (geo-IP lookup over HTTP)."""
from __future__ import annotations

import ipaddress
from typing import Any

from togglekit.application.toggles.location import LocationProvider
from togglekit.config.settings import ToggleSettings
from togglekit.config.validation import MissingRequiredSettingError
from togglekit.kernel.errors import ExternalServiceError, InfrastructureTimeoutError, NotFoundError
from togglekit.observability.logging import get_logger

_log = get_logger(__name__)


def _require_httpx() -> Any:
    try:
        import httpx  # type: ignore[import-untyped]
        return httpx
    except ImportError as exc:
        raise ImportError("Install 'togglekit[http]' to use the HTTP location adapter") from exc


class HttpLocationProvider(LocationProvider):
    """Resolve ``GET {base_url}/{ip}`` and read the country name from the JSON body.

    Only well-formed IPv4/IPv6 addresses reach the wire; anything else raises
    :class:`NotFoundError` without a request. Error mapping: timeouts raise :class:`InfrastructureTimeoutError`, 404 raises
    :class:`NotFoundError`, any other transport or status failure raises
    :class:`ExternalServiceError`.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        country_field: str = "country",
        **kwargs: Any,
    ) -> None:
        httpx = _require_httpx()
        self._country_field = country_field
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    @classmethod
    def from_settings(cls, settings: ToggleSettings, **kwargs: Any) -> "HttpLocationProvider":
        if not settings.location_base_url:
            raise MissingRequiredSettingError(ToggleSettings.env_key("location_base_url"))
        return cls(
            settings.location_base_url,
            timeout=settings.location_timeout_seconds,
            **kwargs,
        )

    async def __aenter__(self) -> "HttpLocationProvider":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_country_name(self, ip_address: str) -> str | None:
        httpx = _require_httpx()
        try:
            address = ipaddress.ip_address(ip_address.strip())
        except ValueError as exc:
            _log.warning("location.invalid_address", caller_address=ip_address)
            raise NotFoundError("Location", ip_address) from exc
        url = f"/{address}"
        try:
            response = await self._client.get(url)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as exc:
            raise InfrastructureTimeoutError(f"Location lookup timed out for {ip_address}") from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            if status == 404:
                raise NotFoundError("Location", ip_address) from exc
            raise ExternalServiceError(
                service="location",
                message=f"HTTP {status} from location lookup",
                status_code=status,
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(service="location", message=str(exc)) from exc
        except ValueError as exc:
            raise ExternalServiceError(service="location", message="Malformed location payload") from exc

        country = payload.get(self._country_field) if isinstance(payload, dict) else None
        _log.debug("location.resolved", caller_address=ip_address, country=country)
        if not country:
            return None
        return str(country)


__all__ = ["HttpLocationProvider"]
