"""Application toggles – LocationProvider port (IP address to country name)."""
from __future__ import annotations

import abc


class LocationProvider(abc.ABC):
    """Port: resolve a caller IP address to a country name.

    May raise :class:`~togglekit.kernel.errors.NotFoundError`,
    :class:`~togglekit.kernel.errors.InfrastructureTimeoutError` or
    :class:`~togglekit.kernel.errors.ExternalServiceError`. Returning ``None``
    means the address resolved to no country.
    """

    @abc.abstractmethod
    async def get_country_name(self, ip_address: str) -> str | None: ...


__all__ = ["LocationProvider"]
