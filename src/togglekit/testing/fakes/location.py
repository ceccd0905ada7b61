"""Testing fakes – FakeLocationProvider."""
from __future__ import annotations

import asyncio

from togglekit.application.toggles.location import LocationProvider


class FakeLocationProvider(LocationProvider):
    """In-memory :class:`LocationProvider` backed by an ``{ip: country}`` dict.

    Usage::

        geo = FakeLocationProvider({"83.44.1.1": "Spain"})
        geo.fail_with(ExternalServiceError("geo"))   # every lookup raises
        geo.delay(1.0)                               # lookups sleep first

    Every requested address is appended to :attr:`calls`.
    """

    def __init__(self, countries: dict[str, str] | None = None) -> None:
        self._countries: dict[str, str] = dict(countries or {})
        self._error: Exception | None = None
        self._delay = 0.0
        self.calls: list[str] = []

    async def get_country_name(self, ip_address: str) -> str | None:
        self.calls.append(ip_address)
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        return self._countries.get(ip_address)

    # ------------------------------------------------------------------
    # Test-setup helpers
    # ------------------------------------------------------------------

    def set_country(self, ip_address: str, country: str) -> "FakeLocationProvider":
        self._countries[ip_address] = country
        return self

    def fail_with(self, error: Exception | None) -> "FakeLocationProvider":
        """Raise *error* from every lookup; ``None`` restores normal behaviour."""
        self._error = error
        return self

    def delay(self, seconds: float) -> "FakeLocationProvider":
        self._delay = seconds
        return self

    def reset(self) -> None:
        self._countries.clear()
        self._error = None
        self._delay = 0.0
        self.calls.clear()


__all__ = ["FakeLocationProvider"]
