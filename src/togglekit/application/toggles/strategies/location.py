"""Toggle strategy – active when the caller's IP resolves to an allowed country."""
from __future__ import annotations

from togglekit.application.toggles.binder import ParameterBinder
from togglekit.application.toggles.context import EvaluationContext
from togglekit.application.toggles.descriptor import (
    SEMICOLON_LIST_PARAMETER_TYPE,
    ParameterDescriptor,
    ToggleDescriptor,
)
from togglekit.application.toggles.location import LocationProvider
from togglekit.application.toggles.strategy import ToggleStrategy
from togglekit.kernel.errors import BaseError, require
from togglekit.observability.logging import get_logger

_log = get_logger(__name__)

COUNTRIES = "Countries"


class LocationToggle(ToggleStrategy):
    """Resolve the caller address through a :class:`LocationProvider` and match ``Countries``.

    Any lookup failure evaluates to ``False``. ``asyncio.CancelledError`` is
    not an ``Exception`` and therefore reaches the caller untouched.
    """

    type = "LocationToggle"

    def __init__(self, location_provider: LocationProvider) -> None:
        self._location = require(location_provider, "location_provider")

    @classmethod
    def describe(cls) -> ToggleDescriptor:
        return ToggleDescriptor(
            type=cls.type,
            friendly_name="On Country",
            description="Toggle that is active when the caller's IP address belongs to one of the configured countries.",
            parameters=(
                ParameterDescriptor(
                    name=COUNTRIES,
                    type=SEMICOLON_LIST_PARAMETER_TYPE,
                    description="Collection of country names delimited by ';' character.",
                ),
            ),
        )

    async def evaluate(self, parameters: ParameterBinder, context: EvaluationContext) -> bool:
        allowed = parameters.get_list_value(COUNTRIES)
        address = context.caller_address.strip()
        if not allowed or not address:
            return False

        try:
            country = await self._location.get_country_name(address)
        except BaseError as exc:
            _log.warning("toggle.location.lookup_failed", caller_address=address, **exc.log_fields())
            return False
        except Exception as exc:  # noqa: BLE001
            _log.warning("toggle.location.lookup_failed", caller_address=address, error=repr(exc))
            return False

        if not country:
            _log.info("toggle.location.unresolved", caller_address=address)
            return False

        folded = country.strip().casefold()
        for candidate in allowed:
            if candidate.casefold() == folded:
                _log.info("toggle.location.allowed", country=country, candidate=candidate)
                return True
        _log.info("toggle.location.rejected", country=country, allowed=allowed)
        return False


__all__ = ["COUNTRIES", "LocationToggle"]
