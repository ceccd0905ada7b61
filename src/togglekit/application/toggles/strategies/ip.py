"""Toggle strategy – active for an explicit allow-list of caller IP addresses."""
from __future__ import annotations

import ipaddress

from togglekit.application.toggles.binder import ParameterBinder
from togglekit.application.toggles.context import EvaluationContext
from togglekit.application.toggles.descriptor import (
    SEMICOLON_LIST_PARAMETER_TYPE,
    ParameterDescriptor,
    ToggleDescriptor,
)
from togglekit.application.toggles.strategy import ToggleStrategy

IP_ADDRESSES = "IpAddresses"


def _parse(value: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
    try:
        return ipaddress.ip_address(value.strip())
    except ValueError:
        return None


class ClientIpAddressToggle(ToggleStrategy):
    """Active when the caller address equals a listed address (``::1`` matches ``0:0:0:0:0:0:0:1``)."""

    type = "ClientIpAddressToggle"

    @classmethod
    def describe(cls) -> ToggleDescriptor:
        return ToggleDescriptor(
            type=cls.type,
            friendly_name="On Client IP",
            description="Toggle that is active when the caller IP address is in the configured list.",
            parameters=(
                ParameterDescriptor(
                    name=IP_ADDRESSES,
                    type=SEMICOLON_LIST_PARAMETER_TYPE,
                    description="Collection of IP addresses delimited by ';' character.",
                ),
            ),
        )

    async def evaluate(self, parameters: ParameterBinder, context: EvaluationContext) -> bool:
        caller = _parse(context.caller_address)
        if caller is None:
            return False
        return any(_parse(candidate) == caller for candidate in parameters.get_list_value(IP_ADDRESSES))


__all__ = ["ClientIpAddressToggle", "IP_ADDRESSES"]
