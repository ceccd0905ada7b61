"""Built-in toggle strategies."""
from togglekit.application.toggles.strategies.browser import BROWSERS, UserAgentBrowserToggle
from togglekit.application.toggles.strategies.constant import OffToggle, OnToggle
from togglekit.application.toggles.strategies.ip import IP_ADDRESSES, ClientIpAddressToggle
from togglekit.application.toggles.strategies.location import COUNTRIES, LocationToggle

__all__ = [
    "BROWSERS",
    "COUNTRIES",
    "ClientIpAddressToggle",
    "IP_ADDRESSES",
    "LocationToggle",
    "OffToggle",
    "OnToggle",
    "UserAgentBrowserToggle",
]
