"""Application toggles – binder, context, strategies, registry and engine."""
from togglekit.application.toggles.binder import DEFAULT_SPLIT_SEPARATOR, ParameterBinder
from togglekit.application.toggles.context import (
    ContextProvider,
    EvaluationContext,
    IpAddressSource,
    ScopeContextProvider,
    StaticContextProvider,
    UserAgentSource,
)
from togglekit.application.toggles.descriptor import (
    SEMICOLON_LIST_PARAMETER_TYPE,
    STRING_PARAMETER_TYPE,
    ParameterDescriptor,
    ToggleDescriptor,
)
from togglekit.application.toggles.engine import ToggleEngine
from togglekit.application.toggles.factory import build_engine
from togglekit.application.toggles.location import LocationProvider
from togglekit.application.toggles.registry import StrategyFactory, StrategyRegistry, default_registry
from togglekit.application.toggles.strategies import (
    ClientIpAddressToggle,
    LocationToggle,
    OffToggle,
    OnToggle,
    UserAgentBrowserToggle,
)
from togglekit.application.toggles.strategy import ToggleStrategy

__all__ = [
    "ClientIpAddressToggle",
    "ContextProvider",
    "DEFAULT_SPLIT_SEPARATOR",
    "EvaluationContext",
    "IpAddressSource",
    "LocationProvider",
    "LocationToggle",
    "OffToggle",
    "OnToggle",
    "ParameterBinder",
    "ParameterDescriptor",
    "SEMICOLON_LIST_PARAMETER_TYPE",
    "STRING_PARAMETER_TYPE",
    "ScopeContextProvider",
    "StaticContextProvider",
    "StrategyFactory",
    "StrategyRegistry",
    "ToggleDescriptor",
    "ToggleEngine",
    "ToggleStrategy",
    "UserAgentBrowserToggle",
    "UserAgentSource",
    "build_engine",
    "default_registry",
]
