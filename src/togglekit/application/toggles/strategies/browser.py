"""Toggle strategy – active when the request's user agent names an allowed browser."""
from __future__ import annotations

from togglekit.application.toggles.binder import ParameterBinder
from togglekit.application.toggles.context import EvaluationContext
from togglekit.application.toggles.descriptor import (
    SEMICOLON_LIST_PARAMETER_TYPE,
    ParameterDescriptor,
    ToggleDescriptor,
)
from togglekit.application.toggles.strategy import ToggleStrategy
from togglekit.observability.logging import get_logger

_log = get_logger(__name__)

BROWSERS = "Browsers"


class UserAgentBrowserToggle(ToggleStrategy):
    """Case-insensitive substring match of ``Browsers`` tokens against the user agent."""

    type = "UserAgentBrowserToggle"

    @classmethod
    def describe(cls) -> ToggleDescriptor:
        return ToggleDescriptor(
            type=cls.type,
            friendly_name="On Browser",
            description="Toggle that is active depending on request user agent browser information.",
            parameters=(
                ParameterDescriptor(
                    name=BROWSERS,
                    type=SEMICOLON_LIST_PARAMETER_TYPE,
                    description="Collection of browser names delimited by ';' character.",
                ),
            ),
        )

    async def evaluate(self, parameters: ParameterBinder, context: EvaluationContext) -> bool:
        allowed = parameters.get_list_value(BROWSERS)
        current = context.user_agent
        if not allowed or not current:
            return False

        _log.debug("toggle.browser.verifying", user_agent=current, allowed=allowed)
        folded = current.casefold()
        for browser in allowed:
            if browser.casefold() in folded:
                _log.info("toggle.browser.allowed", user_agent=current, browser=browser)
                return True
            _log.info("toggle.browser.rejected", user_agent=current, browser=browser)
        return False


__all__ = ["BROWSERS", "UserAgentBrowserToggle"]
