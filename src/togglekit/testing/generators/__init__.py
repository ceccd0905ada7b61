"""Testing generators – property-based strategies."""
from togglekit.testing.generators.strategies import (
    browser_token_strategy,
    semicolon_list_strategy,
    user_agent_strategy,
)

__all__ = ["browser_token_strategy", "semicolon_list_strategy", "user_agent_strategy"]
