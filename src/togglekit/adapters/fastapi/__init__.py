"""FastAPI adapter – toggle context dependencies."""
from togglekit.adapters.fastapi.deps import (
    ToggleContextDep,
    context_dependency,
    forwarded_context_provider,
    request_context_provider,
)

__all__ = [
    "ToggleContextDep",
    "context_dependency",
    "forwarded_context_provider",
    "request_context_provider",
]
