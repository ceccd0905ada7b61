"""FastAPI adapter – request-scoped context provider dependency.

Usage::

    @app.get("/checkout")
    async def checkout(context: ToggleContextDep) -> dict[str, bool]:
        return {"beta": await engine.is_feature_active("beta", context_provider=context)}

Annotations stay eager in this module: FastAPI inspects them at route
registration time.
"""
from typing import TYPE_CHECKING, Annotated, Any, Callable

from togglekit.application.toggles.context import ScopeContextProvider
from togglekit.config.settings import ToggleSettings

if TYPE_CHECKING:
    from starlette.requests import Request


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'togglekit[fastapi]' to use the FastAPI adapter"
        ) from exc


def request_context_provider(request: "Request") -> ScopeContextProvider:
    """Build a :class:`ScopeContextProvider` for the current request."""
    return ScopeContextProvider(request.scope)


def _scope_dependency(trust_forwarded_for: bool) -> Callable[..., ScopeContextProvider]:
    _require_fastapi()
    from fastapi import Request

    def dependency(request: Request) -> ScopeContextProvider:
        return ScopeContextProvider(request.scope, trust_forwarded_for=trust_forwarded_for)

    return dependency


def forwarded_context_provider(trust_forwarded_for: bool = True) -> Callable[..., ScopeContextProvider]:
    """Dependency factory honouring ``X-Forwarded-For`` (deploy behind a trusted proxy only)."""
    return _scope_dependency(trust_forwarded_for)


def context_dependency(settings: ToggleSettings) -> Callable[..., ScopeContextProvider]:
    """Dependency factory driven by ``TOGGLES_TRUST_FORWARDED_FOR``.

    Usage::

        settings = EnvSettingsLoader().load(ToggleSettings)
        ToggleContext = Annotated[ScopeContextProvider, Depends(context_dependency(settings))]
    """
    return _scope_dependency(settings.trust_forwarded_for)


def _make_context_dep() -> Any:
    try:
        from fastapi import Depends, Request  # type: ignore[import-untyped]
    except ImportError:
        return None

    def dependency(request: Request) -> ScopeContextProvider:
        return request_context_provider(request)

    return Annotated[ScopeContextProvider, Depends(dependency)]


# Build at import time (None if fastapi absent)
ToggleContextDep = _make_context_dep()


__all__ = [
    "ToggleContextDep",
    "context_dependency",
    "forwarded_context_provider",
    "request_context_provider",
]
