"""Application toggles – context providers and EvaluationContext.

A :class:`ContextProvider` answers "what is the current user agent / caller
address" without tying strategies to a web framework. The engine reads it
once per call into an immutable :class:`EvaluationContext` and hands that to
the strategy explicitly.
"""
from __future__ import annotations

import dataclasses
import ipaddress
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class UserAgentSource(Protocol):
    def current_user_agent(self) -> str: ...


@runtime_checkable
class IpAddressSource(Protocol):
    def current_caller_address(self) -> str: ...


@runtime_checkable
class ContextProvider(UserAgentSource, IpAddressSource, Protocol):
    """Both capabilities. Implementations return ``""`` instead of raising."""


@dataclasses.dataclass(frozen=True)
class EvaluationContext:
    """Ambient request facts for a single evaluation."""

    user_agent: str = ""
    caller_address: str = ""

    @classmethod
    def from_provider(cls, provider: ContextProvider | None) -> "EvaluationContext":
        if provider is None:
            return cls()
        return cls(
            user_agent=provider.current_user_agent() or "",
            caller_address=provider.current_caller_address() or "",
        )


class StaticContextProvider:
    """Provider with fixed values; handy for background jobs and tests."""

    def __init__(self, user_agent: str = "", caller_address: str = "") -> None:
        self._user_agent = user_agent or ""
        self._caller_address = caller_address or ""

    def current_user_agent(self) -> str:
        return self._user_agent

    def current_caller_address(self) -> str:
        return self._caller_address


def _valid_address(value: str) -> str:
    try:
        return str(ipaddress.ip_address(value.strip()))
    except ValueError:
        return ""


class ScopeContextProvider:
    """Read the user agent and caller address from an ASGI connection scope.

    ``X-Forwarded-For`` is only honoured when *trust_forwarded_for* is set,
    and then only its first hop is used. A first hop that is not an IP
    address yields ``""``.
    """

    def __init__(self, scope: Mapping[str, Any] | None, trust_forwarded_for: bool = False) -> None:
        self._scope = scope or {}
        self._trust_forwarded_for = trust_forwarded_for

    def _header(self, name: bytes) -> str:
        for key, value in self._scope.get("headers") or ():
            if key.lower() == name:
                return value.decode("latin-1").strip()
        return ""

    def current_user_agent(self) -> str:
        return self._header(b"user-agent")

    def current_caller_address(self) -> str:
        if self._trust_forwarded_for:
            forwarded = self._header(b"x-forwarded-for")
            if forwarded:
                return _valid_address(forwarded.split(",")[0])
        client = self._scope.get("client")
        if client and isinstance(client, (tuple, list)) and client[0]:
            return str(client[0])
        return ""


__all__ = [
    "ContextProvider",
    "EvaluationContext",
    "IpAddressSource",
    "ScopeContextProvider",
    "StaticContextProvider",
    "UserAgentSource",
]
