"""Unit tests for context providers and EvaluationContext."""

from __future__ import annotations

import pytest

from togglekit.application.toggles import (
    ContextProvider,
    EvaluationContext,
    IpAddressSource,
    ScopeContextProvider,
    StaticContextProvider,
    UserAgentSource,
)


def _scope(headers: list[tuple[bytes, bytes]] | None = None, client: tuple[str, int] | None = None) -> dict:
    return {"type": "http", "headers": headers or [], "client": client}


# ---------------------------------------------------------------------------
# EvaluationContext
# ---------------------------------------------------------------------------


class TestEvaluationContext:
    def test_defaults_are_empty(self) -> None:
        ctx = EvaluationContext()
        assert ctx.user_agent == ""
        assert ctx.caller_address == ""

    def test_from_none_provider(self) -> None:
        assert EvaluationContext.from_provider(None) == EvaluationContext()

    def test_from_provider(self) -> None:
        provider = StaticContextProvider("Mozilla/5.0 Chrome/91.0", "10.0.0.1")
        ctx = EvaluationContext.from_provider(provider)
        assert ctx.user_agent == "Mozilla/5.0 Chrome/91.0"
        assert ctx.caller_address == "10.0.0.1"

    def test_frozen(self) -> None:
        ctx = EvaluationContext()
        with pytest.raises((AttributeError, TypeError)):
            ctx.user_agent = "x"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# StaticContextProvider
# ---------------------------------------------------------------------------


class TestStaticContextProvider:
    def test_satisfies_protocols(self) -> None:
        provider = StaticContextProvider()
        assert isinstance(provider, ContextProvider)
        assert isinstance(provider, UserAgentSource)
        assert isinstance(provider, IpAddressSource)

    def test_none_values_become_empty(self) -> None:
        provider = StaticContextProvider(None, None)  # type: ignore[arg-type]
        assert provider.current_user_agent() == ""
        assert provider.current_caller_address() == ""


# ---------------------------------------------------------------------------
# ScopeContextProvider
# ---------------------------------------------------------------------------


class TestScopeContextProvider:
    def test_reads_user_agent_header(self) -> None:
        provider = ScopeContextProvider(_scope([(b"user-agent", b"Mozilla/5.0 Firefox/89.0")]))
        assert provider.current_user_agent() == "Mozilla/5.0 Firefox/89.0"

    def test_header_lookup_is_case_insensitive(self) -> None:
        provider = ScopeContextProvider(_scope([(b"User-Agent", b"Safari")]))
        assert provider.current_user_agent() == "Safari"

    def test_missing_user_agent_is_empty(self) -> None:
        assert ScopeContextProvider(_scope()).current_user_agent() == ""

    def test_caller_address_from_client(self) -> None:
        provider = ScopeContextProvider(_scope(client=("192.168.1.7", 5123)))
        assert provider.current_caller_address() == "192.168.1.7"

    def test_missing_client_is_empty(self) -> None:
        assert ScopeContextProvider(_scope()).current_caller_address() == ""

    def test_no_scope_never_raises(self) -> None:
        provider = ScopeContextProvider(None)
        assert provider.current_user_agent() == ""
        assert provider.current_caller_address() == ""

    def test_forwarded_for_ignored_by_default(self) -> None:
        provider = ScopeContextProvider(
            _scope([(b"x-forwarded-for", b"83.44.1.1")], client=("10.0.0.1", 80))
        )
        assert provider.current_caller_address() == "10.0.0.1"

    def test_forwarded_for_first_hop_when_trusted(self) -> None:
        provider = ScopeContextProvider(
            _scope([(b"x-forwarded-for", b"83.44.1.1, 10.0.0.2")], client=("10.0.0.1", 80)),
            trust_forwarded_for=True,
        )
        assert provider.current_caller_address() == "83.44.1.1"

    def test_forwarded_for_non_address_is_empty(self) -> None:
        provider = ScopeContextProvider(
            _scope([(b"x-forwarded-for", b"admin/purge?x=1, 10.0.0.1")], client=("10.0.0.1", 80)),
            trust_forwarded_for=True,
        )
        assert provider.current_caller_address() == ""

    def test_forwarded_for_ipv6_is_normalised(self) -> None:
        provider = ScopeContextProvider(
            _scope([(b"x-forwarded-for", b"0:0:0:0:0:0:0:1")]),
            trust_forwarded_for=True,
        )
        assert provider.current_caller_address() == "::1"
