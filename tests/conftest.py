"""Shared pytest fixtures for fastapi-federated-gate tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from unittest.mock import MagicMock

import pytest
from starlette.requests import Request

from fastapi_federated_gate.context import GateContext
from fastapi_federated_gate.settings import (
    AuthConfig,
    AuthMode,
    ConfigSnapshot,
    ProviderRegistry,
)
from fastapi_federated_gate.signals import RequestContext
from fastapi_federated_gate.urls import RouteURLBuilder


@dataclass
class FakeUser:
    uid: str = "alice"
    enabled: bool = True
    is_authenticated: bool = True


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
            "server": ("cloud.example.com", 443),
            "scheme": "https",
        }
        return Request(scope)

    return _make


@pytest.fixture
def make_signals() -> Any:
    """Factory for RequestContext values with sensible defaults."""

    def _make(
        path: str = "/",
        *,
        params: dict[str, Any] | None = None,
        full_uri: str | None = None,
        user_agent: str | None = None,
        is_cli: bool = False,
    ) -> RequestContext:
        return RequestContext(
            path=path,
            full_uri=full_uri if full_uri is not None else path,
            query_params={} if params is None else params,
            user_agent=user_agent,
            is_cli=is_cli,
        )

    return _make


@pytest.fixture
def make_config() -> Any:
    """Factory for ConfigSnapshot values; federated mode with one provider."""

    def _make(
        mode: AuthMode = AuthMode.FEDERATED,
        *,
        providers: dict[str, Any] | None = None,
        allow_multiple_backends: bool = False,
        desktop_clients_allowed: bool = False,
        webroot: str = "",
    ) -> ConfigSnapshot:
        if providers is None:
            providers = {"corp": {"display_name": "Corporate SSO"}}
        return ConfigSnapshot(
            auth=AuthConfig(mode=mode, desktop_clients_allowed=desktop_clients_allowed),
            registry=ProviderRegistry(
                providers=providers,
                allow_multiple_backends=allow_multiple_backends,
            ),
            webroot=webroot,
        )

    return _make


@pytest.fixture
def make_ctx(make_signals: Any, make_config: Any) -> Any:
    """Factory for GateContext values built from make_signals/make_config."""

    def _make(
        path: str = "/",
        *,
        user: Any | None = None,
        config: ConfigSnapshot | None = None,
        **signal_kwargs: Any,
    ) -> GateContext:
        return GateContext(
            request=make_signals(path, **signal_kwargs),
            config=config if config is not None else make_config(),
            user=user,
        )

    return _make


@pytest.fixture
def url_builder() -> RouteURLBuilder:
    return RouteURLBuilder("https://cloud.example.com")


@pytest.fixture
def issue_token() -> MagicMock:
    """Mock anti-forgery token issuer returning a fixed encrypted value."""
    return MagicMock(return_value="encrypted-token")


@pytest.fixture
def enabled_user() -> FakeUser:
    return FakeUser()


@pytest.fixture
def disabled_user() -> FakeUser:
    return FakeUser(uid="bob", enabled=False)
