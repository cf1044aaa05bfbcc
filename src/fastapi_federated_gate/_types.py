"""Shared type aliases and collaborator protocols."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fastapi_federated_gate.signals import RequestContext

# Callback types used by gate components
TranslateCallback = Callable[[str], str]
TokenIssuerCallback = Callable[[], str]
HeaderAuthCallback = Callable[["RequestContext"], Any]


@runtime_checkable
class SessionUser(Protocol):
    """Authenticated account as seen by the gate."""

    enabled: bool


@runtime_checkable
class URLBuilder(Protocol):
    """Turns route ids and relative locations into absolute URLs."""

    def link_to_route_absolute(self, route: str, params: Mapping[str, str]) -> str: ...

    def absolute_url(self, location: str) -> str: ...
