"""Configuration snapshot: AuthMode, AuthConfig, ProviderRegistry, GateSettings."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fastapi_federated_gate.urls import RouteURLBuilder


class AuthMode(Enum):
    """Pre-authentication strategy for the whole process."""

    NONE = "none"
    FEDERATED = "federated"
    HEADER_DERIVED = "header-derived"


# Legacy spellings still found in stored configuration
_MODE_ALIASES = {
    "saml": AuthMode.FEDERATED,
    "environment-variable": AuthMode.HEADER_DERIVED,
}


@dataclass(frozen=True)
class AuthConfig:
    mode: AuthMode = AuthMode.NONE
    desktop_clients_allowed: bool = False


@dataclass(frozen=True)
class ProviderRegistry:
    """Configured identity providers in stable, insertion order.

    The first provider is the default one used for direct login redirects.
    """

    providers: Mapping[str, Mapping[str, Any]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    allow_multiple_backends: bool = False

    def __post_init__(self) -> None:
        # Freeze a private copy so later mutation of the source dict is invisible.
        object.__setattr__(
            self, "providers", MappingProxyType(dict(self.providers))
        )

    def __len__(self) -> int:
        return len(self.providers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.providers)

    @property
    def default_provider(self) -> str:
        return next(iter(self.providers), "")

    @property
    def show_login_options(self) -> bool:
        return self.allow_multiple_backends or len(self.providers) > 1


@dataclass(frozen=True)
class ConfigSnapshot:
    """Read-only configuration view used for one request evaluation."""

    auth: AuthConfig = field(default_factory=AuthConfig)
    registry: ProviderRegistry = field(default_factory=ProviderRegistry)
    webroot: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "webroot", self.webroot.rstrip("/"))


class GateSettings(BaseSettings):
    """Environment-backed gate configuration (prefix ``FEDERATED_GATE_``)."""

    mode: AuthMode = AuthMode.NONE
    desktop_clients_allowed: bool = False
    allow_multiple_backends: bool = False
    providers: dict[str, dict[str, Any]] = {}
    webroot: str = ""

    model_config = SettingsConfigDict(
        env_prefix="FEDERATED_GATE_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("mode", mode="before")
    @classmethod
    def _unknown_mode_disables(cls, value: Any) -> Any:
        if isinstance(value, AuthMode):
            return value
        normalized = str(value or "").strip().lower()
        if normalized in _MODE_ALIASES:
            return _MODE_ALIASES[normalized]
        try:
            return AuthMode(normalized)
        except ValueError:
            return AuthMode.NONE

    @field_validator("webroot")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def snapshot(self) -> ConfigSnapshot:
        return ConfigSnapshot(
            auth=AuthConfig(
                mode=self.mode,
                desktop_clients_allowed=self.desktop_clients_allowed,
            ),
            registry=ProviderRegistry(
                providers=self.providers,
                allow_multiple_backends=self.allow_multiple_backends,
            ),
            webroot=self.webroot,
        )

    def url_builder(
        self, base_url: str, routes: Mapping[str, str] | None = None
    ) -> RouteURLBuilder:
        """Return a RouteURLBuilder anchored at the same web root as snapshot()."""
        return RouteURLBuilder(base_url, routes, webroot=self.webroot)
