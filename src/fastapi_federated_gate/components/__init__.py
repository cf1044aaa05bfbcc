"""Built-in gate components."""

from fastapi_federated_gate.components.desktop import (
    DesktopClientCompatibility,
    is_desktop_client,
    parse_client_version,
)
from fastapi_federated_gate.components.enablement import UserEnablementGate
from fastapi_federated_gate.components.login import (
    LoginRedirectDecider,
    is_direct_login,
)
from fastapi_federated_gate.components.mode import AuthenticationModeSelector
from fastapi_federated_gate.components.redirect import LoginRedirectBuilder
from fastapi_federated_gate.components.selection import ProviderSelectionRouter

__all__ = [
    "AuthenticationModeSelector",
    "DesktopClientCompatibility",
    "LoginRedirectBuilder",
    "LoginRedirectDecider",
    "ProviderSelectionRouter",
    "UserEnablementGate",
    "is_desktop_client",
    "is_direct_login",
    "parse_client_version",
]
