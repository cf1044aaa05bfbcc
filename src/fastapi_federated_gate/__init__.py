"""FastAPI Federated Gate - per-request federated login routing for Starlette apps."""

from fastapi_federated_gate._types import SessionUser, URLBuilder
from fastapi_federated_gate.component import ComponentCategory, GateComponent
from fastapi_federated_gate.components.desktop import (
    MIN_DESKTOP_CLIENT_VERSION,
    DesktopClientCompatibility,
)
from fastapi_federated_gate.components.enablement import UserEnablementGate
from fastapi_federated_gate.components.login import LoginRedirectDecider
from fastapi_federated_gate.components.mode import AuthenticationModeSelector
from fastapi_federated_gate.components.redirect import LoginRedirectBuilder
from fastapi_federated_gate.components.selection import ProviderSelectionRouter
from fastapi_federated_gate.context import GateContext
from fastapi_federated_gate.decisions import (
    Decision,
    PassThrough,
    RedirectTo,
    Terminate,
)
from fastapi_federated_gate.engine import Evaluation, evaluate
from fastapi_federated_gate.exceptions import (
    GateConfigurationError,
    GateException,
    GateInternalError,
)
from fastapi_federated_gate.gate import Gate, ResolvedGate, default_gate
from fastapi_federated_gate.hooks import AfterComponent, AfterGate, BeforeGate, GateHook
from fastapi_federated_gate.middleware import FederatedGateMiddleware
from fastapi_federated_gate.settings import (
    AuthConfig,
    AuthMode,
    ConfigSnapshot,
    GateSettings,
    ProviderRegistry,
)
from fastapi_federated_gate.signals import RequestContext, extract_signals
from fastapi_federated_gate.trace import GateTrace, TraceEntry
from fastapi_federated_gate.urls import RouteURLBuilder

__all__ = [
    "MIN_DESKTOP_CLIENT_VERSION",
    "AfterComponent",
    "AfterGate",
    "AuthConfig",
    "AuthMode",
    "AuthenticationModeSelector",
    "BeforeGate",
    "ComponentCategory",
    "ConfigSnapshot",
    "Decision",
    "DesktopClientCompatibility",
    "Evaluation",
    "FederatedGateMiddleware",
    "Gate",
    "GateComponent",
    "GateConfigurationError",
    "GateContext",
    "GateException",
    "GateHook",
    "GateInternalError",
    "GateSettings",
    "GateTrace",
    "LoginRedirectBuilder",
    "LoginRedirectDecider",
    "PassThrough",
    "ProviderRegistry",
    "ProviderSelectionRouter",
    "RedirectTo",
    "RequestContext",
    "ResolvedGate",
    "RouteURLBuilder",
    "SessionUser",
    "Terminate",
    "TraceEntry",
    "URLBuilder",
    "UserEnablementGate",
    "default_gate",
    "evaluate",
    "extract_signals",
]
