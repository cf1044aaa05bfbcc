"""Authentication mode selection: the first stage of every evaluation."""

from __future__ import annotations

import logging

from fastapi_federated_gate._types import HeaderAuthCallback
from fastapi_federated_gate.component import ComponentCategory, GateComponent
from fastapi_federated_gate.context import GateContext
from fastapi_federated_gate.decisions import Decision, PassThrough
from fastapi_federated_gate.exceptions import GateConfigurationError
from fastapi_federated_gate.settings import AuthMode

logger = logging.getLogger(__name__)

# OAuth clients may send their credentials as basic auth, which header-derived
# authentication would reject.
TOKEN_ENDPOINT_SUFFIX = "/apps/oauth/api/v1/token"


class AuthenticationModeSelector(GateComponent):
    """Disables the gate, or runs header-derived authentication, per AuthMode."""

    category = ComponentCategory.MODE

    def __init__(
        self,
        header_auth: HeaderAuthCallback | None = None,
        *,
        token_endpoint_suffix: str = TOKEN_ENDPOINT_SUFFIX,
    ) -> None:
        self._header_auth = header_auth
        self._token_endpoint_suffix = token_endpoint_suffix

    def resolve(self, ctx: GateContext) -> Decision | None:
        mode = ctx.config.auth.mode
        if mode is AuthMode.NONE:
            return PassThrough()

        if mode is AuthMode.HEADER_DERIVED:
            if ctx.request.full_uri.endswith(self._token_endpoint_suffix):
                return PassThrough()
            if self._header_auth is None:
                raise GateConfigurationError(
                    "Header-derived mode requires a header_auth callback"
                )
            logger.debug("Triggering header-derived authentication")
            self._header_auth(ctx.request)

        return None
