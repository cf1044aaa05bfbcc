"""FederatedGateMiddleware: applies gate decisions to Starlette requests."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from fastapi_federated_gate._types import SessionUser, URLBuilder
from fastapi_federated_gate.decisions import RedirectTo, Terminate
from fastapi_federated_gate.engine import evaluate
from fastapi_federated_gate.gate import Gate
from fastapi_federated_gate.settings import ConfigSnapshot
from fastapi_federated_gate.signals import extract_signals, read_form_params

logger = logging.getLogger(__name__)

UserLoader = Callable[[Request], SessionUser | None]


def scope_user(request: Request) -> Any | None:
    """Return the authenticated user set by Starlette's AuthenticationMiddleware."""
    user = request.scope.get("user")
    if user is None or not getattr(user, "is_authenticated", False):
        return None
    return user


class FederatedGateMiddleware(BaseHTTPMiddleware):
    """Runs the gate on every request before it reaches the application.

    ``config`` may be a snapshot taken at boot or a callable returning the
    current snapshot; it is read once per request.

    Form bodies of POST and PATCH requests are merged over the query string.

    ``url_builder`` should share the snapshot's web root; see
    :meth:`GateSettings.url_builder`.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        gate: Gate,
        config: ConfigSnapshot | Callable[[], ConfigSnapshot],
        url_builder: URLBuilder,
        user_loader: UserLoader = scope_user,
    ) -> None:
        super().__init__(app)
        self._resolved = gate.resolve()
        self._config = config
        self._url_builder = url_builder
        self._user_loader = user_loader

    def _snapshot(self) -> ConfigSnapshot:
        if isinstance(self._config, ConfigSnapshot):
            return self._config
        return self._config()

    async def _gate_response(self, request: Request) -> Response | None:
        config = self._snapshot()
        signals = extract_signals(
            request,
            webroot=config.webroot,
            form_params=await read_form_params(request),
        )
        result = evaluate(
            self._resolved,
            signals,
            config=config,
            user=self._user_loader(request),
        )
        decision = result.decision

        if isinstance(decision, RedirectTo):
            target = self._url_builder.link_to_route_absolute(
                decision.route, decision.params
            )
            return RedirectResponse(target, status_code=302)
        if isinstance(decision, Terminate):
            return Response(status_code=decision.status_code)
        return None

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            response = await self._gate_response(request)
        except Exception:
            logger.critical("Error when applying federated login gate", exc_info=True)
            response = None

        if response is None:
            return await call_next(request)
        return response
