"""User enablement gate: blocks disabled accounts everywhere but the error page."""

from __future__ import annotations

import logging

from fastapi_federated_gate._types import TranslateCallback
from fastapi_federated_gate.component import ComponentCategory, GateComponent
from fastapi_federated_gate.context import GateContext
from fastapi_federated_gate.decisions import Decision, RedirectTo
from fastapi_federated_gate.routes import ERROR_PATH, GENERIC_ERROR_ROUTE

logger = logging.getLogger(__name__)

DISABLED_ACCOUNT_MESSAGE = (
    "This user account is disabled, please contact your administrator."
)


def _is_enabled(user: object) -> bool:
    """Read the enabled flag from a dict key or attribute."""
    if isinstance(user, dict):
        return bool(user.get("enabled", True))
    return bool(getattr(user, "enabled", True))


class UserEnablementGate(GateComponent):
    category = ComponentCategory.ENABLEMENT

    def __init__(
        self,
        translate: TranslateCallback | None = None,
        *,
        error_path: str = ERROR_PATH,
        error_route: str = GENERIC_ERROR_ROUTE,
        message: str = DISABLED_ACCOUNT_MESSAGE,
    ) -> None:
        self._translate = translate
        self._error_path = error_path
        self._error_route = error_route
        self._message = message

    def resolve(self, ctx: GateContext) -> Decision | None:
        if ctx.user is None or _is_enabled(ctx.user):
            return None

        # The error page itself must stay reachable, or the redirect loops.
        if ctx.request.path == self._error_path:
            return None

        logger.info("Blocked request from disabled account to %s", ctx.request.path)
        message = self._message
        if self._translate is not None:
            message = self._translate(message)
        return RedirectTo(self._error_route, {"message": message})
