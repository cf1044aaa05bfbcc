"""Login redirect decider: intercepts browser visits to the login route."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastapi_federated_gate.component import ComponentCategory, GateComponent
from fastapi_federated_gate.context import GateContext
from fastapi_federated_gate.decisions import Decision, PassThrough
from fastapi_federated_gate.routes import LOGIN_PATH


def is_direct_login(params: Mapping[str, Any]) -> bool:
    """True when ``direct=1`` asks for the local login form."""
    value = params.get("direct")
    # bool is an int subclass; only a literal 1 counts
    return value == "1" or (type(value) is int and value == 1)


class LoginRedirectDecider(GateComponent):
    """Marks unauthenticated, non-CLI requests to the login path as redirects.

    ``direct=1`` bypasses federated login entirely; embedded login flows rely on
    it to avoid redirect loops.
    """

    category = ComponentCategory.LOGIN

    def __init__(self, *, login_path: str = LOGIN_PATH) -> None:
        self._login_path = login_path

    def resolve(self, ctx: GateContext) -> Decision | None:
        if ctx.request.is_cli or ctx.is_logged_in:
            return None
        if ctx.request.path != self._login_path:
            return None

        if is_direct_login(ctx.params()):
            return PassThrough()

        ctx.redirect_situation = True
        return None
