"""Redirect target builder: the terminal stage for pending login redirects."""

from __future__ import annotations

from fastapi_federated_gate._types import TokenIssuerCallback, URLBuilder
from fastapi_federated_gate.component import ComponentCategory, GateComponent
from fastapi_federated_gate.context import GateContext
from fastapi_federated_gate.decisions import Decision, RedirectTo
from fastapi_federated_gate.routes import LOGIN_ROUTE


class LoginRedirectBuilder(GateComponent):
    """Builds the federated login redirect for the default provider."""

    category = ComponentCategory.REDIRECT

    def __init__(
        self,
        issue_token: TokenIssuerCallback,
        url_builder: URLBuilder,
        *,
        route: str = LOGIN_ROUTE,
    ) -> None:
        self._issue_token = issue_token
        self._url_builder = url_builder
        self._route = route

    def resolve(self, ctx: GateContext) -> Decision | None:
        if not ctx.redirect_situation:
            return None

        redirect_url = ctx.params().get("redirect_url")
        original_url = ""
        if redirect_url is not None:
            original_url = self._url_builder.absolute_url(str(redirect_url))

        return RedirectTo(
            self._route,
            {
                "requesttoken": self._issue_token(),
                "originalUrl": original_url,
                "idp": ctx.config.registry.default_provider,
            },
        )
