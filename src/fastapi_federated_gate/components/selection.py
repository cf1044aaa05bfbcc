"""Identity-provider selection router."""

from __future__ import annotations

from fastapi_federated_gate.component import ComponentCategory, GateComponent
from fastapi_federated_gate.context import GateContext
from fastapi_federated_gate.decisions import Decision, RedirectTo
from fastapi_federated_gate.routes import SELECT_BACKEND_ROUTE


class ProviderSelectionRouter(GateComponent):
    """Sends pending redirects to provider selection when the choice is ambiguous."""

    category = ComponentCategory.PROVIDER_SELECTION

    def __init__(self, *, route: str = SELECT_BACKEND_ROUTE) -> None:
        self._route = route

    def resolve(self, ctx: GateContext) -> Decision | None:
        if not ctx.redirect_situation:
            return None
        if not ctx.config.registry.show_login_options:
            return None

        redirect_url = ctx.params().get("redirect_url", "")
        return RedirectTo(self._route, {"redirectUrl": str(redirect_url)})
