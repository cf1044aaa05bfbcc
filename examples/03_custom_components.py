"""
Custom component and hook example.

Demonstrates:
- Adding a custom stage to the default gate
- Observing decisions with an AfterGate hook
- Header-derived authentication mode
"""

import logging

from fastapi import FastAPI
from starlette.requests import Request

from fastapi_federated_gate import (
    AfterGate,
    AuthConfig,
    AuthMode,
    ComponentCategory,
    ConfigSnapshot,
    Decision,
    FederatedGateMiddleware,
    GateComponent,
    GateContext,
    RequestContext,
    RouteURLBuilder,
    Terminate,
    default_gate,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("example")


class MaintenanceWindow(GateComponent):
    """Rejects everything except the login page while maintenance is on."""

    category = ComponentCategory.CUSTOM

    def __init__(self, enabled: bool) -> None:
        self._enabled = enabled

    def resolve(self, ctx: GateContext) -> Decision | None:
        if self._enabled and ctx.request.path != "/login":
            return Terminate(status_code=503)
        return None


def trust_proxy_header(request: RequestContext) -> None:
    """Sign in the user named by the reverse proxy (replace with your backend)."""
    logger.info("Header-derived login for %s", request.path)


def log_decision(ctx: GateContext, decision: Decision) -> None:
    logger.info("%s -> %s", ctx.request.path, decision)


url_builder = RouteURLBuilder("http://localhost:8000")
gate = default_gate(
    issue_token=lambda: "example-token",
    url_builder=url_builder,
    header_auth=trust_proxy_header,
)
gate.add(MaintenanceWindow(enabled=False))
gate.add_hook(AfterGate(log_decision))


def current_user(request: Request):
    return request.scope.get("proxy_user")


app = FastAPI(title="Custom Gate Components")
app.add_middleware(
    FederatedGateMiddleware,
    gate=gate,
    config=ConfigSnapshot(auth=AuthConfig(mode=AuthMode.HEADER_DERIVED)),
    url_builder=url_builder,
    user_loader=current_user,
)


@app.get("/")
async def index():
    return {"message": "Hello, World!"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
