"""
Basic usage example of fastapi-federated-gate.

Demonstrates:
- Loading the gate configuration from the environment
- Installing FederatedGateMiddleware on a FastAPI app
- Serving the federated login, provider selection and error routes
"""

import secrets

from fastapi import FastAPI, Request

from fastapi_federated_gate import (
    FederatedGateMiddleware,
    GateSettings,
    default_gate,
)

# FEDERATED_GATE_MODE=federated
# FEDERATED_GATE_PROVIDERS='{"corp": {"display_name": "Corporate SSO"}}'
settings = GateSettings()
url_builder = settings.url_builder("http://localhost:8000")


def issue_token() -> str:
    """Issue an anti-forgery token (replace with your CSRF token manager)."""
    return secrets.token_urlsafe(32)


app = FastAPI(title="Federated Gate Example")
app.add_middleware(
    FederatedGateMiddleware,
    gate=default_gate(issue_token=issue_token, url_builder=url_builder),
    config=settings.snapshot(),
    url_builder=url_builder,
)


@app.get("/login")
async def login():
    """Local login form, reachable with ?direct=1."""
    return {"page": "local login"}


@app.get("/federated/login")
async def federated_login(request: Request):
    """Start the identity provider handshake (out of scope here)."""
    return dict(request.query_params)


@app.get("/federated/select")
async def select_backend(redirectUrl: str = ""):
    """Let the user choose between the configured identity providers."""
    return {
        "providers": settings.providers,
        "redirectUrl": redirectUrl,
    }


@app.get("/federated/error")
async def generic_error(message: str = ""):
    return {"error": message}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
