"""
Desktop client example.

Demonstrates:
- Opting desktop sync clients into federated login
- Evaluating the gate directly, without a web server
- Inspecting the debug trace of an evaluation
"""

from fastapi_federated_gate import (
    AuthConfig,
    AuthMode,
    ConfigSnapshot,
    ProviderRegistry,
    RequestContext,
    RouteURLBuilder,
    default_gate,
    evaluate,
)

config = ConfigSnapshot(
    auth=AuthConfig(mode=AuthMode.FEDERATED, desktop_clients_allowed=True),
    registry=ProviderRegistry({"corp": {"display_name": "Corporate SSO"}}),
)

gate = default_gate(
    issue_token=lambda: "example-token",
    url_builder=RouteURLBuilder("https://cloud.example.com"),
    debug=True,
)


def show(user_agent: str) -> None:
    request = RequestContext(
        path="/remote.php/webdav/",
        full_uri="/remote.php/webdav/",
        query_params={},
        user_agent=user_agent,
    )
    result = evaluate(gate, request, config=config)
    print(f"{user_agent!r}: {result.decision}")
    if result.trace is not None:
        for entry in result.trace.entries:
            print(f"    {entry.component_name:<30} {entry.outcome}")


if __name__ == "__main__":
    # Too old to negotiate federated login itself: redirected
    show("Mozilla/5.0 (Windows) mirall/2.4.1")
    # New enough: let through
    show("Mozilla/5.0 (Windows) mirall/2.6.0")
