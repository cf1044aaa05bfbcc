"""Route ids and fixed paths the gate knows about."""

from __future__ import annotations

LOGIN_ROUTE = "federated_gate.login"
SELECT_BACKEND_ROUTE = "federated_gate.select_backend"
GENERIC_ERROR_ROUTE = "federated_gate.generic_error"

LOGIN_PATH = "/login"
ERROR_PATH = "/federated/error"

# Path templates used by RouteURLBuilder when no explicit routing table is given
DEFAULT_ROUTES = {
    LOGIN_ROUTE: "/federated/login",
    SELECT_BACKEND_ROUTE: "/federated/select",
    GENERIC_ERROR_ROUTE: ERROR_PATH,
}
