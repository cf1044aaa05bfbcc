"""RouteURLBuilder: absolute URLs for route ids and redirect targets."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urlsplit

from starlette.datastructures import URL

from fastapi_federated_gate.exceptions import GateConfigurationError
from fastapi_federated_gate.routes import DEFAULT_ROUTES


class RouteURLBuilder:
    """Builds absolute URLs from a base URL, a web root and a routing table."""

    def __init__(
        self,
        base_url: str,
        routes: Mapping[str, str] | None = None,
        *,
        webroot: str = "",
    ) -> None:
        self._base = URL(base_url)
        self._routes = dict(DEFAULT_ROUTES if routes is None else routes)
        self._webroot = webroot.rstrip("/")

    def _anchor(self, path: str, query: str = "") -> URL:
        if not path.startswith("/"):
            path = "/" + path
        if self._webroot and not (
            path == self._webroot or path.startswith(self._webroot + "/")
        ):
            path = self._webroot + path
        return self._base.replace(path=path, query=query, fragment="")

    def link_to_route_absolute(self, route: str, params: Mapping[str, str]) -> str:
        try:
            template = self._routes[route]
        except KeyError:
            raise GateConfigurationError(f"Unknown route: {route}") from None
        return str(self._anchor(template).include_query_params(**params))

    def absolute_url(self, location: str) -> str:
        # Scheme and host of the location are discarded; only same-host targets.
        parts = urlsplit(location)
        return str(self._anchor(parts.path or "/", parts.query))
