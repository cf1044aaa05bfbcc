"""Request signal extraction: RequestContext and extract_signals()."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from starlette.requests import Request

# Methods whose parameters are parsed; PUT bodies are never read
PARSEABLE_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "DELETE", "POST", "PATCH"})
FORM_METHODS = frozenset({"POST", "PATCH"})
FORM_CONTENT_TYPES = frozenset(
    {"application/x-www-form-urlencoded", "multipart/form-data"}
)

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class RequestContext:
    """Decision-relevant facts about one inbound request.

    ``path`` is relative to the web root; ``full_uri`` is the raw request URI
    (web root and query string included). ``query_params`` is ``None`` when the
    request method does not support parameter parsing.
    """

    path: str
    full_uri: str
    query_params: Mapping[str, Any] | None = None
    user_agent: str | None = None
    is_cli: bool = False

    def params(self) -> Mapping[str, Any]:
        if self.query_params is None:
            return _EMPTY
        return self.query_params


def strip_webroot(path: str, webroot: str) -> str:
    webroot = webroot.rstrip("/")
    if webroot and (path == webroot or path.startswith(webroot + "/")):
        return path[len(webroot) :] or "/"
    return path


async def read_form_params(request: Request) -> Mapping[str, Any] | None:
    """Return the parsed form body of a POST or PATCH request, if it has one."""
    if request.method.upper() not in FORM_METHODS:
        return None
    content_type = request.headers.get("content-type", "").split(";", 1)[0]
    if content_type.strip().lower() not in FORM_CONTENT_TYPES:
        return None
    # Buffer the raw body first so the endpoint can still read it downstream.
    await request.body()
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def extract_signals(
    request: Request,
    *,
    webroot: str = "",
    is_cli: bool = False,
    form_params: Mapping[str, Any] | None = None,
) -> RequestContext:
    """Build a RequestContext from a Starlette request.

    ``form_params`` (see :func:`read_form_params`) take precedence over query
    string values with the same name.
    """
    raw_path = request.url.path
    query = request.url.query
    full_uri = f"{raw_path}?{query}" if query else raw_path

    query_params: Mapping[str, Any] | None = None
    if request.method.upper() in PARSEABLE_METHODS:
        merged = dict(request.query_params)
        merged.update(form_params or {})
        query_params = MappingProxyType(merged)

    return RequestContext(
        path=strip_webroot(raw_path, webroot),
        full_uri=full_uri,
        query_params=query_params,
        user_agent=request.headers.get("user-agent"),
        is_cli=is_cli,
    )
