"""Gate decisions: PassThrough, RedirectTo, Terminate."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PassThrough:
    """Let the host continue normal request dispatch."""


@dataclass(frozen=True)
class RedirectTo:
    """Redirect to a named route and stop processing the request."""

    route: str
    params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Terminate:
    """Stop processing the request without a redirect."""

    status_code: int = 403


Decision = PassThrough | RedirectTo | Terminate
