"""GateContext: per-request evaluation state."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from fastapi_federated_gate.settings import ConfigSnapshot
from fastapi_federated_gate.signals import RequestContext


@dataclass
class GateContext:
    """Lightweight per-request state container mutated by gate components."""

    request: RequestContext
    config: ConfigSnapshot = field(default_factory=ConfigSnapshot)
    user: Any | None = None
    redirect_situation: bool = False
    state: dict[str, Any] = field(default_factory=dict)

    @property
    def is_logged_in(self) -> bool:
        return self.user is not None

    def params(self) -> Mapping[str, Any]:
        return self.request.params()
