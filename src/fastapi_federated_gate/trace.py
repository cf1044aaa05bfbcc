"""GateTrace and TraceEntry: debug execution recording."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from fastapi_federated_gate.component import ComponentCategory
from fastapi_federated_gate.exceptions import GateInternalError


@dataclass(frozen=True)
class TraceEntry:
    """Single component execution record."""

    component_name: str
    category: ComponentCategory
    duration_ms: float
    outcome: Literal["CONTINUE", "DECIDED", "FAILED"]
    reason: str | None = None


@dataclass
class GateTrace:
    """Structured record of a single gate evaluation."""

    entries: list[TraceEntry] = field(default_factory=list)
    total_duration_ms: float = 0.0
    outcome: Literal["PASS", "DECIDED", "ERROR"] = "PASS"
    error: GateInternalError | None = None
