"""evaluate(): runs a gate against one request and never raises."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

from fastapi_federated_gate.context import GateContext
from fastapi_federated_gate.decisions import Decision, PassThrough
from fastapi_federated_gate.exceptions import GateInternalError
from fastapi_federated_gate.gate import Gate, ResolvedGate
from fastapi_federated_gate.settings import ConfigSnapshot
from fastapi_federated_gate.signals import RequestContext
from fastapi_federated_gate.trace import GateTrace, TraceEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Evaluation:
    """Outcome of one evaluation.

    ``error`` is set when the gate failed and let the request through.
    """

    decision: Decision
    error: GateInternalError | None = None
    trace: GateTrace | None = None


def evaluate(
    gate: Gate | ResolvedGate,
    request: RequestContext,
    *,
    config: ConfigSnapshot,
    user: Any | None = None,
) -> Evaluation:
    """Evaluate ``request`` and return exactly one decision.

    Any exception raised by a component or hook abandons the evaluation: it is
    logged once at CRITICAL and the request is let through as if the gate were
    disabled.
    """
    resolved = gate.resolve() if isinstance(gate, Gate) else gate
    ctx = GateContext(request=request, config=config, user=user)
    trace = GateTrace() if resolved.debug else None
    flow_start = time.perf_counter()

    try:
        decision = _run(resolved, ctx, trace)
    except Exception as exc:
        logger.critical("Error when evaluating federated login gate", exc_info=exc)
        error = GateInternalError("Internal gate error", cause=exc)
        if trace is not None:
            trace.total_duration_ms = (time.perf_counter() - flow_start) * 1000
            trace.outcome = "ERROR"
            trace.error = error
        return Evaluation(decision=PassThrough(), error=error, trace=trace)

    if trace is not None:
        trace.total_duration_ms = (time.perf_counter() - flow_start) * 1000
    return Evaluation(decision=decision, trace=trace)


def _run(
    resolved: ResolvedGate, ctx: GateContext, trace: GateTrace | None
) -> Decision:
    for hook in resolved.hooks:
        hook.on_gate_start(ctx)

    decision: Decision | None = None
    for component in resolved.components:
        comp_start = time.perf_counter()
        try:
            decision = component.resolve(ctx)
        except Exception as exc:
            if trace is not None:
                trace.entries.append(
                    TraceEntry(
                        component_name=type(component).__name__,
                        category=component.category,
                        duration_ms=(time.perf_counter() - comp_start) * 1000,
                        outcome="FAILED",
                        reason=str(exc),
                    )
                )
            raise

        if trace is not None:
            trace.entries.append(
                TraceEntry(
                    component_name=type(component).__name__,
                    category=component.category,
                    duration_ms=(time.perf_counter() - comp_start) * 1000,
                    outcome="CONTINUE" if decision is None else "DECIDED",
                )
            )
        for hook in resolved.hooks:
            hook.on_component(ctx, component, decision)

        if decision is not None:
            logger.debug("%s decided %r", type(component).__name__, decision)
            if trace is not None:
                trace.outcome = "DECIDED"
            break

    if decision is None:
        decision = PassThrough()

    for hook in resolved.hooks:
        hook.on_gate_end(ctx, decision)

    return decision
