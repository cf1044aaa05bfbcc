"""GateHook base and convenience hook classes."""

from __future__ import annotations

from collections.abc import Callable

from fastapi_federated_gate.component import GateComponent
from fastapi_federated_gate.context import GateContext
from fastapi_federated_gate.decisions import Decision


class GateHook:
    """Base abstraction for lifecycle hooks. All methods are no-op by default.

    Hooks run inside the engine's fail-open boundary, so a hook that raises
    abandons the evaluation like any other stage failure. ``on_gate_end`` only
    fires for evaluations that complete.
    """

    def on_gate_start(self, ctx: GateContext) -> None:
        pass

    def on_gate_end(self, ctx: GateContext, decision: Decision) -> None:
        pass

    def on_component(
        self,
        ctx: GateContext,
        component: GateComponent,
        decision: Decision | None,
    ) -> None:
        pass


class BeforeGate(GateHook):
    """Convenience hook that only fires on evaluation start."""

    def __init__(self, callback: Callable[[GateContext], None]) -> None:
        self._callback = callback

    def on_gate_start(self, ctx: GateContext) -> None:
        self._callback(ctx)


class AfterGate(GateHook):
    """Convenience hook that only fires once a decision is reached."""

    def __init__(self, callback: Callable[[GateContext, Decision], None]) -> None:
        self._callback = callback

    def on_gate_end(self, ctx: GateContext, decision: Decision) -> None:
        self._callback(ctx, decision)


class AfterComponent(GateHook):
    """Convenience hook that fires after each component."""

    def __init__(
        self,
        callback: Callable[[GateContext, GateComponent, Decision | None], None],
    ) -> None:
        self._callback = callback

    def on_component(
        self,
        ctx: GateContext,
        component: GateComponent,
        decision: Decision | None,
    ) -> None:
        self._callback(ctx, component, decision)
