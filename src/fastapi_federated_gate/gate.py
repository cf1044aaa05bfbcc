"""Gate class: ordered container of GateComponents, plus the default pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fastapi_federated_gate._types import (
    HeaderAuthCallback,
    TokenIssuerCallback,
    TranslateCallback,
    URLBuilder,
)
from fastapi_federated_gate.component import GateComponent
from fastapi_federated_gate.components import (
    AuthenticationModeSelector,
    DesktopClientCompatibility,
    LoginRedirectBuilder,
    LoginRedirectDecider,
    ProviderSelectionRouter,
    UserEnablementGate,
)

if TYPE_CHECKING:
    from fastapi_federated_gate.hooks import GateHook


@dataclass(frozen=True)
class ResolvedGate:
    """Immutable, pre-computed execution plan."""

    components: tuple[GateComponent, ...]
    hooks: tuple[GateHook, ...] = ()
    debug: bool = False


class Gate:
    """Ordered container of GateComponent instances."""

    def __init__(self, *components: GateComponent | Gate, debug: bool = False) -> None:
        self._items: list[GateComponent | Gate] = list(components)
        self._hooks: list[GateHook] = []
        self._debug = debug
        self._resolved: ResolvedGate | None = None

    def add(self, *components: GateComponent | Gate) -> Gate:
        self._items.extend(components)
        self._resolved = None
        return self

    def add_hook(self, hook: GateHook) -> Gate:
        self._hooks.append(hook)
        self._resolved = None
        return self

    def resolve(self) -> ResolvedGate:
        if self._resolved is not None:
            return self._resolved

        flat: list[GateComponent] = []
        self._flatten(self._items, flat)

        # sorted() is stable: registration order is kept within a category
        sorted_components = sorted(flat, key=lambda c: c.category.order)

        self._resolved = ResolvedGate(
            components=tuple(sorted_components),
            hooks=tuple(self._hooks),
            debug=self._debug,
        )
        return self._resolved

    @staticmethod
    def _flatten(items: list[GateComponent | Gate], out: list[GateComponent]) -> None:
        for item in items:
            if isinstance(item, Gate):
                Gate._flatten(item._items, out)
            else:
                out.append(item)


def default_gate(
    *,
    issue_token: TokenIssuerCallback,
    url_builder: URLBuilder,
    translate: TranslateCallback | None = None,
    header_auth: HeaderAuthCallback | None = None,
    debug: bool = False,
) -> Gate:
    """Assemble the standard federated login pipeline."""
    return Gate(
        AuthenticationModeSelector(header_auth),
        UserEnablementGate(translate),
        LoginRedirectDecider(),
        DesktopClientCompatibility(),
        ProviderSelectionRouter(),
        LoginRedirectBuilder(issue_token, url_builder),
        debug=debug,
    )
