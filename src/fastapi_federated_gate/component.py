"""GateComponent abstract base class and ComponentCategory enum."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from fastapi_federated_gate.context import GateContext
from fastapi_federated_gate.decisions import Decision


class ComponentCategory(Enum):
    """Gate stage categories, defining strict execution order."""

    MODE = "mode"
    ENABLEMENT = "enablement"
    LOGIN = "login"
    DESKTOP_CLIENT = "desktop_client"
    PROVIDER_SELECTION = "provider_selection"
    REDIRECT = "redirect"
    CUSTOM = "custom"

    @property
    def order(self) -> int:
        _ORDER = {
            "mode": 1,
            "enablement": 2,
            "login": 3,
            "desktop_client": 4,
            "provider_selection": 5,
            "redirect": 6,
            "custom": 7,
        }
        return _ORDER[self.value]


class GateComponent(ABC):
    """Base abstraction for all stages of the gate.

    ``resolve`` returns a decision to end the evaluation, or ``None`` to hand
    the request to the next stage.
    """

    category: ClassVar[ComponentCategory]

    @abstractmethod
    def resolve(self, ctx: GateContext) -> Decision | None: ...
