"""GateException hierarchy."""

from __future__ import annotations


class GateException(Exception):
    """Base for all gate exceptions."""


class GateConfigurationError(GateException):
    """A collaborator or route required by a component is missing."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class GateInternalError(GateException):
    """Engine-level error wrapping unexpected exceptions."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause
