"""Tests for the GateException hierarchy."""

from __future__ import annotations

from fastapi_federated_gate.exceptions import (
    GateConfigurationError,
    GateException,
    GateInternalError,
)


class TestGateExceptions:
    def test_hierarchy(self) -> None:
        assert issubclass(GateConfigurationError, GateException)
        assert issubclass(GateInternalError, GateException)
        assert issubclass(GateException, Exception)

    def test_configuration_error_detail(self) -> None:
        exc = GateConfigurationError("Unknown route: x")
        assert exc.detail == "Unknown route: x"
        assert str(exc) == "Unknown route: x"

    def test_internal_error_wraps_cause(self) -> None:
        cause = RuntimeError("boom")
        exc = GateInternalError("Internal gate error", cause=cause)
        assert exc.detail == "Internal gate error"
        assert exc.cause is cause

    def test_internal_error_cause_defaults_to_none(self) -> None:
        assert GateInternalError("x").cause is None
