"""Tests for LoginRedirectDecider."""

from __future__ import annotations

from typing import Any

import pytest

from fastapi_federated_gate.component import ComponentCategory
from fastapi_federated_gate.components.login import (
    LoginRedirectDecider,
    is_direct_login,
)
from fastapi_federated_gate.context import GateContext
from fastapi_federated_gate.decisions import PassThrough
from fastapi_federated_gate.signals import RequestContext


class TestIsDirectLogin:
    @pytest.mark.parametrize("value", [1, "1"])
    def test_direct_values(self, value: Any) -> None:
        assert is_direct_login({"direct": value}) is True

    @pytest.mark.parametrize("value", [None, 0, "0", "true", True, "01", 1.5])
    def test_non_direct_values(self, value: Any) -> None:
        assert is_direct_login({"direct": value}) is False

    def test_missing_parameter(self) -> None:
        assert is_direct_login({}) is False


class TestLoginRedirectDecider:
    def test_category_is_login(self) -> None:
        assert LoginRedirectDecider.category == ComponentCategory.LOGIN

    def test_anonymous_login_marks_redirect(self, make_ctx: Any) -> None:
        ctx = make_ctx("/login")
        assert LoginRedirectDecider().resolve(ctx) is None
        assert ctx.redirect_situation is True

    def test_direct_login_passes_through(self, make_ctx: Any) -> None:
        ctx = make_ctx("/login", params={"direct": "1"})
        assert LoginRedirectDecider().resolve(ctx) == PassThrough()
        assert ctx.redirect_situation is False

    def test_unparseable_params_treated_as_empty(self) -> None:
        request = RequestContext(path="/login", full_uri="/login", query_params=None)
        ctx = GateContext(request=request)
        assert LoginRedirectDecider().resolve(ctx) is None
        assert ctx.redirect_situation is True

    def test_logged_in_user_ignored(self, make_ctx: Any, enabled_user: Any) -> None:
        ctx = make_ctx("/login", user=enabled_user)
        LoginRedirectDecider().resolve(ctx)
        assert ctx.redirect_situation is False

    def test_cli_invocation_ignored(self, make_ctx: Any) -> None:
        ctx = make_ctx("/login", is_cli=True)
        LoginRedirectDecider().resolve(ctx)
        assert ctx.redirect_situation is False

    @pytest.mark.parametrize("path", ["/", "/login/", "/logins", "/apps/login"])
    def test_other_paths_ignored(self, make_ctx: Any, path: str) -> None:
        ctx = make_ctx(path)
        LoginRedirectDecider().resolve(ctx)
        assert ctx.redirect_situation is False

    def test_custom_login_path(self, make_ctx: Any) -> None:
        ctx = make_ctx("/signin")
        LoginRedirectDecider(login_path="/signin").resolve(ctx)
        assert ctx.redirect_situation is True
