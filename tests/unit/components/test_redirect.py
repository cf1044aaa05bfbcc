"""Tests for LoginRedirectBuilder."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

from fastapi_federated_gate.component import ComponentCategory
from fastapi_federated_gate.components.redirect import LoginRedirectBuilder
from fastapi_federated_gate.decisions import RedirectTo
from fastapi_federated_gate.routes import LOGIN_ROUTE


class TestLoginRedirectBuilder:
    def test_category_is_redirect(self) -> None:
        assert LoginRedirectBuilder.category == ComponentCategory.REDIRECT

    def test_no_pending_redirect_continues(
        self, make_ctx: Any, issue_token: MagicMock, url_builder: Any
    ) -> None:
        comp = LoginRedirectBuilder(issue_token, url_builder)
        assert comp.resolve(make_ctx("/login")) is None
        issue_token.assert_not_called()

    def test_builds_login_redirect(
        self, make_ctx: Any, issue_token: MagicMock, url_builder: Any
    ) -> None:
        ctx = make_ctx("/login")
        ctx.redirect_situation = True
        decision = LoginRedirectBuilder(issue_token, url_builder).resolve(ctx)
        assert decision == RedirectTo(
            LOGIN_ROUTE,
            {"requesttoken": "encrypted-token", "originalUrl": "", "idp": "corp"},
        )
        issue_token.assert_called_once_with()

    def test_redirect_url_made_absolute(
        self, make_ctx: Any, issue_token: MagicMock, url_builder: Any
    ) -> None:
        ctx = make_ctx("/login", params={"redirect_url": "/apps/files?dir=/docs"})
        ctx.redirect_situation = True
        decision = LoginRedirectBuilder(issue_token, url_builder).resolve(ctx)
        assert isinstance(decision, RedirectTo)
        assert (
            decision.params["originalUrl"]
            == "https://cloud.example.com/apps/files?dir=/docs"
        )

    def test_first_provider_is_default(
        self,
        make_ctx: Any,
        make_config: Any,
        issue_token: MagicMock,
        url_builder: Any,
    ) -> None:
        config = make_config(providers={"second": {}, "first": {}})
        ctx = make_ctx("/login", config=config)
        ctx.redirect_situation = True
        decision = LoginRedirectBuilder(issue_token, url_builder).resolve(ctx)
        assert isinstance(decision, RedirectTo)
        assert decision.params["idp"] == "second"

    def test_empty_registry_uses_empty_idp(
        self,
        make_ctx: Any,
        make_config: Any,
        issue_token: MagicMock,
        url_builder: Any,
    ) -> None:
        ctx = make_ctx("/login", config=make_config(providers={}))
        ctx.redirect_situation = True
        decision = LoginRedirectBuilder(issue_token, url_builder).resolve(ctx)
        assert isinstance(decision, RedirectTo)
        assert decision.params["idp"] == ""

    def test_custom_route(
        self, make_ctx: Any, issue_token: MagicMock, url_builder: Any
    ) -> None:
        ctx = make_ctx("/login")
        ctx.redirect_situation = True
        comp = LoginRedirectBuilder(issue_token, url_builder, route="sso.start")
        decision = comp.resolve(ctx)
        assert isinstance(decision, RedirectTo)
        assert decision.route == "sso.start"
