"""Tests for src/application/services/navigation_guard.py.

Pure transitions are tested directly; the orchestrator is driven with a
fake health check and a real CredentialStore.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.application.services import ConsoleSession, NavigationGuard, resolve_target
from src.application.services.navigation_guard import (
    NavigationVerdict,
    on_auth_checked,
    on_entry,
    on_health_checked,
)
from src.domain.enums import NavigationDecision, NavigationState, ViewTarget


def _health(available: bool = True) -> AsyncMock:
    health = AsyncMock()
    health.is_backend_available.return_value = available
    return health


def _guard(health, logger: MagicMock, timeout: float = 3.0) -> NavigationGuard:
    return NavigationGuard(health_probe=health, health_check_timeout=timeout, logger=logger)


def _session(authenticated: bool = False) -> ConsoleSession:
    session = ConsoleSession(session_id="test-session-id")
    if authenticated:
        session.credentials.store("admin", "correct")
    return session


class TestResolveTarget:
    @pytest.mark.parametrize(
        ("path", "target"),
        [
            ("/backend-error", ViewTarget.BACKEND_ERROR),
            ("/backend-error/", ViewTarget.BACKEND_ERROR),
            ("/login", ViewTarget.LOGIN),
            ("/", ViewTarget.PROTECTED),
            ("/pages", ViewTarget.PROTECTED),
            ("/user-payments/7", ViewTarget.PROTECTED),
        ],
    )
    def test_resolves(self, path: str, target: ViewTarget) -> None:
        assert resolve_target(path) is target


class TestPureTransitions:
    def test_entry_to_backend_error_proceeds_without_chrome(self) -> None:
        step = on_entry(ViewTarget.BACKEND_ERROR)

        assert step.decision is NavigationDecision.PROCEED
        assert step.state is NavigationState.ALLOWED
        assert step.show_authenticated_chrome is False

    @pytest.mark.parametrize("target", [ViewTarget.LOGIN, ViewTarget.PROTECTED])
    def test_entry_otherwise_needs_health_check(self, target: ViewTarget) -> None:
        step = on_entry(target)

        assert step.state is NavigationState.ENTRY
        assert not step.is_terminal

    @pytest.mark.parametrize("target", [ViewTarget.LOGIN, ViewTarget.PROTECTED])
    def test_unavailable_redirects_to_backend_error(self, target: ViewTarget) -> None:
        step = on_health_checked(target, available=False)

        assert step.decision is NavigationDecision.REDIRECT_TO_BACKEND_ERROR

    def test_login_proceeds_after_health_check_without_chrome(self) -> None:
        step = on_health_checked(ViewTarget.LOGIN, available=True)

        assert step.decision is NavigationDecision.PROCEED
        assert step.show_authenticated_chrome is False

    def test_protected_continues_to_auth_check(self) -> None:
        step = on_health_checked(ViewTarget.PROTECTED, available=True)

        assert step.state is NavigationState.HEALTH_CHECKED
        assert not step.is_terminal

    def test_unauthenticated_redirects_to_login(self) -> None:
        step = on_auth_checked(authenticated=False)

        assert step.decision is NavigationDecision.REDIRECT_TO_LOGIN
        assert step.state is NavigationState.AUTH_CHECKED

    def test_authenticated_proceeds_with_chrome(self) -> None:
        step = on_auth_checked(authenticated=True)

        assert step.decision is NavigationDecision.PROCEED
        assert step.state is NavigationState.ALLOWED
        assert step.show_authenticated_chrome is True

    def test_verdict_rejects_non_terminal_step(self) -> None:
        with pytest.raises(ValueError):
            NavigationVerdict.from_step(on_entry(ViewTarget.PROTECTED))


class TestNavigationGuardEvaluate:
    @pytest.mark.asyncio
    async def test_backend_error_view_skips_health_check(self, mock_logger: MagicMock) -> None:
        health = _health(available=False)

        verdict = await _guard(health, mock_logger).evaluate("/backend-error", _session(True))

        assert verdict.decision is NavigationDecision.PROCEED
        assert verdict.show_authenticated_chrome is False
        health.is_backend_available.assert_not_called()

    @pytest.mark.asyncio
    async def test_login_view_skips_auth_check(self, mock_logger: MagicMock) -> None:
        session = _session(authenticated=False)
        session.credentials = MagicMock(wraps=session.credentials)

        verdict = await _guard(_health(), mock_logger).evaluate("/login", session)

        assert verdict.decision is NavigationDecision.PROCEED
        assert verdict.redirect_to is None
        assert verdict.show_authenticated_chrome is False
        session.credentials.is_authenticated.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/", "/pages", "/users/3"])
    async def test_healthy_but_unauthenticated_redirects_to_login(
        self, mock_logger: MagicMock, path: str
    ) -> None:
        verdict = await _guard(_health(), mock_logger).evaluate(path, _session(False))

        assert verdict.decision is NavigationDecision.REDIRECT_TO_LOGIN
        assert verdict.redirect_to == "/login"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("authenticated", [True, False])
    @pytest.mark.parametrize("path", ["/", "/login", "/posts"])
    async def test_unavailable_backend_always_redirects_to_backend_error(
        self, mock_logger: MagicMock, authenticated: bool, path: str
    ) -> None:
        verdict = await _guard(_health(available=False), mock_logger).evaluate(
            path, _session(authenticated)
        )

        assert verdict.decision is NavigationDecision.REDIRECT_TO_BACKEND_ERROR
        assert verdict.redirect_to == "/backend-error"

    @pytest.mark.asyncio
    async def test_authenticated_proceeds_with_chrome(self, mock_logger: MagicMock) -> None:
        verdict = await _guard(_health(), mock_logger).evaluate("/pages", _session(True))

        assert verdict.decision is NavigationDecision.PROCEED
        assert verdict.show_authenticated_chrome is True

    @pytest.mark.asyncio
    async def test_health_check_timeout_redirects_to_backend_error(self, mock_logger: MagicMock) -> None:
        health = AsyncMock()

        async def hang() -> bool:
            await asyncio.sleep(10)
            return True

        health.is_backend_available.side_effect = hang

        verdict = await _guard(health, mock_logger, timeout=0.05).evaluate("/", _session(True))

        assert verdict.decision is NavigationDecision.REDIRECT_TO_BACKEND_ERROR

    @pytest.mark.asyncio
    async def test_health_check_raising_redirects_to_backend_error(self, mock_logger: MagicMock) -> None:
        health = AsyncMock()
        health.is_backend_available.side_effect = RuntimeError("health crashed")

        verdict = await _guard(health, mock_logger).evaluate("/", _session(True))

        assert verdict.decision is NavigationDecision.REDIRECT_TO_BACKEND_ERROR

    @pytest.mark.asyncio
    async def test_first_evaluation_initializes_layout_once(self, mock_logger: MagicMock) -> None:
        session = _session(True)
        guard = _guard(_health(), mock_logger)

        await guard.evaluate("/", session)
        await guard.evaluate("/pages", session)

        assert session.layout_initialized is True
        initialized_logs = [
            call for call in mock_logger.debug.call_args_list if call.args[0] == "layout_initialized"
        ]
        assert len(initialized_logs) == 1

    @pytest.mark.asyncio
    async def test_re_evaluated_on_every_navigation(self, mock_logger: MagicMock) -> None:
        health = _health()
        guard = _guard(health, mock_logger)
        session = _session(True)

        await guard.evaluate("/", session)
        await guard.evaluate("/", session)

        assert health.is_backend_available.await_count == 2
