"""Tests for Credential and AuthOutcome value objects."""

import dataclasses

import pytest

from src.domain.enums import AuthStatus
from src.domain.value_objects import AuthOutcome, Credential


class TestCredential:
    def test_repr_never_shows_password(self) -> None:
        credential = Credential(username="admin", password="s3cret")

        assert "s3cret" not in repr(credential)
        assert "admin" in repr(credential)

    @pytest.mark.parametrize(
        ("username", "password", "complete"),
        [("admin", "pw", True), ("", "pw", False), ("admin", "", False)],
    )
    def test_is_complete(self, username: str, password: str, complete: bool) -> None:
        assert Credential(username=username, password=password).is_complete is complete

    def test_is_immutable(self) -> None:
        credential = Credential(username="admin", password="pw")

        with pytest.raises(dataclasses.FrozenInstanceError):
            credential.username = "other"  # type: ignore[misc]


class TestAuthOutcomeFactories:
    def test_success(self) -> None:
        outcome = AuthOutcome.success()

        assert outcome.status is AuthStatus.SUCCESS
        assert outcome.message == "Authentication successful"
        assert outcome.is_success

    def test_invalid_credentials(self) -> None:
        outcome = AuthOutcome.invalid_credentials()

        assert outcome.status is AuthStatus.INVALID_CREDENTIALS
        assert outcome.message == "Invalid username or password"
        assert not outcome.is_success

    def test_backend_unavailable_includes_details(self) -> None:
        outcome = AuthOutcome.backend_unavailable("HTTP 503")

        assert outcome.status is AuthStatus.BACKEND_UNAVAILABLE
        assert outcome.message == "Backend service unavailable: HTTP 503"

    def test_invalid_input(self) -> None:
        outcome = AuthOutcome.invalid_input()

        assert outcome.status is AuthStatus.INVALID_INPUT
        assert outcome.message == "Username and password are required"

    def test_equal_outcomes_compare_equal(self) -> None:
        assert AuthOutcome.success() == AuthOutcome.success()
        assert AuthOutcome.success() != AuthOutcome.invalid_input()


class TestAuthOutcomeConstruction:
    def test_direct_construction_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            AuthOutcome(AuthStatus.SUCCESS, "forged")

    def test_is_immutable(self) -> None:
        outcome = AuthOutcome.success()

        with pytest.raises(dataclasses.FrozenInstanceError):
            outcome.message = "changed"  # type: ignore[misc]
