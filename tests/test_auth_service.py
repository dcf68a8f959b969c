"""Tests for request authentication."""

import pytest

from diet_tracker.api.auth import bearer_token
from diet_tracker.domain.models import UserContext
from diet_tracker.services.auth import AuthenticationError, AuthService
from tests.conftest import TOKEN, USER_ID, FakeSessionResolver


class BrokenResolver:
    def resolve(self, token: str) -> UserContext | None:
        raise ConnectionError("auth provider unreachable")


def test_authenticate_valid_token() -> None:
    user = AuthService(FakeSessionResolver()).authenticate(f"  {TOKEN} ")

    assert user.user_id == USER_ID


@pytest.mark.parametrize("token", [None, "", "   ", "unknown"])
def test_authenticate_rejects_missing_or_unknown_tokens(token: str | None) -> None:
    with pytest.raises(AuthenticationError):
        AuthService(FakeSessionResolver()).authenticate(token)


def test_resolver_failures_become_authentication_errors() -> None:
    with pytest.raises(AuthenticationError) as error:
        AuthService(BrokenResolver()).authenticate(TOKEN)

    assert isinstance(error.value.__cause__, ConnectionError)


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        (f"Bearer {TOKEN}", TOKEN),
        (f"bearer {TOKEN}", TOKEN),
        ("Basic abc", None),
        ("Bearer", None),
        (None, None),
    ],
)
def test_bearer_token_parsing(header: str | None, expected: str | None) -> None:
    assert bearer_token(header) == expected
