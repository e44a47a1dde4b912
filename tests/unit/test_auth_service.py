"""Unit tests for AuthService: sign-in gate, admin creation, token checks."""

from unittest.mock import AsyncMock

import pytest

from app.application.services.auth_service import AuthService, auth_error_message
from app.core.constants import ADMIN_REQUIRED_MESSAGE
from app.domain.enums import AdminRole
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ValidationException,
)
from app.infrastructure.firebase.collections import COLLECTION_ADMINS
from app.infrastructure.firebase.repositories import FirestoreAdminRepository
from app.infrastructure.security.jwt import JWTTokenService
from tests.fakes import FakeFirestore, FakeIdentityProvider, seed_admin


@pytest.fixture
def cache() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def auth(firestore: FakeFirestore, identity: FakeIdentityProvider, cache: AsyncMock) -> AuthService:
    return AuthService(identity, FirestoreAdminRepository(firestore), JWTTokenService(), cache=cache)


async def test_sign_in_returns_session_and_stamps_last_login(
    auth: AuthService, firestore: FakeFirestore, identity: FakeIdentityProvider
) -> None:
    admin = seed_admin(firestore, identity)
    session = await auth.sign_in(admin.email, "smooth-sailing")
    assert session.admin.id == admin.id
    assert session.expires_in == 480 * 60
    stored = firestore.docs[COLLECTION_ADMINS][admin.id]
    assert stored["lastLogin"] != admin.last_login
    resolved = await auth.authenticate_token(session.access_token)
    assert resolved.email == admin.email


@pytest.mark.parametrize(
    ("password", "email", "message"),
    [
        ("wrong", "captain@example.com", "Incorrect password."),
        ("smooth-sailing", "nobody@example.com", "No account found with this email."),
    ],
)
async def test_sign_in_translates_provider_errors(
    auth: AuthService,
    firestore: FakeFirestore,
    identity: FakeIdentityProvider,
    password: str,
    email: str,
    message: str,
) -> None:
    seed_admin(firestore, identity)
    with pytest.raises(AuthenticationException) as exc_info:
        await auth.sign_in(email, password)
    assert exc_info.value.message == message


async def test_sign_in_without_admin_record_is_refused(
    auth: AuthService, identity: FakeIdentityProvider
) -> None:
    """A valid identity that is not on the allow-list is denied."""
    identity.add_account("uid-fan", "fan@example.com", "password1")
    with pytest.raises(AuthorizationException) as exc_info:
        await auth.sign_in("fan@example.com", "password1")
    assert exc_info.value.message == ADMIN_REQUIRED_MESSAGE


def test_unknown_provider_code_gets_generic_message() -> None:
    assert auth_error_message("SOMETHING_NEW") == "Authentication failed"
    assert auth_error_message("TOO_MANY_ATTEMPTS_TRY_LATER").startswith("Too many")


async def test_create_admin(auth: AuthService, firestore: FakeFirestore, identity: FakeIdentityProvider) -> None:
    admin = await auth.create_admin("new@example.com", "secret1", "  Skipper  ", AdminRole.EDITOR)
    assert admin.name == "Skipper"
    assert admin.role == "editor"
    assert firestore.docs[COLLECTION_ADMINS][admin.id]["email"] == "new@example.com"
    assert "new@example.com" in identity.accounts
    assert await auth.has_admin()


async def test_create_admin_errors(auth: AuthService, firestore: FakeFirestore) -> None:
    with pytest.raises(ValidationException):
        await auth.create_admin("new@example.com", "secret1", "   ")
    with pytest.raises(AuthenticationException) as exc_info:
        await auth.create_admin("new@example.com", "123", "Skipper")
    assert exc_info.value.message == "Password should be at least 6 characters."
    await auth.create_admin("new@example.com", "secret1", "Skipper")
    with pytest.raises(AuthenticationException) as exc_info:
        await auth.create_admin("new@example.com", "secret1", "Skipper")
    assert exc_info.value.message == "An account with this email already exists."


async def test_invalid_token(auth: AuthService) -> None:
    with pytest.raises(AuthenticationException):
        await auth.authenticate_token("not-a-jwt")


async def test_token_for_removed_admin_is_refused(
    auth: AuthService, firestore: FakeFirestore, identity: FakeIdentityProvider
) -> None:
    admin = seed_admin(firestore, identity)
    token = JWTTokenService().issue(admin.id)
    del firestore.docs[COLLECTION_ADMINS][admin.id]
    with pytest.raises(AuthorizationException):
        await auth.authenticate_token(token)


async def test_sign_out_clears_cache(
    auth: AuthService, firestore: FakeFirestore, identity: FakeIdentityProvider, cache: AsyncMock
) -> None:
    await auth.sign_out(seed_admin(firestore, identity))
    cache.clear.assert_awaited_once()


async def test_reset_password(auth: AuthService, identity: FakeIdentityProvider) -> None:
    identity.add_account("uid-1", "crew@example.com", "password1")
    await auth.reset_password("crew@example.com")
    assert identity.reset_requests == ["crew@example.com"]
    with pytest.raises(AuthenticationException):
        await auth.reset_password("ghost@example.com")


async def test_has_admin_false_on_empty_allow_list(auth: AuthService) -> None:
    assert not await auth.has_admin()
