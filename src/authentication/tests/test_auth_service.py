import pytest

from authentication.domain.entities import AuthenticatedSession, NeedsPasswordSetup, SessionClaim
from authentication.utils.password_utils import verify_password
from sales_inquiry.errors import (
    AlreadySet,
    InvalidCredentials,
    NotFound,
    ValidationError,
    WeakPassword,
)


def test_login_with_matching_password_returns_scoped_token(auth_service, tokens):
    result = auth_service.login("E001", "secret1")

    assert isinstance(result, AuthenticatedSession)
    claim = tokens.verify(result.token)
    assert claim == SessionClaim("E001", "Alice Tan", "R1")


def test_login_without_password_needs_setup(auth_service, store):
    for attempt in ["anything", "secret1", "x"]:
        result = auth_service.login("E002", attempt)
        assert result == NeedsPasswordSetup(code="E002")
    assert store.writes == 0


def test_login_wrong_password(auth_service):
    with pytest.raises(InvalidCredentials):
        auth_service.login("E001", "wrong-pass")


def test_login_unknown_code(auth_service):
    with pytest.raises(NotFound):
        auth_service.login("NOPE", "secret1")


@pytest.mark.parametrize("code,password", [("", "secret1"), ("E001", ""), (None, None)])
def test_login_requires_both_fields(auth_service, store, code, password):
    with pytest.raises(ValidationError):
        auth_service.login(code, password)
    assert store.reads == 0


def test_setup_then_login(auth_service, store, tokens):
    session = auth_service.setup_password("E002", "newpass1")

    assert tokens.verify(session.token).access_scope == "ALL"
    assert store.writes == 1
    assert verify_password("newpass1", store.identities["E002"].password_hash)

    result = auth_service.login("E002", "newpass1")
    assert isinstance(result, AuthenticatedSession)


def test_setup_twice_is_rejected(auth_service, store):
    auth_service.setup_password("E003", "first-pass")

    with pytest.raises(AlreadySet):
        auth_service.setup_password("E003", "second-pass")
    assert store.writes == 1
    assert verify_password("first-pass", store.identities["E003"].password_hash)


def test_setup_unknown_code(auth_service, store):
    with pytest.raises(NotFound):
        auth_service.setup_password("NOPE", "secret1")
    assert store.writes == 0


@pytest.mark.parametrize("password", ["a", "12345", "abcde"])
def test_setup_weak_password_never_writes(auth_service, store, password):
    with pytest.raises(WeakPassword):
        auth_service.setup_password("E002", password)
    assert store.writes == 0
    assert store.identities["E002"].password_hash is None


def test_setup_password_too_long_for_bcrypt(auth_service, store):
    with pytest.raises(ValidationError):
        auth_service.setup_password("E002", "x" * 73)
    assert store.writes == 0


def test_change_password(auth_service, store):
    claim = SessionClaim("E001", "Alice Tan", "R1")

    auth_service.change_password(claim, "secret1", "secret2")

    assert store.writes == 1
    assert isinstance(auth_service.login("E001", "secret2"), AuthenticatedSession)
    with pytest.raises(InvalidCredentials):
        auth_service.login("E001", "secret1")


def test_change_password_wrong_current(auth_service, store):
    claim = SessionClaim("E001", "Alice Tan", "R1")
    with pytest.raises(InvalidCredentials):
        auth_service.change_password(claim, "not-it", "secret2")
    assert store.writes == 0


def test_change_password_weak_new(auth_service, store):
    claim = SessionClaim("E001", "Alice Tan", "R1")
    with pytest.raises(WeakPassword):
        auth_service.change_password(claim, "secret1", "123")
    assert store.writes == 0


def test_change_password_identity_gone(auth_service, store):
    del store.identities["E001"]
    claim = SessionClaim("E001", "Alice Tan", "R1")
    with pytest.raises(NotFound):
        auth_service.change_password(claim, "secret1", "secret2")


def test_change_password_before_setup_is_invalid(auth_service, store):
    claim = SessionClaim("E002", "Bob Lim", "ALL")
    with pytest.raises(InvalidCredentials):
        auth_service.change_password(claim, "whatever", "secret2")
    assert store.identities["E002"].password_hash is None
