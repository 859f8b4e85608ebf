# authentication/application/auth_service.py

from typing import Union

from authentication.domain.entities import (
    AuthenticatedSession,
    Identity,
    NeedsPasswordSetup,
    SessionClaim,
)
from authentication.infrastructure.auth_repository import CredentialStore
from authentication.infrastructure.token_service import TokenService, token_service
from authentication.utils.password_utils import (
    ensure_password_strength,
    hash_password,
    verify_password,
)
from sales_inquiry.config import settings
from sales_inquiry.errors import (
    AlreadySet,
    InvalidCredentials,
    NotFound,
    ValidationError,
)
from utils.logging_factory import get_logger

logger = get_logger("authentication")

LoginResult = Union[AuthenticatedSession, NeedsPasswordSetup]


class AuthService:
    """First-login password setup, login and password change.

    Each call reads the employee once; setup and change write the new hash
    once, and only after every check has passed.
    """

    def __init__(self, repo: CredentialStore, tokens: TokenService | None = None):
        self.repo = repo
        self.tokens = tokens or token_service

    def _require(self, code: str) -> Identity:
        identity = self.repo.find_by_code(code)
        if identity is None:
            raise NotFound("Employee not found")
        return identity

    def _start_session(self, identity: Identity) -> AuthenticatedSession:
        claim = SessionClaim.from_identity(identity)
        return AuthenticatedSession(token=self.tokens.issue(claim), claim=claim)

    def login(self, code: str | None, password: str | None) -> LoginResult:
        if not code or not password:
            raise ValidationError("User code and password are required")

        identity = self._require(code)

        if not identity.password_set:
            logger.info(f"🔑 Employee {code} has no password yet, setup required.")
            return NeedsPasswordSetup(code=identity.code)

        if not verify_password(password, identity.password_hash):
            logger.warning(f"⚠️ Invalid password for employee {code}.")
            raise InvalidCredentials("Invalid password")

        logger.info(f"✅ Employee {code} logged in.")
        return self._start_session(identity)

    def setup_password(self, code: str | None, password: str | None) -> AuthenticatedSession:
        if not code or not password:
            raise ValidationError("User code and password are required")
        ensure_password_strength(password)

        identity = self._require(code)
        if identity.password_set:
            raise AlreadySet("Password already set. Please login.")

        if not self.repo.set_password_hash(identity.code, hash_password(password)):
            raise NotFound("Employee not found")

        logger.info(f"✅ Initial password created for employee {code}.")
        return self._start_session(identity)

    def change_password(
        self,
        claim: SessionClaim,
        current_password: str | None,
        new_password: str | None,
    ) -> None:
        if not current_password or not new_password:
            raise ValidationError("Current and new passwords are required")
        ensure_password_strength(
            new_password, f"New password must be at least {settings.MIN_PASSWORD_LENGTH} characters"
        )

        identity = self._require(claim.code)
        if not identity.password_set or not verify_password(current_password, identity.password_hash):
            logger.warning(f"⚠️ Wrong current password for employee {claim.code}.")
            raise InvalidCredentials("Current password is incorrect")

        if not self.repo.set_password_hash(identity.code, hash_password(new_password)):
            raise NotFound("Employee not found")

        logger.info(f"✅ Password changed for employee {claim.code}.")
