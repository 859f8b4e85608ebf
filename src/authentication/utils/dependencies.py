# authentication/utils/dependencies.py

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from authentication.application.auth_service import AuthService
from authentication.domain.entities import SessionClaim
from authentication.infrastructure.auth_repository import CredentialStore, EmployeeRepository
from authentication.infrastructure.database_connection import close_connection, connect_database
from authentication.infrastructure.token_service import TokenService, token_service
from sales_inquiry.errors import Unauthenticated

# auto_error=False so a missing header surfaces as our own 401, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


def get_db_connection():
    """One connection per request, closed once the response is sent."""
    conn = connect_database()
    try:
        yield conn
    finally:
        close_connection(conn)


def get_token_service() -> TokenService:
    return token_service


def get_credential_store(conn=Depends(get_db_connection)) -> CredentialStore:
    return EmployeeRepository(conn)


def get_auth_service(
    repo: CredentialStore = Depends(get_credential_store),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(repo, tokens)


def get_current_claim(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> SessionClaim:
    """
    Validates the bearer token and returns the session claim.
    Raises Unauthenticated when no Bearer header is sent and
    InvalidToken when the signature or expiry check fails.
    """
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise Unauthenticated("Authentication required")
    return tokens.verify(credentials.credentials)
