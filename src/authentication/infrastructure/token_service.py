# authentication/infrastructure/token_service.py

import jwt
from datetime import datetime, timedelta, timezone

from authentication.domain.entities import SessionClaim
from sales_inquiry.config import settings
from sales_inquiry.errors import InvalidToken

REQUIRED_CLAIMS = ["sub", "name", "access_scope", "iat", "exp"]


class TokenService:
    """Signs and checks the HS256 session tokens handed out at login/setup."""

    def __init__(
        self,
        secret_key: str | None = None,
        algorithm: str | None = None,
        ttl_hours: int | None = None,
    ):
        self.secret_key = secret_key or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.ttl = timedelta(hours=ttl_hours or settings.TOKEN_TTL_HOURS)

    def issue(self, claim: SessionClaim, issued_at: datetime | None = None) -> str:
        issued_at = issued_at or datetime.now(timezone.utc)
        payload = {
            "sub": claim.code,
            "name": claim.display_name,
            "access_scope": claim.access_scope,
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> SessionClaim:
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidToken("Invalid or expired token")
        except jwt.InvalidTokenError:
            raise InvalidToken("Invalid or expired token")

        return SessionClaim(
            code=payload["sub"],
            display_name=payload["name"],
            access_scope=payload["access_scope"],
        )


token_service = TokenService()
