#authentication/domain/entities.py

from dataclasses import dataclass
from typing import Optional


@dataclass
class Identity:
    code: str
    display_name: str
    password_hash: Optional[str]  # None until the first-login setup
    access_scope: str  # 'ALL' or an in-charge code prefix

    @property
    def password_set(self) -> bool:
        return self.password_hash is not None


@dataclass(frozen=True)
class SessionClaim:
    code: str
    display_name: str
    access_scope: str

    @classmethod
    def from_identity(cls, identity: Identity) -> "SessionClaim":
        return cls(
            code=identity.code,
            display_name=identity.display_name,
            access_scope=identity.access_scope,
        )


@dataclass(frozen=True)
class AuthenticatedSession:
    token: str
    claim: SessionClaim


@dataclass(frozen=True)
class NeedsPasswordSetup:
    code: str
