# authentication/utils/password_utils.py

import bcrypt

from sales_inquiry.config import settings
from sales_inquiry.errors import ValidationError, WeakPassword

# bcrypt only looks at the first 72 bytes of the input
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int | None = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    # checkpw compares in constant time; a malformed stored hash counts as a mismatch
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def ensure_password_strength(password: str, message: str | None = None) -> None:
    minimum = settings.MIN_PASSWORD_LENGTH
    if len(password) < minimum:
        raise WeakPassword(message or f"Password must be at least {minimum} characters")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
