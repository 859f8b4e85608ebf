# sales_inquiry/errors.py

from typing import Any, Dict


class SalesInquiryError(Exception):
    """Base error. `user_message` is always safe to send to the client."""

    code = "error"
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, user_message: str | None = None):
        self.user_message = user_message or self.default_message
        super().__init__(self.user_message)

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.user_message, "code": self.code}


class ValidationError(SalesInquiryError):
    code = "validation_error"
    status_code = 400
    default_message = "Invalid request."


class WeakPassword(ValidationError):
    code = "weak_password"
    default_message = "Password must be at least 6 characters"


class NotFound(SalesInquiryError):
    code = "not_found"
    status_code = 404
    default_message = "Employee not found"


class Unauthenticated(SalesInquiryError):
    code = "unauthenticated"
    status_code = 401
    default_message = "Authentication required"


class InvalidToken(SalesInquiryError):
    code = "invalid_token"
    status_code = 401
    default_message = "Invalid or expired token"


class InvalidCredentials(SalesInquiryError):
    code = "invalid_credentials"
    status_code = 401
    default_message = "Invalid password"


class AlreadySet(SalesInquiryError):
    code = "already_set"
    status_code = 400
    default_message = "Password already set. Please login."


class StoreUnavailable(SalesInquiryError):
    code = "store_unavailable"
    status_code = 500
    default_message = "Internal server error"
