# authentication/api/routes.py

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from authentication.application.auth_service import AuthService
from authentication.domain.entities import AuthenticatedSession, NeedsPasswordSetup, SessionClaim
from authentication.utils.dependencies import get_auth_service, get_current_claim
from sales_inquiry.errors import NotFound

router = APIRouter(tags=["Authentication"])


# --------
# Models
# --------
class LoginRequest(BaseModel):
    code: str | None = None
    password: str | None = None


class SetupPasswordRequest(BaseModel):
    code: str | None = None
    password: str | None = None


class ChangePasswordRequest(BaseModel):
    currentPassword: str | None = None
    newPassword: str | None = None


def _session_response(session: AuthenticatedSession) -> dict:
    return {
        "token": session.token,
        "user": {
            "code": session.claim.code,
            "name": session.claim.display_name,
        },
    }


# --------
# Endpoints
# --------
@router.post("/login", summary="Log in with employee code and password")
def login(request: LoginRequest, service: AuthService = Depends(get_auth_service)):
    try:
        result = service.login(request.code, request.password)
    except NotFound:
        # Unknown codes are a credential failure at login, not a 404
        raise HTTPException(status_code=401, detail="Invalid user code")

    if isinstance(result, NeedsPasswordSetup):
        return {"needsPasswordSetup": True, "code": result.code}
    return _session_response(result)


@router.post("/setup-password", summary="Create the first password for an employee")
def setup_password(request: SetupPasswordRequest, service: AuthService = Depends(get_auth_service)):
    session = service.setup_password(request.code, request.password)
    return _session_response(session)


@router.post("/change-password", summary="Change the password of the logged-in employee")
def change_password(
    request: ChangePasswordRequest,
    claim: SessionClaim = Depends(get_current_claim),
    service: AuthService = Depends(get_auth_service),
):
    service.change_password(claim, request.currentPassword, request.newPassword)
    return {"message": "Password changed successfully"}


@router.get("/me", summary="Session claim of the authenticated employee")
def me(claim: SessionClaim = Depends(get_current_claim)):
    return {"code": claim.code, "name": claim.display_name, "accessScope": claim.access_scope}
