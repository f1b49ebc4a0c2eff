"""
Password sign-in endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel

from taskplanner.api.deps import AppSettings
from taskplanner.core.exceptions import AuthenticationError
from taskplanner.core.logger import setup_logger
from taskplanner.core.security import create_access_token, verify_password

logger = setup_logger(__name__)

router = APIRouter()

TOKEN_COOKIE = "token"


class SignInRequest(BaseModel):
    password: str = ""


class SignInResponse(BaseModel):
    token: str


@router.post("/signin", response_model=SignInResponse)
async def sign_in(
    payload: SignInRequest, settings: AppSettings, response: Response
) -> SignInResponse:
    """Exchange the shared password for a session token (also set as cookie)."""
    if not settings.auth_enabled:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Authentication is not enabled",
        )
    if not verify_password(payload.password, settings):
        logger.warning("Rejected sign-in attempt")
        raise AuthenticationError("Invalid password")

    token = create_access_token(settings)
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        max_age=settings.TODO_JWT_EXPIRE_MINUTES * 60,
        httponly=False,
        samesite="lax",
    )
    return SignInResponse(token=token)
