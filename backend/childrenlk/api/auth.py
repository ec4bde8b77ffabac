"""Session authentication and OTP password reset."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from childrenlk.config import Settings
from childrenlk.dependencies.auth import require_user_api
from childrenlk.dependencies.clients import get_mailer, get_settings_from_app
from childrenlk.models.base import get_db
from childrenlk.models.user import User
from childrenlk.schemas.common import SuccessResponse
from childrenlk.schemas.user import (
    ForgotPasswordRequest,
    LoginRequest,
    ResetPasswordRequest,
    SignupRequest,
    UserRead,
)
from childrenlk.services import account_service
from childrenlk.services.mailer import Mailer

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=UserRead)
async def signup(
    body: SignupRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings_from_app),
):
    """Create a parent account."""
    return await account_service.signup(
        db, body.email, body.password, body.name, settings.password_min_length,
    )


@router.post("/login", response_model=UserRead)
async def login(body: LoginRequest, request: Request, db: AsyncSession = Depends(get_db)):
    user = await account_service.authenticate(db, body.email, body.password)
    request.session["user_id"] = str(user.id)
    return user


@router.post("/logout", response_model=SuccessResponse)
async def logout(request: Request):
    request.session.clear()
    return SuccessResponse()


@router.get("/me", response_model=UserRead)
async def me(user: User = Depends(require_user_api)):
    return user


@router.post("/forgot-password", response_model=SuccessResponse)
async def forgot_password(
    body: ForgotPasswordRequest,
    db: AsyncSession = Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
    settings: Settings = Depends(get_settings_from_app),
):
    """Email a 6-digit reset code valid for ``otp_ttl_minutes``."""
    await account_service.start_password_reset(db, mailer, body.email, settings.otp_ttl_minutes)
    return SuccessResponse()


@router.post("/reset-password", response_model=SuccessResponse)
async def reset_password(
    body: ResetPasswordRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings_from_app),
):
    await account_service.reset_password(
        db, body.email, body.otp, body.new_password, settings.password_min_length,
    )
    return SuccessResponse()
