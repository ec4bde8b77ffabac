"""Profile of the logged-in user."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from childrenlk.config import Settings
from childrenlk.dependencies.auth import require_user_api
from childrenlk.dependencies.clients import get_settings_from_app
from childrenlk.models.base import get_db
from childrenlk.models.user import User
from childrenlk.schemas.common import SuccessResponse
from childrenlk.schemas.user import ChangePasswordRequest, ProfileRead, ProfileUpdate
from childrenlk.services import account_service

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileRead)
async def get_profile(user: User = Depends(require_user_api)):
    return user


@router.patch("", response_model=ProfileRead)
async def update_profile(
    body: ProfileUpdate,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    """Update name, phone, address or avatar. A blank phone clears it."""
    return await account_service.update_profile(db, user, body)


@router.post("/change-password", response_model=SuccessResponse)
async def change_password(
    body: ChangePasswordRequest,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings_from_app),
):
    await account_service.change_password(
        db, user, body.current_password, body.new_password, settings.password_min_length,
    )
    return SuccessResponse()
