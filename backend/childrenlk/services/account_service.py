"""Accounts: signup, login, profile and OTP password reset."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from childrenlk.errors import InvalidInput, NotFound, Unauthorized
from childrenlk.models.base import utcnow
from childrenlk.models.user import User
from childrenlk.schemas.user import ProfileUpdate
from childrenlk.services.auth_service import generate_otp, hash_password, otp_expiry, otp_matches, verify_password
from childrenlk.services.mailer import Mailer, MailerError

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def check_password_length(password: str, min_length: int) -> None:
    if len(password) < min_length:
        raise InvalidInput(f"Password must be at least {min_length} characters")


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == normalize_email(email)))
    return result.scalar_one_or_none()


async def ensure_email_available(db: AsyncSession, email: str) -> None:
    if await get_user_by_email(db, email):
        raise InvalidInput("An account with this email already exists")


async def signup(db: AsyncSession, email: str, password: str, name: str, min_length: int = 6) -> User:
    """Create a parent account."""
    check_password_length(password, min_length)
    await ensure_email_available(db, email)
    user = User(
        email=normalize_email(email),
        name=name,
        hashed_password=hash_password(password),
        role="parent",
    )
    db.add(user)
    await db.commit()
    logger.info("New parent account %s", user.email)
    return user


async def authenticate(db: AsyncSession, email: str, password: str) -> User:
    user = await get_user_by_email(db, email)
    if not user or not user.is_active or not verify_password(password, user.hashed_password):
        raise Unauthorized("Invalid email or password")
    user.last_login_at = utcnow()
    await db.commit()
    return user


async def update_profile(db: AsyncSession, user: User, changes: ProfileUpdate) -> User:
    """Apply the fields present in the request body; a blank phone clears it."""
    for field, value in changes.model_dump(exclude_unset=True).items():
        if field == "name" and value is None:
            continue
        setattr(user, field, value)
    await db.commit()
    return user


async def change_password(db: AsyncSession, user: User, current: str, new: str, min_length: int = 6) -> None:
    if not verify_password(current, user.hashed_password):
        raise InvalidInput("Current password is incorrect")
    check_password_length(new, min_length)
    user.hashed_password = hash_password(new)
    await db.commit()


async def start_password_reset(db: AsyncSession, mailer: Mailer, email: str, ttl_minutes: int = 10) -> None:
    """Store a fresh OTP on the account and email it.

    The code is committed before sending; a delivery failure is logged and
    the code stays valid.
    """
    user = await get_user_by_email(db, email)
    if not user:
        raise NotFound("No account found with this email")

    otp = generate_otp()
    user.otp = otp
    user.otp_expires_at = otp_expiry(ttl_minutes)
    await db.commit()

    try:
        await mailer.send_otp(user.email, otp, ttl_minutes)
    except MailerError:
        logger.warning("Could not deliver password reset OTP to %s", user.email, exc_info=True)


async def reset_password(db: AsyncSession, email: str, otp: str, new_password: str, min_length: int = 6) -> None:
    """Swap the password if the OTP matches and is unexpired; the code is single use."""
    user = await get_user_by_email(db, email)
    if not user or not otp_matches(user.otp, user.otp_expires_at, otp.strip()):
        raise InvalidInput("Invalid or expired OTP")
    check_password_length(new_password, min_length)

    user.hashed_password = hash_password(new_password)
    user.otp = None
    user.otp_expires_at = None
    await db.commit()
    logger.info("Password reset for %s", user.email)
