"""Authentication helpers: password hashing with bcrypt and one-time codes."""

import secrets
from datetime import datetime, timedelta, timezone

import bcrypt

OTP_DIGITS = 6


def hash_password(password: str) -> str:
    """Hash a plaintext password using bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a bcrypt hash."""
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))


def generate_otp() -> str:
    """Uniformly random 6-digit code, leading zeros allowed."""
    return f"{secrets.randbelow(10 ** OTP_DIGITS):0{OTP_DIGITS}d}"


def otp_expiry(ttl_minutes: int, now: datetime | None = None) -> datetime:
    now = now or datetime.now(timezone.utc)
    return now + timedelta(minutes=ttl_minutes)


def as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; treat them as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def otp_matches(stored: str | None, expires_at: datetime | None, submitted: str, now: datetime | None = None) -> bool:
    """True when a code is stored, equals the submission exactly and has not expired."""
    if not stored or not expires_at:
        return False
    now = now or datetime.now(timezone.utc)
    if as_utc(expires_at) < now:
        return False
    return secrets.compare_digest(stored, submitted)
