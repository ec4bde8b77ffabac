"""Pydantic schemas for accounts, sessions and password reset."""

from uuid import UUID

from pydantic import EmailStr

from childrenlk.schemas.common import CamelModel, NonEmptyStr, OptionalPhone


class SignupRequest(CamelModel):
    email: EmailStr
    password: NonEmptyStr
    name: NonEmptyStr


class LoginRequest(CamelModel):
    email: EmailStr
    password: NonEmptyStr


class UserRead(CamelModel):
    id: UUID
    email: str
    name: str
    role: str
    avatar: str | None = None


class ProfileRead(CamelModel):
    name: str
    email: str
    avatar: str | None = None
    phone: str | None = None
    address: str | None = None


class ProfileUpdate(CamelModel):
    name: NonEmptyStr | None = None
    phone: OptionalPhone = None
    address: str | None = None
    avatar: str | None = None


class ChangePasswordRequest(CamelModel):
    current_password: NonEmptyStr
    new_password: NonEmptyStr


class ForgotPasswordRequest(CamelModel):
    email: EmailStr


class ResetPasswordRequest(CamelModel):
    email: EmailStr
    otp: NonEmptyStr
    new_password: NonEmptyStr
