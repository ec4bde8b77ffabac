"""Pydantic schemas for announcements, organizer applications, uploads and dashboards."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import EmailStr

from childrenlk.schemas.common import CamelModel, NonEmptyStr, OptionalPhone, OptionalStr


# --- Announcements ---

class AnnouncementCreate(CamelModel):
    title: NonEmptyStr
    description: NonEmptyStr
    is_live: bool = False


class AnnouncementUpdate(CamelModel):
    title: NonEmptyStr | None = None
    description: NonEmptyStr | None = None
    is_live: bool | None = None


class AnnouncementRead(CamelModel):
    id: UUID
    title: str
    description: str
    is_live: bool
    created_at: datetime
    updated_at: datetime


# --- Organizer applications ---

class OrganizerApplicationCreate(CamelModel):
    name: NonEmptyStr
    email: EmailStr
    phone: OptionalPhone = None
    message: OptionalStr = None


class OrganizerApplicationRead(CamelModel):
    id: UUID
    name: str
    email: str
    phone: str | None = None
    message: str | None = None
    created_at: datetime


# --- Uploads ---

class UploadRequest(CamelModel):
    """Base64 payload (or data URI) forwarded to the media host."""

    file: NonEmptyStr
    folder: NonEmptyStr | None = None
    resource_type: Literal["image", "video", "raw", "auto"] = "auto"


class UploadResponse(CamelModel):
    url: str
    public_id: str


# --- Dashboards ---

class AdminDashboardStats(CamelModel):
    """Pending submissions per type plus organizer applications."""

    resource_requests: int
    media_requests: int
    event_requests: int
    super_hero_requests: int
    organizer_requests: int


class OrganizerDashboardStats(CamelModel):
    resources_pending: int = 0
    resources_approved: int = 0
    media_pending: int = 0
    media_approved: int = 0
    events_pending: int = 0
    events_approved: int = 0
    super_hero_pending: int = 0
    super_hero_approved: int = 0
