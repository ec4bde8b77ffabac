"""Pydantic schemas for published (approved) content."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from childrenlk.schemas.common import CamelModel, NonEmptyStr, OptionalStr, Phone
from childrenlk.schemas.content_request import DocumentFile, MediaFile


class OrganizationSummary(CamelModel):
    """Public organization info for nested responses."""

    id: UUID
    name: str
    logo: str | None = None
    short_description: str | None = None


class PublishedRead(CamelModel):
    id: UUID
    organization_id: UUID | None = None
    organization: OrganizationSummary | None = None
    created_at: datetime


class ResourceRead(PublishedRead):
    name: str
    short_description: str
    picture: str | None = None
    documents: list[DocumentFile] = []
    tags: list[str] = []
    target_audience: str
    age_group: str | None = None


class MediaRead(PublishedRead):
    name: str
    description: str
    content_type: str
    text_content: str | None = None
    files: list[MediaFile] = []
    tags: list[str] = []
    target_audience: str
    age_group: str | None = None


class EventRead(PublishedRead):
    name: str
    location: str
    start_date: datetime
    end_date: datetime | None = None
    description: str
    registration_link: str | None = None
    cover_image: str | None = None
    tags: list[str] = []
    target_audience: str
    age_group: str | None = None


class SuperHeroRead(PublishedRead):
    name: str
    icon: str
    icon_type: str
    icon_public_id: str | None = None
    phone: str
    short_description: str


# --- Admin-managed super heroes ---

class SuperHeroCreate(CamelModel):
    name: NonEmptyStr
    icon: NonEmptyStr
    icon_type: Literal["emoji", "image"] = "emoji"
    icon_public_id: OptionalStr = None
    phone: Phone
    short_description: NonEmptyStr
    organization_id: UUID | None = None


class SuperHeroUpdate(CamelModel):
    name: NonEmptyStr | None = None
    icon: NonEmptyStr | None = None
    icon_type: Literal["emoji", "image"] | None = None
    icon_public_id: str | None = None
    phone: Phone | None = None
    short_description: NonEmptyStr | None = None
    organization_id: UUID | None = None


# --- Download counts ---

class DownloadRecord(CamelModel):
    resource_id: UUID
    document_public_id: NonEmptyStr


class DownloadRecorded(CamelModel):
    success: bool = True
    count: int


class DocumentDownloads(CamelModel):
    document_public_id: str
    count: int


class DownloadSummary(CamelModel):
    resource_id: UUID
    total: int
    by_document: list[DocumentDownloads]
